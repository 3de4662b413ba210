"""Catalog read queries over products and categories."""

from protean.utils.globals import current_domain
from protean.utils.query import Q

from ordering.domain import ordering
from ordering.product.category import Category
from ordering.product.product import Product

FEATURED_COUNT = 3


@ordering.repository(part_of=Product)
class ProductRepository:
    def active(self) -> list[Product]:
        return self.query.filter(is_active=True).order_by("-created_at").all().items

    def in_category(self, category_id) -> list[Product]:
        return (
            self.query.filter(is_active=True, category_id=str(category_id))
            .order_by("-created_at")
            .all()
            .items
        )

    def featured(self, count: int = FEATURED_COUNT) -> list[Product]:
        """The newest active products."""
        return self.query.filter(is_active=True).order_by("-created_at").limit(count).all().items

    def search(self, term: str) -> list[Product]:
        """Case-insensitive substring match over name or description."""
        criteria = Q(name__icontains=term) | Q(description__icontains=term)
        return self.query.filter(criteria).filter(is_active=True).order_by("name").all().items


def all_categories() -> list[Category]:
    return current_domain.repository_for(Category)._dao.query.order_by("name").all().items
