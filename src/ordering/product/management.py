"""Catalog management — commands and handler for categories, products and restocking."""

from protean import handle
from protean.fields import Decimal, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.product.category import Category
from ordering.product.product import Product


@ordering.command(part_of="Category")
class AddCategory:
    name = String(required=True, max_length=100)
    description = Text()


@ordering.command(part_of="Product")
class AddProduct:
    name = String(required=True, max_length=255)
    price = Decimal(required=True, min_value=0)
    stock = Integer(default=0, min_value=0)
    category_id = Identifier()
    description = Text()
    image_url = String(max_length=500)


@ordering.command(part_of="Product")
class RestockProduct:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@ordering.command_handler(part_of=Category)
class ManageCategoriesHandler:
    @handle(AddCategory)
    def add_category(self, command):
        category = Category(name=command.name, description=command.description)
        current_domain.repository_for(Category).add(category)
        return str(category.id)


@ordering.command_handler(part_of=Product)
class ManageProductsHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.add(
            name=command.name,
            price=command.price,
            stock=command.stock,
            category_id=command.category_id,
            description=command.description,
            image_url=command.image_url,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(RestockProduct)
    def restock_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.restock(command.quantity)
        repo.add(product)
