"""Stock ledger — availability checks and decrements against stock on hand.

Decrements run inside the caller's Unit of Work. Concurrent writers to the
same product are serialized by the aggregate version: the losing commit
fails with a version conflict and its handler is re-run against fresh stock.
"""

import structlog
from protean.utils.globals import current_domain

from ordering.errors import ProductNotFound
from ordering.product.product import Product
from ordering.utils.settings import low_stock_threshold

logger = structlog.get_logger(__name__)


def load_product(product_id) -> Product:
    product = current_domain.repository_for(Product).get_or_none(product_id)
    if product is None:
        raise ProductNotFound(product_id)
    return product


def check_availability(product_id, quantity: int) -> tuple[bool, int]:
    """Return whether `quantity` units are on hand, and how many there are."""
    return load_product(product_id).check_availability(quantity)


def decrement(product: Product, amount: int) -> int:
    """Decrement stock on an already-loaded product and stage it for commit."""
    threshold = low_stock_threshold()
    new_quantity = product.decrement_stock(amount, threshold=threshold)
    current_domain.repository_for(Product).add(product)

    if new_quantity <= threshold:
        logger.info(
            "Product stock at or below threshold",
            product_id=str(product.id),
            remaining=new_quantity,
            threshold=threshold,
        )

    return new_quantity
