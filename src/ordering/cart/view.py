"""Cart contents, priced from the current catalog on every read.

The displayed total can differ from the eventual order total when prices
change between viewing the cart and placing the order.
"""

from dataclasses import dataclass, field
from decimal import Decimal

import structlog
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.product.product import Product

logger = structlog.get_logger(__name__)


@dataclass
class CartLineView:
    product_id: str
    name: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal
    image_url: str | None = None


@dataclass
class CartContents:
    cart_id: str
    lines: list[CartLineView] = field(default_factory=list)
    total: Decimal = Decimal("0.00")
    item_count: int = 0


def list_lines(cart_id) -> CartContents:
    cart = current_domain.repository_for(ShoppingCart).get(cart_id)
    products = current_domain.repository_for(Product)

    contents = CartContents(cart_id=str(cart.id))
    for line in cart.lines:
        product = products.get_or_none(line.product_id)
        if product is None:
            logger.warning(
                "Cart line references a missing product",
                cart_id=str(cart.id),
                product_id=str(line.product_id),
            )
            continue

        subtotal = product.price * line.quantity
        contents.lines.append(
            CartLineView(
                product_id=str(product.id),
                name=product.name,
                quantity=line.quantity,
                unit_price=product.price,
                subtotal=subtotal,
                image_url=product.image_url,
            )
        )
        contents.total += subtotal
        contents.item_count += line.quantity

    return contents
