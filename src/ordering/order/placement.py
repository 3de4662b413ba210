"""Order placement — turns a customer's cart into a pending order.

The whole handler runs in one Unit of Work, committed when it returns:

    1. resolve the customer's cart           (EmptyCart)
    2. load its lines                        (EmptyCart)
    3. price and validate every line         (ProductNotFound, InsufficientStock)
    4. create the order header and lines at the prices seen in step 3
    5. decrement stock for every line
    6. clear the cart
    7. commit                                (TransactionError)

Any failure before the commit discards everything. A version conflict on a
product at commit (another order took the same stock) re-runs the handler
in a fresh Unit of Work, so the retry validates against the new stock.

The confirmation summary is sent by an event handler that only runs after
the commit succeeded (see `ordering.order.confirmation`).
"""

from decimal import Decimal

import structlog
from protean import handle
from protean.exceptions import ExpectedVersionError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.cart.management import find_cart
from ordering.domain import ordering
from ordering.errors import EmptyCart, InsufficientStock, ProductNotFound, TransactionError
from ordering.order.order import Order
from ordering.product import stock
from ordering.product.product import Product

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class PlaceOrder:
    customer_id = Identifier(required=True)
    address_id = Identifier(required=True)


def place_order(customer_id, address_id) -> str:
    """Place an order from the customer's cart and return the new order id.

    A version conflict that outlasts the handler's retries is reported as a
    `TransactionError`; nothing was committed.
    """
    try:
        return current_domain.process(
            PlaceOrder(customer_id=customer_id, address_id=address_id),
            asynchronous=False,
        )
    except ExpectedVersionError as exc:
        logger.error(
            "Order placement gave up on a version conflict",
            customer_id=str(customer_id),
            error=str(exc),
        )
        raise TransactionError("Order could not be committed") from exc


def _price_and_validate(cart):
    """Return `(product, quantity, unit_price)` for every cart line, or raise."""
    products = current_domain.repository_for(Product)
    priced = []
    for line in cart.lines:
        product = products.get_or_none(line.product_id)
        if product is None:
            raise ProductNotFound(line.product_id)

        available, on_hand = product.check_availability(line.quantity)
        if not available:
            raise InsufficientStock(product.id, product.name, on_hand)

        priced.append((product, line.quantity, Decimal(product.price)))

    return priced


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        cart = find_cart(command.customer_id)
        if cart is None or not cart.lines:
            raise EmptyCart()

        priced = _price_and_validate(cart)

        order = Order.place(
            customer_id=command.customer_id,
            address_id=command.address_id,
            priced_lines=[
                (str(product.id), product.name, quantity, unit_price)
                for product, quantity, unit_price in priced
            ],
        )
        current_domain.repository_for(Order).add(order)

        for product, quantity, _ in priced:
            stock.decrement(product, quantity)

        cart.clear()
        current_domain.repository_for(ShoppingCart).add(cart)

        logger.debug(
            "Order staged for commit",
            order_id=str(order.id),
            customer_id=str(command.customer_id),
            total=str(order.total),
            lines=len(priced),
        )
        return str(order.id)
