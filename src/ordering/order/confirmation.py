"""Order confirmation — sends the order summary once an order has committed.

Delivery is best effort. Nothing raised here reaches the caller that placed
the order.
"""

import structlog
from protean import handle
from protean.utils.globals import current_domain

from notifications.dispatcher import get_dispatcher
from ordering.customer.customer import Customer
from ordering.domain import ordering
from ordering.order.events import OrderPlaced
from ordering.order.order import Order
from ordering.utils.settings import notification_settings

logger = structlog.get_logger(__name__)


def order_summary(order: Order) -> dict:
    """JSON-ready summary of an order for the confirmation message."""
    return {
        "id": str(order.id),
        "placed_at": order.placed_at.isoformat() if order.placed_at else None,
        "status": order.status,
        "total": str(order.total),
        "lines": [
            {
                "name": line.product_name,
                "quantity": line.quantity,
                "unit_price": str(line.unit_price),
            }
            for line in order.lines
        ],
    }


@ordering.event_handler(part_of=Order)
class OrderConfirmationHandler:
    @handle(OrderPlaced)
    def send_confirmation(self, event: OrderPlaced) -> None:
        try:
            customer = current_domain.repository_for(Customer).get_or_none(event.customer_id)
            if customer is None:
                logger.warning(
                    "Order confirmation skipped, customer unknown",
                    order_id=str(event.order_id),
                    customer_id=str(event.customer_id),
                )
                return

            order = current_domain.repository_for(Order).get(event.order_id)
            get_dispatcher(notification_settings()).send_order_confirmation(
                customer.contact(), order_summary(order)
            )
        except Exception:
            logger.exception("Order confirmation could not be queued", order_id=str(event.order_id))
