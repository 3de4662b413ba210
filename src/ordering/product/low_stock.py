"""Low-stock alerting — hands committed LowStockDetected events to the dispatcher.

Runs after the Unit of Work that decremented the stock has committed, so an
alert is never published for a rolled-back order.
"""

import structlog
from protean import handle

from notifications.dispatcher import get_dispatcher
from ordering.domain import ordering
from ordering.product.events import LowStockDetected
from ordering.product.product import Product
from ordering.utils.settings import notification_settings

logger = structlog.get_logger(__name__)


@ordering.event_handler(part_of=Product)
class LowStockAlertHandler:
    @handle(LowStockDetected)
    def publish_alert(self, event: LowStockDetected) -> None:
        try:
            get_dispatcher(notification_settings()).publish_low_stock(
                product_id=str(event.product_id),
                name=event.name,
                remaining=event.remaining,
            )
        except Exception:
            logger.exception("Low stock alert could not be queued", product_id=str(event.product_id))
