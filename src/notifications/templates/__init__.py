"""Template registry — maps notification types to template classes."""

from notifications.templates.low_stock_alert import LowStockAlertTemplate
from notifications.templates.order_summary import OrderSummaryTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    LowStockAlertTemplate.notification_type: LowStockAlertTemplate,
    OrderSummaryTemplate.notification_type: OrderSummaryTemplate,
}


def get_template(notification_type: str):
    """Look up a template class by notification type string."""
    template_cls = TEMPLATE_REGISTRY.get(notification_type)
    if template_cls is None:
        raise ValueError(f"No template registered for notification type: {notification_type}")
    return template_cls
