"""Low stock alert template — posted to the chat channel by the queue consumer."""

from datetime import UTC, datetime


class LowStockAlertTemplate:
    notification_type = "LowStockAlert"

    @staticmethod
    def render(context: dict) -> dict:
        name = context.get("name", "Unknown product")
        product_id = context.get("product_id", "N/A")
        remaining = context.get("remaining", 0)
        sent_at = context.get("sent_at") or datetime.now(UTC).strftime("%Y-%m-%d %H:%M UTC")
        return {
            "subject": f"Low stock: {name}",
            "body": (
                f"*Low stock alert*\n"
                f"Only *{remaining}* left of *{name}* (ID: {product_id}).\n"
                "Order soon before it sells out!\n\n"
                f"Time: {sent_at}"
            ),
        }
