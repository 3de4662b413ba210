"""Order summary template — emailed to the customer after an order is placed."""

from decimal import Decimal


class OrderSummaryTemplate:
    notification_type = "OrderSummary"

    @staticmethod
    def render(context: dict) -> dict:
        customer = context.get("customer", {})
        order = context.get("order", {})
        order_id = order.get("id", "N/A")

        lines = []
        total = Decimal("0.00")
        for line in order.get("lines", []):
            unit_price = Decimal(str(line.get("unit_price", "0")))
            quantity = int(line.get("quantity", 0))
            subtotal = unit_price * quantity
            total += subtotal
            lines.append(f"  {line.get('name', 'Item')}: {quantity} x {unit_price:.2f} = {subtotal:.2f}")

        return {
            "subject": f"Your order #{order_id}",
            "body": (
                f"Hi {customer.get('name', 'there')},\n\n"
                f"Thank you for your purchase! Order #{order_id} has been confirmed.\n\n"
                f"Placed: {order.get('placed_at', 'N/A')}\n"
                f"Status: {order.get('status', 'pending')}\n"
                f"Phone: {customer.get('phone') or 'Not provided'}\n\n"
                "Items:\n" + "\n".join(lines) + "\n\n"
                f"Order Total: {total:.2f}\n\n"
                "If you have any questions, just reply to this email."
            ),
        }
