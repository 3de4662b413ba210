"""Fake order summary adapter — records delivered summaries for testing."""

from uuid import uuid4

from notifications.channel.summary_port import OrderSummaryPort


class FakeOrderSummaryAdapter(OrderSummaryPort):
    """Order summary adapter that records payloads in memory for test assertions."""

    def __init__(self):
        self.sent_summaries: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Order summary delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Order summary delivery failed"):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def send(self, payload: dict) -> dict:
        if not self.should_succeed:
            return {"message_id": None, "status": "failed", "error": self.failure_reason}

        message_id = f"summary-{uuid4().hex[:12]}"
        self.sent_summaries.append({"message_id": message_id, "payload": payload})
        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        """Clear delivered summaries (useful between tests)."""
        self.sent_summaries.clear()
        self.should_succeed = True
        self.failure_reason = "Order summary delivery failed"
