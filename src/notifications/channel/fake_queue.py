"""Fake queue adapter — records published messages for testing."""

from uuid import uuid4

from notifications.channel.queue_port import QueuePort


class FakeQueueAdapter(QueuePort):
    """Queue adapter that records messages in memory for test assertions."""

    def __init__(self):
        self.published: list[dict] = []
        self.attempts = 0
        self.failures_remaining = 0
        self.failure_reason = "Broker unreachable"

    def configure(self, failures: int = 0, failure_reason: str = "Broker unreachable"):
        """Make the next `failures` publish calls raise ConnectionError."""
        self.failures_remaining = failures
        self.failure_reason = failure_reason

    def publish(self, queue: str, payload: dict) -> dict:
        self.attempts += 1
        if self.failures_remaining > 0:
            self.failures_remaining -= 1
            raise ConnectionError(self.failure_reason)

        message_id = f"queue-{uuid4().hex[:12]}"
        self.published.append({"message_id": message_id, "queue": queue, "payload": payload})
        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        """Clear published messages (useful between tests)."""
        self.published.clear()
        self.attempts = 0
        self.failures_remaining = 0
        self.failure_reason = "Broker unreachable"
