"""Fake chat adapter — records chat messages for testing."""

from uuid import uuid4

from notifications.channel.chat_port import ChatPort


class FakeChatAdapter(ChatPort):
    def __init__(self):
        self.sent_messages: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Chat delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Chat delivery failed"):
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def send(self, text: str) -> dict:
        if not self.should_succeed:
            return {"message_id": None, "status": "failed", "error": self.failure_reason}

        message_id = f"chat-{uuid4().hex[:12]}"
        self.sent_messages.append({"message_id": message_id, "text": text})
        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        self.sent_messages.clear()
        self.should_succeed = True
        self.failure_reason = "Chat delivery failed"
