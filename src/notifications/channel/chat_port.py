"""Chat channel port — abstract interface for chat-bot messages."""

from abc import ABC, abstractmethod


class ChatPort(ABC):
    """Abstract interface for chat dispatch adapters."""

    @abstractmethod
    def send(self, text: str) -> dict:
        """Post a message to the configured chat.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
