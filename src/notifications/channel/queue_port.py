"""Queue channel port — abstract interface for durable message publishing."""

from abc import ABC, abstractmethod


class QueuePort(ABC):
    """Abstract interface for message queue adapters."""

    @abstractmethod
    def publish(self, queue: str, payload: dict) -> dict:
        """Publish a persistent message to a durable queue.

        Transport failures raise; the dispatcher owns the retry policy.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
