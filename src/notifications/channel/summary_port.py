"""Order summary channel port — delivers a placed order to the summary receiver."""

from abc import ABC, abstractmethod


class OrderSummaryPort(ABC):
    """Abstract interface for order summary delivery adapters."""

    @abstractmethod
    def send(self, payload: dict) -> dict:
        """Deliver an order summary payload ({"customer": ..., "order": ...}).

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
