"""HTTP order summary adapter — POSTs the summary as JSON to the receiver service."""

import httpx
import structlog

from notifications.channel.summary_port import OrderSummaryPort

logger = structlog.get_logger(__name__)


class HttpOrderSummaryAdapter(OrderSummaryPort):
    def __init__(self, url: str, timeout: float = 5.0, transport: httpx.BaseTransport | None = None):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    def send(self, payload: dict) -> dict:
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(self.url, json=payload)
        except httpx.HTTPError as exc:
            return {"message_id": None, "status": "failed", "error": str(exc)}

        if response.is_success:
            return {"message_id": response.headers.get("x-request-id"), "status": "sent"}

        return {
            "message_id": None,
            "status": "failed",
            "error": f"Receiver responded with HTTP {response.status_code}",
        }
