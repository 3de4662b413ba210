"""Telegram chat adapter using the Bot API sendMessage endpoint."""

import httpx

from notifications.channel.chat_port import ChatPort

TELEGRAM_API = "https://api.telegram.org"


class TelegramChatAdapter(ChatPort):
    def __init__(
        self,
        bot_token: str,
        chat_id: str,
        timeout: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.bot_token = bot_token
        self.chat_id = chat_id
        self.timeout = timeout
        self.transport = transport

    @property
    def url(self) -> str:
        return f"{TELEGRAM_API}/bot{self.bot_token}/sendMessage"

    def send(self, text: str) -> dict:
        payload = {"chat_id": self.chat_id, "text": text, "parse_mode": "Markdown"}
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(self.url, json=payload)
        except httpx.HTTPError as exc:
            return {"message_id": None, "status": "failed", "error": str(exc)}

        if not response.is_success:
            return {
                "message_id": None,
                "status": "failed",
                "error": f"Telegram responded with HTTP {response.status_code}",
            }

        message_id = response.json().get("result", {}).get("message_id")
        return {"message_id": str(message_id) if message_id is not None else None, "status": "sent"}
