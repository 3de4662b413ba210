"""Channel adapter registry — pluggable notification delivery channels.

Provides singleton access to channel adapters. Fake adapters are used unless
`notification_adapters` is set to "live", in which case RabbitMQ, the HTTP
summary receiver, Telegram and SMTP adapters are built from the settings
passed to `configure_channels`.
"""

import threading

QUEUE = "queue"
ORDER_SUMMARY = "order_summary"
CHAT = "chat"
EMAIL = "email"

_channel_instances: dict[str, object] = {}
_settings: dict = {}
_channel_lock = threading.Lock()


def configure_channels(settings: dict):
    """Install notification settings and drop any adapters built from older ones."""
    with _channel_lock:
        if settings == _settings:
            return
        _settings.clear()
        _settings.update(settings)
        _channel_instances.clear()


def _live() -> bool:
    return _settings.get("notification_adapters", "fake") == "live"


def _build(channel_type: str):
    timeout = _settings.get("notification_timeout", 5.0)

    if channel_type == QUEUE:
        if _live():
            from notifications.channel.rabbitmq import RabbitMQAdapter

            return RabbitMQAdapter(_settings["rabbitmq_url"])
        from notifications.channel.fake_queue import FakeQueueAdapter

        return FakeQueueAdapter()

    if channel_type == ORDER_SUMMARY:
        if _live():
            from notifications.channel.http_summary import HttpOrderSummaryAdapter

            return HttpOrderSummaryAdapter(_settings["order_summary_url"], timeout=timeout)
        from notifications.channel.fake_summary import FakeOrderSummaryAdapter

        return FakeOrderSummaryAdapter()

    if channel_type == CHAT:
        if _live():
            from notifications.channel.telegram import TelegramChatAdapter

            return TelegramChatAdapter(
                _settings["telegram_bot_token"], _settings["telegram_chat_id"], timeout=timeout
            )
        from notifications.channel.fake_chat import FakeChatAdapter

        return FakeChatAdapter()

    if channel_type == EMAIL:
        if _live():
            from notifications.channel.smtp_email import SmtpEmailAdapter

            return SmtpEmailAdapter(
                host=_settings["smtp_host"],
                port=_settings["smtp_port"],
                sender=_settings["email_sender"],
                username=_settings.get("smtp_username", ""),
                password=_settings.get("smtp_password", ""),
                timeout=timeout,
            )
        from notifications.channel.fake_email import FakeEmailAdapter

        return FakeEmailAdapter()

    raise ValueError(f"Unknown channel type: {channel_type}")


def get_channel(channel_type: str):
    """Return the configured channel adapter (singleton per channel type).

    Args:
        channel_type: One of "queue", "order_summary", "chat", "email"
    """
    with _channel_lock:
        if channel_type not in _channel_instances:
            _channel_instances[channel_type] = _build(channel_type)
        return _channel_instances[channel_type]


def set_channel(channel_type: str, adapter):
    """Install a specific adapter instance for a channel type."""
    with _channel_lock:
        _channel_instances[channel_type] = adapter


def reset_channels():
    """Reset all channel singletons and settings (useful for testing)."""
    with _channel_lock:
        _channel_instances.clear()
        _settings.clear()
