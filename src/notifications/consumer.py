"""Low-stock consumer — drains the low-stock queue into the chat channel.

Run with ``python -m notifications.consumer``. Messages are acknowledged
once the chat channel accepts them and requeued otherwise. When the broker
connection drops the consumer reconnects after a fixed delay.
"""

import json
import time
from collections.abc import Callable

import pika
import structlog
from pika.exceptions import AMQPError

from notifications.channel import CHAT, configure_channels, get_channel
from notifications.channel.chat_port import ChatPort
from notifications.templates.low_stock_alert import LowStockAlertTemplate

logger = structlog.get_logger(__name__)

RECONNECT_DELAY = 5.0


def handle_low_stock_message(body: bytes, chat: ChatPort) -> bool:
    """Render one queued alert and post it. Returns True when it can be acknowledged."""
    try:
        alert = json.loads(body)
        content = LowStockAlertTemplate.render(alert)
        result = chat.send(content["body"])
    except Exception:
        logger.exception("Low stock message could not be processed")
        return False

    if result.get("status") != "sent":
        logger.warning(
            "Low stock chat notification failed",
            product_id=alert.get("product_id"),
            error=result.get("error"),
        )
        return False

    logger.info("Low stock chat notification sent", product_id=alert.get("product_id"), name=alert.get("name"))
    return True


class LowStockConsumer:
    def __init__(
        self,
        url: str,
        queue_name: str,
        chat: ChatPort,
        reconnect_delay: float = RECONNECT_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.parameters = pika.URLParameters(url)
        self.queue_name = queue_name
        self.chat = chat
        self.reconnect_delay = reconnect_delay
        self.sleep = sleep
        self._running = False

    def on_message(self, channel, method, properties, body):
        if handle_low_stock_message(body, self.chat):
            channel.basic_ack(delivery_tag=method.delivery_tag)
        else:
            channel.basic_nack(delivery_tag=method.delivery_tag, requeue=True)

    def consume(self):
        """Consume until the connection closes or `stop` is called."""
        connection = pika.BlockingConnection(self.parameters)
        try:
            channel = connection.channel()
            channel.queue_declare(queue=self.queue_name, durable=True)
            channel.basic_qos(prefetch_count=1)
            channel.basic_consume(queue=self.queue_name, on_message_callback=self.on_message)
            logger.info("Waiting for low stock alerts", queue=self.queue_name)
            channel.start_consuming()
        finally:
            if connection.is_open:
                connection.close()

    def run(self):
        self._running = True
        while self._running:
            try:
                self.consume()
            except AMQPError as exc:
                logger.error("Broker connection lost", queue=self.queue_name, error=str(exc))

            if self._running:
                logger.info("Reconnecting to broker", delay=self.reconnect_delay)
                self.sleep(self.reconnect_delay)

    def stop(self):
        self._running = False


def main():
    from ordering.domain import ordering
    from ordering.utils.logging import configure_logging
    from ordering.utils.settings import notification_settings

    configure_logging()
    with ordering.domain_context():
        settings = notification_settings()

    configure_channels(settings)
    consumer = LowStockConsumer(settings["rabbitmq_url"], settings["low_stock_queue"], get_channel(CHAT))
    try:
        consumer.run()
    except KeyboardInterrupt:
        consumer.stop()


if __name__ == "__main__":
    main()
