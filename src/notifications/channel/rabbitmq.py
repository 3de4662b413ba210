"""RabbitMQ queue adapter backed by pika."""

import json
from uuid import uuid4

import pika

from notifications.channel.queue_port import QueuePort

PERSISTENT_DELIVERY_MODE = 2


class RabbitMQAdapter(QueuePort):
    """Publishes each message on a short-lived blocking connection.

    The queue is declared durable and messages are marked persistent, so an
    alert survives a broker restart once it has been accepted.
    """

    def __init__(self, url: str):
        self.parameters = pika.URLParameters(url)

    def publish(self, queue: str, payload: dict) -> dict:
        message_id = uuid4().hex
        connection = pika.BlockingConnection(self.parameters)
        try:
            channel = connection.channel()
            channel.queue_declare(queue=queue, durable=True)
            channel.basic_publish(
                exchange="",
                routing_key=queue,
                body=json.dumps(payload),
                properties=pika.BasicProperties(
                    content_type="application/json",
                    delivery_mode=PERSISTENT_DELIVERY_MODE,
                    message_id=message_id,
                ),
            )
        finally:
            connection.close()

        return {"message_id": message_id, "status": "sent"}
