"""Notification Dispatcher — detached, best-effort delivery of notifications.

Two kinds of notification leave the storefront after an order commits:

* Low-stock alerts are published to a durable queue. Transport failures are
  retried on a fixed backoff up to ``max_attempts`` times, then logged and
  dropped.
* Order confirmations are delivered to the order summary receiver with a
  single attempt. Failures are logged and dropped.

Work runs on a bounded thread pool. Callers get a ``Future`` back and are
never expected to wait on it; ``flush`` exists for tests and shutdown.
Nothing submitted here raises into the caller.
"""

import threading
import time
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor, wait

import structlog

from notifications.channel import ORDER_SUMMARY, QUEUE, configure_channels, get_channel

logger = structlog.get_logger(__name__)


class NotificationDispatcher:
    def __init__(
        self,
        queue_name: str = "low_stock_alerts",
        workers: int = 4,
        retry_interval: float = 5.0,
        max_attempts: int = 3,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.queue_name = queue_name
        self.retry_interval = retry_interval
        self.max_attempts = max(1, max_attempts)
        self.sleep = sleep
        self._executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="notifications")
        self._pending: set[Future] = set()
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: dict) -> "NotificationDispatcher":
        return cls(
            queue_name=settings.get("low_stock_queue", "low_stock_alerts"),
            workers=settings.get("notification_workers", 4),
            retry_interval=settings.get("notification_retry_interval", 5.0),
            max_attempts=settings.get("notification_max_attempts", 3),
        )

    # -------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------
    def publish_low_stock(self, product_id: str, name: str, remaining: int) -> Future:
        payload = {"product_id": str(product_id), "name": name, "remaining": int(remaining)}
        return self._submit(self._publish_with_retry, payload)

    def send_order_confirmation(self, user_contact: dict, order_summary: dict) -> Future:
        payload = {"customer": user_contact, "order": order_summary}
        return self._submit(self._deliver_summary, payload)

    def flush(self, timeout: float | None = None) -> bool:
        """Wait for outstanding notifications. Returns False on timeout."""
        with self._lock:
            pending = list(self._pending)
        _, not_done = wait(pending, timeout=timeout)
        return not not_done

    def shutdown(self, wait: bool = True):
        self._executor.shutdown(wait=wait)

    # -------------------------------------------------------------------
    # Workers
    # -------------------------------------------------------------------
    def _submit(self, fn, payload) -> Future:
        future = self._executor.submit(fn, payload)
        with self._lock:
            self._pending.add(future)
        future.add_done_callback(self._forget)
        return future

    def _forget(self, future: Future):
        with self._lock:
            self._pending.discard(future)

    def _publish_with_retry(self, payload: dict) -> bool:
        for attempt in range(1, self.max_attempts + 1):
            try:
                result = get_channel(QUEUE).publish(self.queue_name, payload)
                error = result.get("error")
                if result.get("status") == "sent":
                    logger.info(
                        "Low stock alert published",
                        queue=self.queue_name,
                        product_id=payload["product_id"],
                        remaining=payload["remaining"],
                        attempt=attempt,
                    )
                    return True
            except Exception as exc:
                error = str(exc)

            logger.warning(
                "Low stock alert publish failed",
                queue=self.queue_name,
                product_id=payload["product_id"],
                attempt=attempt,
                max_attempts=self.max_attempts,
                error=error,
            )
            if attempt < self.max_attempts:
                self.sleep(self.retry_interval)

        logger.error(
            "Low stock alert dropped",
            queue=self.queue_name,
            product_id=payload["product_id"],
            attempts=self.max_attempts,
        )
        return False

    def _deliver_summary(self, payload: dict) -> bool:
        order_id = payload["order"].get("id")
        try:
            result = get_channel(ORDER_SUMMARY).send(payload)
        except Exception:
            logger.exception("Order summary delivery raised", order_id=order_id)
            return False

        if result.get("status") != "sent":
            logger.warning("Order summary delivery failed", order_id=order_id, error=result.get("error"))
            return False

        logger.info("Order summary delivered", order_id=order_id, message_id=result.get("message_id"))
        return True


_dispatcher: NotificationDispatcher | None = None
_dispatcher_lock = threading.Lock()


def get_dispatcher(settings: dict | None = None) -> NotificationDispatcher:
    """Return the process-wide dispatcher, creating it from `settings` on first use."""
    global _dispatcher
    with _dispatcher_lock:
        if _dispatcher is None:
            if settings is not None:
                configure_channels(settings)
            _dispatcher = NotificationDispatcher.from_settings(settings or {})
        return _dispatcher


def reset_dispatcher():
    """Drain and discard the process-wide dispatcher (useful for testing)."""
    global _dispatcher
    with _dispatcher_lock:
        if _dispatcher is not None:
            _dispatcher.shutdown(wait=True)
        _dispatcher = None
