"""Application tests for the notifications triggered by a committed order."""

from unittest.mock import patch

import pytest
from notifications.dispatcher import get_dispatcher
from ordering.errors import EmptyCart, InsufficientStock
from ordering.order.placement import place_order
from ordering.product.product import Product
from ordering.utils.settings import notification_settings
from protean import current_domain


def _flush():
    assert get_dispatcher(notification_settings()).flush(timeout=5)


class TestLowStockAlert:
    def test_crossing_threshold_publishes_one_alert(self, queue, add_product, register_customer, fill_cart):
        product_id = add_product(name="Avocado box", stock=45)
        customer_id, address_id = register_customer()
        fill_cart(customer_id, {product_id: 7})

        place_order(customer_id, address_id)
        _flush()

        assert len(queue.published) == 1
        message = queue.published[0]
        assert message["queue"] == "low_stock_alerts"
        assert message["payload"] == {"product_id": product_id, "name": "Avocado box", "remaining": 38}

    def test_above_threshold_publishes_nothing(self, queue, add_product, register_customer, fill_cart):
        product_id = add_product(stock=60)
        customer_id, address_id = register_customer()
        fill_cart(customer_id, {product_id: 10})

        place_order(customer_id, address_id)
        _flush()

        assert queue.published == []

    def test_failed_order_publishes_nothing(self, queue, add_product, register_customer, fill_cart):
        low = add_product(name="Coffee beans", stock=41)
        scarce = add_product(name="Saffron", stock=1)
        customer_id, address_id = register_customer()
        fill_cart(customer_id, {low: 5, scarce: 1})

        # Saffron sells out before checkout
        saffron = current_domain.repository_for(Product).get(scarce)
        saffron.stock = 0
        current_domain.repository_for(Product).add(saffron)

        with pytest.raises(InsufficientStock):
            place_order(customer_id, address_id)
        _flush()

        assert queue.published == []

    def test_broker_outage_is_retried_then_dropped(self, queue, add_product, register_customer, fill_cart):
        product_id = add_product(stock=45)
        customer_id, address_id = register_customer()
        fill_cart(customer_id, {product_id: 7})
        queue.configure(failures=10)

        order_id = place_order(customer_id, address_id)
        _flush()

        assert order_id
        assert queue.attempts == 3
        assert queue.published == []

    def test_transient_broker_failure_recovers(self, queue, add_product, register_customer, fill_cart):
        product_id = add_product(stock=45)
        customer_id, address_id = register_customer()
        fill_cart(customer_id, {product_id: 7})
        queue.configure(failures=2)

        place_order(customer_id, address_id)
        _flush()

        assert queue.attempts == 3
        assert len(queue.published) == 1


class TestOrderConfirmation:
    def test_summary_sent_after_commit(self, summaries, add_product, register_customer, fill_cart):
        avocado = add_product(name="Avocado box", price="12.50")
        coffee = add_product(name="Coffee beans", price="10.75")
        customer_id, address_id = register_customer()
        fill_cart(customer_id, {avocado: 2, coffee: 1})

        order_id = place_order(customer_id, address_id)
        _flush()

        assert len(summaries.sent_summaries) == 1
        payload = summaries.sent_summaries[0]["payload"]
        assert payload["customer"] == {
            "name": "Ana Torres",
            "email": "ana@example.com",
            "phone": "+51 999 000 111",
        }
        assert payload["order"]["id"] == order_id
        assert payload["order"]["status"] == "pending"
        assert payload["order"]["total"] == "35.75"
        assert {line["name"]: line["quantity"] for line in payload["order"]["lines"]} == {
            "Avocado box": 2,
            "Coffee beans": 1,
        }

    def test_receiver_failure_does_not_affect_order(self, summaries, add_product, register_customer, fill_cart):
        product_id = add_product()
        customer_id, address_id = register_customer()
        fill_cart(customer_id, {product_id: 1})
        summaries.configure(should_succeed=False)

        order_id = place_order(customer_id, address_id)
        _flush()

        assert order_id
        assert summaries.sent_summaries == []

    def test_dispatcher_error_does_not_affect_order(self, add_product, register_customer, fill_cart):
        product_id = add_product()
        customer_id, address_id = register_customer()
        fill_cart(customer_id, {product_id: 1})

        with patch(
            "notifications.dispatcher.NotificationDispatcher.send_order_confirmation",
            side_effect=RuntimeError("pool exhausted"),
        ):
            order_id = place_order(customer_id, address_id)

        assert order_id

    def test_no_summary_for_failed_order(self, summaries, register_customer):
        customer_id, address_id = register_customer()

        with pytest.raises(EmptyCart):
            place_order(customer_id, address_id)
        _flush()

        assert summaries.sent_summaries == []
