"""Order history and order detail reads for a single customer."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.customer.customer import Customer
from ordering.order.order import Order


def _address_book(customer_id) -> dict:
    customer = current_domain.repository_for(Customer).get_or_none(customer_id)
    if customer is None:
        return {}
    return {
        str(a.id): {
            "address_id": str(a.id),
            "street": a.street,
            "city": a.city,
            "postal_code": a.postal_code,
            "country": a.country,
            "is_default": a.is_default,
        }
        for a in customer.addresses
    }


def orders_for(customer_id) -> list[dict]:
    """The customer's orders, newest first."""
    orders = (
        current_domain.repository_for(Order)
        ._dao.query.filter(customer_id=str(customer_id))
        .order_by("-placed_at")
        .all()
        .items
    )
    addresses = _address_book(customer_id)
    return [
        {
            "order_id": str(order.id),
            "placed_at": order.placed_at,
            "total": order.total,
            "status": order.status,
            "address": addresses.get(str(order.address_id)),
        }
        for order in orders
    ]


def order_detail(customer_id, order_id) -> dict:
    order = current_domain.repository_for(Order).get_or_none(order_id)
    if order is None or str(order.customer_id) != str(customer_id):
        raise ObjectNotFoundError(f"Order {order_id} not found")

    return {
        "order_id": str(order.id),
        "placed_at": order.placed_at,
        "total": order.total,
        "status": order.status,
        "address": _address_book(customer_id).get(str(order.address_id)),
        "lines": [
            {
                "product_id": str(line.product_id),
                "name": line.product_name,
                "quantity": line.quantity,
                "unit_price": line.unit_price,
                "subtotal": line.subtotal(),
            }
            for line in order.lines
        ],
    }
