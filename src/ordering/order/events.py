"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Decimal, Identifier, Integer

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A cart was converted into a pending order and stock was taken."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    address_id = Identifier(required=True)
    total = Decimal(required=True)
    line_count = Integer(required=True)
    placed_at = DateTime(required=True)
