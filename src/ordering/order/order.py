"""Order aggregate — the durable record of a placed order.

An order is created once, in `pending` status, with its lines priced at
the moment of placement. Line prices are snapshots and do not follow later
catalog price changes.
"""

from datetime import UTC, datetime
from decimal import Decimal as D
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Decimal, HasMany, Identifier, Integer, String

from ordering.domain import ordering
from ordering.order.events import OrderPlaced


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@ordering.entity(part_of="Order")
class OrderLine:
    product_id = Identifier(required=True)
    product_name = String(max_length=255)
    quantity = Integer(required=True, min_value=1)
    unit_price = Decimal(required=True, min_value=0, precision=10, scale=2)

    def subtotal(self):
        return self.unit_price * self.quantity


@ordering.aggregate
class Order:
    customer_id = Identifier(required=True)
    address_id = Identifier(required=True)
    lines = HasMany(OrderLine)
    total = Decimal(required=True, min_value=0, precision=12, scale=2)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    placed_at = DateTime()

    @invariant.post
    def total_must_equal_sum_of_lines(self):
        if not self.lines:
            return
        expected = sum((line.subtotal() for line in self.lines), D("0"))
        if self.total != expected:
            raise ValidationError({"total": [f"Order total {self.total} does not match line total {expected}"]})

    @classmethod
    def place(cls, customer_id, address_id, priced_lines):
        """Create a pending order from `(product_id, name, quantity, unit_price)` tuples."""
        if not priced_lines:
            raise ValidationError({"lines": ["An order needs at least one line"]})

        total = sum((unit_price * quantity for _, _, quantity, unit_price in priced_lines), D("0"))
        now = datetime.now(UTC)

        order = cls(
            customer_id=customer_id,
            address_id=address_id,
            total=total,
            status=OrderStatus.PENDING.value,
            placed_at=now,
        )
        with atomic_change(order):
            for product_id, name, quantity, unit_price in priced_lines:
                order.add_lines(
                    OrderLine(
                        product_id=product_id,
                        product_name=name,
                        quantity=quantity,
                        unit_price=unit_price,
                    )
                )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_id=str(customer_id),
                address_id=str(address_id),
                total=total,
                line_count=len(priced_lines),
                placed_at=now,
            )
        )
        return order
