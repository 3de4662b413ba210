"""Shopping Cart aggregate — one per customer, drained when an order is placed.

The cart holds (product, quantity) lines only. Prices are never stored on
the cart; they are read from the catalog whenever the cart is viewed or
turned into an order.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from ordering.cart.events import CartLineAdded, CartLineRemoved, CartLineUpdated
from ordering.domain import ordering
from ordering.errors import LineNotFound, OutOfStock


@ordering.entity(part_of="ShoppingCart")
class CartLine:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@ordering.aggregate
class ShoppingCart:
    customer_id = Identifier(required=True, unique=True)
    lines = HasMany(CartLine)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_per_product(self):
        product_ids = [str(line.product_id) for line in self.lines]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"lines": ["A product can appear only once in a cart"]})

    @classmethod
    def create(cls, customer_id):
        now = datetime.now(UTC)
        return cls(customer_id=customer_id, created_at=now, updated_at=now)

    def line_for(self, product_id):
        return next((line for line in self.lines if str(line.product_id) == str(product_id)), None)

    # -------------------------------------------------------------------
    # Line management
    # -------------------------------------------------------------------
    def add_line(self, product_id, quantity, available):
        """Add `quantity` units of a product, merging with an existing line.

        `available` is the product's stock on hand at the time of the call.
        The check is optimistic; stock is only reserved when an order is placed.
        """
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if quantity > available:
            raise OutOfStock(product_id, available)

        now = datetime.now(UTC)
        existing = self.line_for(product_id)
        if existing:
            existing.quantity += quantity
            line_quantity = existing.quantity
        else:
            self.add_lines(CartLine(product_id=product_id, quantity=quantity, added_at=now))
            line_quantity = quantity

        self.updated_at = now
        self.raise_(
            CartLineAdded(
                cart_id=str(self.id),
                product_id=str(product_id),
                quantity=quantity,
                line_quantity=line_quantity,
            )
        )

    def update_line(self, product_id, quantity, available=None):
        """Overwrite a line's quantity. Zero removes the line."""
        if quantity < 0:
            raise ValidationError({"quantity": ["Quantity cannot be negative"]})

        line = self.line_for(product_id)
        if line is None:
            raise LineNotFound(product_id)

        if quantity == 0:
            self.remove_line(product_id)
            return

        if available is not None and quantity > available:
            raise OutOfStock(product_id, available)

        previous_quantity = line.quantity
        line.quantity = quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartLineUpdated(
                cart_id=str(self.id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )

    def remove_line(self, product_id):
        """Remove a product's line. Returns False when there was nothing to remove."""
        line = self.line_for(product_id)
        if line is None:
            return False

        self.remove_lines(line)
        self.updated_at = datetime.now(UTC)
        self.raise_(CartLineRemoved(cart_id=str(self.id), product_id=str(product_id)))
        return True

    def clear(self):
        if self.lines:
            self.remove_lines(list(self.lines))
        self.updated_at = datetime.now(UTC)
