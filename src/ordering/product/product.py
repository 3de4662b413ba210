"""Product aggregate — catalog entry and authoritative stock on hand.

Prices are exact decimals. Stock is only ever decremented through
`decrement_stock`, which refuses to go below zero and raises
`LowStockDetected` when the remaining quantity reaches the threshold.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Decimal, Identifier, Integer, String, Text

from ordering.domain import ordering
from ordering.errors import InsufficientStock
from ordering.product.events import LowStockDetected, ProductAdded, StockReplenished
from ordering.utils.settings import DEFAULT_LOW_STOCK_THRESHOLD


@ordering.aggregate
class Product:
    name: String(required=True, max_length=255)
    description: Text()
    category_id: Identifier()
    price: Decimal(required=True, min_value=0, precision=10, scale=2)
    stock: Integer(default=0, min_value=0)
    image_url: String(max_length=500)
    is_active: Boolean(default=True)
    created_at: DateTime()

    @classmethod
    def add(cls, name, price, stock=0, category_id=None, description=None, image_url=None):
        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            category_id=category_id,
            price=price,
            stock=stock,
            image_url=image_url,
            created_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                name=name,
                category_id=str(category_id) if category_id else None,
                price=product.price,
                stock=product.stock,
                added_at=now,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Stock ledger
    # -------------------------------------------------------------------
    def check_availability(self, quantity):
        """Return `(available, on_hand)` for a requested quantity. Read-only."""
        return quantity <= self.stock, self.stock

    def decrement_stock(self, amount, threshold=DEFAULT_LOW_STOCK_THRESHOLD):
        """Take `amount` units off the shelf and return the new stock on hand."""
        if amount <= 0:
            raise ValidationError({"amount": ["Amount must be positive"]})

        if self.stock - amount < 0:
            raise InsufficientStock(self.id, self.name, self.stock)

        self.stock -= amount

        if self.stock <= threshold:
            self.raise_(
                LowStockDetected(
                    product_id=str(self.id),
                    name=self.name,
                    remaining=self.stock,
                    threshold=threshold,
                    detected_at=datetime.now(UTC),
                )
            )

        return self.stock

    def restock(self, quantity):
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})

        self.stock += quantity
        self.raise_(
            StockReplenished(
                product_id=str(self.id),
                quantity=quantity,
                new_stock=self.stock,
            )
        )
