"""Error taxonomy for cart and order operations.

Caller-correctable failures are `ValidationError` subclasses and surface as
HTTP 400. Missing cart lines are `ObjectNotFoundError` (404). Commit-level
failures are Protean's own `TransactionError`.
"""

from protean.exceptions import ObjectNotFoundError, TransactionError, ValidationError

__all__ = [
    "EmptyCart",
    "InsufficientStock",
    "LineNotFound",
    "OutOfStock",
    "ProductNotFound",
    "TransactionError",
]


class EmptyCart(ValidationError):
    def __init__(self):
        super().__init__({"cart": ["Cart is empty"]})


class ProductNotFound(ValidationError):
    def __init__(self, product_id):
        self.product_id = str(product_id)
        super().__init__({"product_id": [f"Product {product_id} not found"]})


class InsufficientStock(ValidationError):
    """A line asks for more units than the product has on hand."""

    def __init__(self, product_id, name, available):
        self.product_id = str(product_id)
        self.name = name
        self.available = available
        super().__init__({"stock": [f"Only {available} items available for {name}"]})


class OutOfStock(ValidationError):
    """Raised by the cart when a requested quantity exceeds stock on hand."""

    def __init__(self, product_id, available):
        self.product_id = str(product_id)
        self.available = available
        super().__init__({"quantity": [f"Only {available} items available"]})


class LineNotFound(ObjectNotFoundError):
    def __init__(self, product_id):
        self.product_id = str(product_id)
        super().__init__(f"Item {product_id} not found in cart")
