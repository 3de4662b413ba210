"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Decimal, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Product")
class ProductAdded:
    """A product was added to the catalog."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    category_id = Identifier()
    price = Decimal(required=True)
    stock = Integer(required=True)
    added_at = DateTime(required=True)


@ordering.event(part_of="Product")
class StockReplenished:
    """Units were added to a product's stock on hand."""

    __version__ = 1

    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    new_stock = Integer(required=True)


@ordering.event(part_of="Product")
class LowStockDetected:
    """Stock on hand fell to or below the low-stock threshold after a decrement."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    remaining = Integer(required=True)
    threshold = Integer(required=True)
    detected_at = DateTime(required=True)
