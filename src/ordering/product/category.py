"""Category aggregate for grouping products in the catalog."""

from protean.fields import String, Text

from ordering.domain import ordering


@ordering.aggregate
class Category:
    name: String(required=True, max_length=100, unique=True)
    description: Text()
