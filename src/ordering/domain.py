"""Ordering bounded context — catalog, shopping cart, stock and order placement.

Products, carts, customers and orders share one domain so that placing an
order (drain the cart, decrement stock, persist the order) commits in a
single Unit of Work.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
