"""Storefront API package."""

from ordering.api.routes import (
    cart_router,
    category_router,
    customer_router,
    order_router,
    product_router,
)

__all__ = ["product_router", "category_router", "cart_router", "customer_router", "order_router"]
