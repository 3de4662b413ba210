"""Storefront FastAPI application.

Serves the catalog, cart, address book and order endpoints. Commands are
processed synchronously within the `ordering` domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV controls which config overlay is applied:
#   - "test"       → event handlers fire right after each commit
#   - "production" → event handlers fire via the Engine (see server.py)
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notifications.channel import configure_channels
from ordering.api.errors import register_error_handlers
from ordering.domain import ordering
from ordering.utils.logging import configure_logging
from ordering.utils.settings import notification_settings

configure_logging()
ordering.init()

with ordering.domain_context():
    configure_channels(notification_settings())

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Catalog, cart and order placement",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the ordering domain context for each request."""
    with ordering.domain_context():
        response = await call_next(request)
    return response


register_error_handlers(app)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from ordering.api import (  # noqa: E402
    cart_router,
    category_router,
    customer_router,
    order_router,
    product_router,
)

app.include_router(product_router)
app.include_router(category_router)
app.include_router(cart_router)
app.include_router(customer_router)
app.include_router(order_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": ordering.name})
