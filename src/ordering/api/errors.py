"""HTTP error mapping for the storefront API."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import TransactionError
from protean.integrations.fastapi import register_exception_handlers

logger = structlog.get_logger(__name__)


async def transaction_error_handler(request: Request, exc: TransactionError) -> JSONResponse:
    """Commit failures answer with a generic body; details stay in the log."""
    logger.error("Transaction failed", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_error_handlers(app: FastAPI) -> None:
    """Map domain exceptions to HTTP responses.

    ValidationError → 400, ObjectNotFoundError → 404, InvalidStateError → 409,
    InvalidOperationError → 422 (Protean's mapping), TransactionError → 500.
    """
    register_exception_handlers(app)
    app.add_exception_handler(TransactionError, transaction_error_handler)
