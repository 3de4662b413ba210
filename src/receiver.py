"""Order summary receiver — standalone service that emails order summaries.

Usage:
    uvicorn receiver:app --app-dir src --host 0.0.0.0 --port 3003
"""

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from notifications.api import summary_router
from notifications.channel import configure_channels
from ordering.domain import ordering
from ordering.utils.logging import configure_logging
from ordering.utils.settings import notification_settings

configure_logging()

with ordering.domain_context():
    configure_channels(notification_settings())

app = FastAPI(
    title="Order Summary Receiver",
    description="Renders order summaries and sends them by email",
)

app.include_router(summary_router)


@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok"})
