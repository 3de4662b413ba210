"""FastAPI routes for the order summary receiver.

Renders the posted order summary and hands it to the email channel.
"""

import structlog
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from notifications.api.schemas import OrderSummaryRequest, OrderSummaryResponse
from notifications.channel import EMAIL, get_channel
from notifications.templates.order_summary import OrderSummaryTemplate

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["notifications"])


@router.post("/send-order-summary", response_model=OrderSummaryResponse)
async def send_order_summary(body: OrderSummaryRequest):
    """Email an order summary to the customer who placed the order."""
    content = OrderSummaryTemplate.render(body.model_dump(mode="json"))
    result = get_channel(EMAIL).send(
        to=body.customer.email,
        subject=content["subject"],
        body=content["body"],
    )

    if result.get("status") != "sent":
        logger.error("Order summary email failed", order_id=body.order.id, error=result.get("error"))
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Order summary could not be sent"},
        )

    logger.info("Order summary emailed", order_id=body.order.id, message_id=result.get("message_id"))
    return OrderSummaryResponse(
        success=True,
        message="Order summary sent",
        message_id=result.get("message_id"),
    )
