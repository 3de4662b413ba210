"""Pydantic request/response models for the order summary receiver."""

from decimal import Decimal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Models
# ---------------------------------------------------------------------------
class SummaryCustomer(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str | None = None


class SummaryLine(BaseModel):
    name: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)
    unit_price: Decimal = Field(..., ge=0)


class SummaryOrder(BaseModel):
    id: str = Field(..., min_length=1)
    placed_at: str | None = None
    status: str = "pending"
    total: Decimal | None = None
    lines: list[SummaryLine] = Field(..., min_length=1)


class OrderSummaryRequest(BaseModel):
    customer: SummaryCustomer
    order: SummaryOrder

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer": {"name": "Ana Torres", "email": "ana@example.com", "phone": "+51 999 000 111"},
                    "order": {
                        "id": "9b2f0c1e",
                        "placed_at": "2026-01-15T10:30:00+00:00",
                        "status": "pending",
                        "total": "35.75",
                        "lines": [
                            {"name": "Avocado box", "quantity": 2, "unit_price": "12.50"},
                            {"name": "Coffee beans", "quantity": 1, "unit_price": "10.75"},
                        ],
                    },
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------
class OrderSummaryResponse(BaseModel):
    success: bool
    message: str
    message_id: str | None = None
