"""Pydantic request/response schemas for the storefront API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------
class AddCategoryRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None


class AddProductRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    price: Decimal = Field(..., ge=0)
    stock: int = Field(default=0, ge=0)
    category_id: str | None = None
    description: str | None = None
    image_url: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Avocado box",
                    "price": "12.50",
                    "stock": 60,
                    "category_id": "cat-fruit",
                    "description": "Six ripe Hass avocados",
                }
            ]
        }
    }


class RestockRequest(BaseModel):
    quantity: int = Field(..., ge=1)


class CategoryResponse(BaseModel):
    category_id: str
    name: str
    description: str | None = None


class ProductResponse(BaseModel):
    product_id: str
    name: str
    description: str | None = None
    category_id: str | None = None
    price: Decimal
    stock: int
    image_url: str | None = None


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(default=1, ge=1)


class UpdateCartLineRequest(BaseModel):
    quantity: int = Field(..., ge=0)


class CartLineResponse(BaseModel):
    product_id: str
    name: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal
    image_url: str | None = None


class CartResponse(BaseModel):
    cart_id: str
    lines: list[CartLineResponse]
    total: Decimal
    item_count: int


# ---------------------------------------------------------------------------
# Customers and addresses
# ---------------------------------------------------------------------------
class RegisterCustomerRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    email: str = Field(..., min_length=3, max_length=254)
    phone: str | None = None


class CustomerIdResponse(BaseModel):
    customer_id: str


class AddAddressRequest(BaseModel):
    street: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    postal_code: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    is_default: bool = False


class AddressIdResponse(BaseModel):
    address_id: str


class AddressResponse(BaseModel):
    address_id: str
    street: str
    city: str
    postal_code: str
    country: str
    is_default: bool = False


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class PlaceOrderRequest(BaseModel):
    address_id: str

    model_config = {"json_schema_extra": {"examples": [{"address_id": "addr-001"}]}}


class OrderIdResponse(BaseModel):
    order_id: str


class OrderLineResponse(BaseModel):
    product_id: str
    name: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


class OrderResponse(BaseModel):
    order_id: str
    placed_at: datetime | None = None
    total: Decimal
    status: str
    address: AddressResponse | None = None


class OrderDetailResponse(OrderResponse):
    lines: list[OrderLineResponse]


class StatusResponse(BaseModel):
    status: str = "ok"
