"""FastAPI routes for the storefront — catalog, cart, addresses and orders.

Thin adapters that translate HTTP requests into domain commands and reads.
The caller's identity arrives in the `X-Customer-ID` header.
"""

from fastapi import APIRouter, Header
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    AddAddressRequest,
    AddCategoryRequest,
    AddProductRequest,
    AddressIdResponse,
    AddressResponse,
    AddToCartRequest,
    CartLineResponse,
    CartResponse,
    CategoryResponse,
    CustomerIdResponse,
    OrderDetailResponse,
    OrderIdResponse,
    OrderResponse,
    PlaceOrderRequest,
    ProductResponse,
    RegisterCustomerRequest,
    RestockRequest,
    StatusResponse,
    UpdateCartLineRequest,
)
from ordering.cart.lines import AddCartLine, RemoveCartLine, UpdateCartLine
from ordering.cart.management import ClearCart, GetOrCreateCart
from ordering.cart.view import list_lines
from ordering.customer.addresses import AddAddress, RemoveAddress, SetDefaultAddress, list_addresses
from ordering.customer.registration import RegisterCustomer
from ordering.errors import LineNotFound
from ordering.order.placement import place_order
from ordering.order.queries import order_detail, orders_for
from ordering.product.catalog import all_categories
from ordering.product.management import AddCategory, AddProduct, RestockProduct
from ordering.product.product import Product


def _cart_id(customer_id: str) -> str:
    return current_domain.process(GetOrCreateCart(customer_id=customer_id), asynchronous=False)


def _product_response(product) -> ProductResponse:
    return ProductResponse(
        product_id=str(product.id),
        name=product.name,
        description=product.description,
        category_id=str(product.category_id) if product.category_id else None,
        price=product.price,
        stock=product.stock,
        image_url=product.image_url,
    )


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=list[ProductResponse])
async def list_products(category_id: str | None = None) -> list[ProductResponse]:
    """Active products, newest first, optionally limited to one category."""
    repo = current_domain.repository_for(Product)
    products = repo.in_category(category_id) if category_id else repo.active()
    return [_product_response(p) for p in products]


@product_router.get("/featured", response_model=list[ProductResponse])
async def featured_products() -> list[ProductResponse]:
    return [_product_response(p) for p in current_domain.repository_for(Product).featured()]


@product_router.get("/search", response_model=list[ProductResponse])
async def search_products(q: str) -> list[ProductResponse]:
    return [_product_response(p) for p in current_domain.repository_for(Product).search(q)]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return _product_response(current_domain.repository_for(Product).get(product_id))


@product_router.post("", status_code=201, response_model=ProductResponse)
async def add_product(body: AddProductRequest) -> ProductResponse:
    command = AddProduct(
        name=body.name,
        price=body.price,
        stock=body.stock,
        category_id=body.category_id,
        description=body.description,
        image_url=body.image_url,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return _product_response(current_domain.repository_for(Product).get(product_id))


@product_router.post("/{product_id}/restock", response_model=StatusResponse)
async def restock_product(product_id: str, body: RestockRequest) -> StatusResponse:
    current_domain.process(
        RestockProduct(product_id=product_id, quantity=body.quantity),
        asynchronous=False,
    )
    return StatusResponse()


# ---------------------------------------------------------------------------
# Category Router
# ---------------------------------------------------------------------------
category_router = APIRouter(prefix="/categories", tags=["categories"])


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    return [
        CategoryResponse(category_id=str(c.id), name=c.name, description=c.description)
        for c in all_categories()
    ]


@category_router.post("", status_code=201, response_model=CategoryResponse)
async def add_category(body: AddCategoryRequest) -> CategoryResponse:
    category_id = current_domain.process(
        AddCategory(name=body.name, description=body.description),
        asynchronous=False,
    )
    return CategoryResponse(category_id=category_id, name=body.name, description=body.description)


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartResponse)
async def view_cart(x_customer_id: str = Header()) -> CartResponse:
    """Cart lines priced from the current catalog."""
    contents = list_lines(_cart_id(x_customer_id))
    return CartResponse(
        cart_id=contents.cart_id,
        lines=[CartLineResponse(**vars(line)) for line in contents.lines],
        total=contents.total,
        item_count=contents.item_count,
    )


@cart_router.post("/items", response_model=StatusResponse)
async def add_to_cart(body: AddToCartRequest, x_customer_id: str = Header()) -> StatusResponse:
    command = AddCartLine(
        cart_id=_cart_id(x_customer_id),
        product_id=body.product_id,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.put("/items/{product_id}", response_model=StatusResponse)
async def update_cart_line(
    product_id: str, body: UpdateCartLineRequest, x_customer_id: str = Header()
) -> StatusResponse:
    command = UpdateCartLine(
        cart_id=_cart_id(x_customer_id),
        product_id=product_id,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.delete("/items/{product_id}", response_model=StatusResponse)
async def remove_cart_line(product_id: str, x_customer_id: str = Header()) -> StatusResponse:
    command = RemoveCartLine(cart_id=_cart_id(x_customer_id), product_id=product_id)
    if not current_domain.process(command, asynchronous=False):
        raise LineNotFound(product_id)
    return StatusResponse()


@cart_router.delete("", response_model=StatusResponse)
async def clear_cart(x_customer_id: str = Header()) -> StatusResponse:
    current_domain.process(ClearCart(cart_id=_cart_id(x_customer_id)), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Customer Router
# ---------------------------------------------------------------------------
customer_router = APIRouter(tags=["customers"])


@customer_router.post("/customers", status_code=201, response_model=CustomerIdResponse)
async def register_customer(body: RegisterCustomerRequest) -> CustomerIdResponse:
    command = RegisterCustomer(name=body.name, email=body.email, phone=body.phone)
    return CustomerIdResponse(customer_id=current_domain.process(command, asynchronous=False))


@customer_router.get("/addresses", response_model=list[AddressResponse])
async def get_addresses(x_customer_id: str = Header()) -> list[AddressResponse]:
    return [
        AddressResponse(
            address_id=str(a.id),
            street=a.street,
            city=a.city,
            postal_code=a.postal_code,
            country=a.country,
            is_default=a.is_default,
        )
        for a in list_addresses(x_customer_id)
    ]


@customer_router.post("/addresses", status_code=201, response_model=AddressIdResponse)
async def add_address(body: AddAddressRequest, x_customer_id: str = Header()) -> AddressIdResponse:
    command = AddAddress(
        customer_id=x_customer_id,
        street=body.street,
        city=body.city,
        postal_code=body.postal_code,
        country=body.country,
        is_default=body.is_default,
    )
    return AddressIdResponse(address_id=current_domain.process(command, asynchronous=False))


@customer_router.put("/addresses/{address_id}/default", response_model=StatusResponse)
async def set_default_address(address_id: str, x_customer_id: str = Header()) -> StatusResponse:
    current_domain.process(
        SetDefaultAddress(customer_id=x_customer_id, address_id=address_id),
        asynchronous=False,
    )
    return StatusResponse()


@customer_router.delete("/addresses/{address_id}", response_model=StatusResponse)
async def remove_address(address_id: str, x_customer_id: str = Header()) -> StatusResponse:
    current_domain.process(
        RemoveAddress(customer_id=x_customer_id, address_id=address_id),
        asynchronous=False,
    )
    return StatusResponse()


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def create_order(body: PlaceOrderRequest, x_customer_id: str = Header()) -> OrderIdResponse:
    """Convert the caller's cart into a pending order."""
    return OrderIdResponse(order_id=place_order(x_customer_id, body.address_id))


@order_router.get("", response_model=list[OrderResponse])
async def list_orders(x_customer_id: str = Header()) -> list[OrderResponse]:
    return [OrderResponse(**order) for order in orders_for(x_customer_id)]


@order_router.get("/{order_id}", response_model=OrderDetailResponse)
async def get_order(order_id: str, x_customer_id: str = Header()) -> OrderDetailResponse:
    return OrderDetailResponse(**order_detail(x_customer_id, order_id))
