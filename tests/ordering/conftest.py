import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


@pytest.fixture
def queue():
    """The fake low-stock queue the dispatcher publishes to."""
    from notifications.channel import QUEUE, configure_channels, get_channel
    from ordering.utils.settings import notification_settings

    configure_channels(notification_settings())
    return get_channel(QUEUE)


@pytest.fixture
def summaries():
    """The fake order summary receiver."""
    from notifications.channel import ORDER_SUMMARY, configure_channels, get_channel
    from ordering.utils.settings import notification_settings

    configure_channels(notification_settings())
    return get_channel(ORDER_SUMMARY)


@pytest.fixture
def dispatcher():
    from notifications.dispatcher import get_dispatcher
    from ordering.utils.settings import notification_settings

    return get_dispatcher(notification_settings())


@pytest.fixture
def add_product():
    """Factory that adds a product through the catalog command and returns its id."""
    from decimal import Decimal

    from ordering.product.management import AddProduct
    from protean import current_domain

    def _add(name="Avocado box", price="12.50", stock=60, **overrides):
        command = AddProduct(name=name, price=Decimal(price), stock=stock, **overrides)
        return current_domain.process(command, asynchronous=False)

    return _add


@pytest.fixture
def register_customer():
    """Factory that registers a customer with one address; returns (customer_id, address_id)."""
    from ordering.customer.addresses import AddAddress
    from ordering.customer.registration import RegisterCustomer
    from protean import current_domain

    def _register(name="Ana Torres", email="ana@example.com", phone="+51 999 000 111"):
        customer_id = current_domain.process(
            RegisterCustomer(name=name, email=email, phone=phone),
            asynchronous=False,
        )
        address_id = current_domain.process(
            AddAddress(
                customer_id=customer_id,
                street="Av. Arequipa 123",
                city="Lima",
                postal_code="15001",
                country="PE",
            ),
            asynchronous=False,
        )
        return customer_id, address_id

    return _register


@pytest.fixture
def fill_cart():
    """Factory that puts `{product_id: quantity}` into a customer's cart; returns the cart id."""
    from ordering.cart.lines import AddCartLine
    from ordering.cart.management import GetOrCreateCart
    from protean import current_domain

    def _fill(customer_id, quantities):
        cart_id = current_domain.process(GetOrCreateCart(customer_id=customer_id), asynchronous=False)
        for product_id, quantity in quantities.items():
            current_domain.process(
                AddCartLine(cart_id=cart_id, product_id=product_id, quantity=quantity),
                asynchronous=False,
            )
        return cart_id

    return _fill
