"""Cart management — resolving a customer's cart and emptying it."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.domain import ordering


def find_cart(customer_id) -> ShoppingCart | None:
    """Return the customer's cart, or None if they never had one."""
    repo = current_domain.repository_for(ShoppingCart)
    return repo._dao.query.filter(customer_id=str(customer_id)).all().first


@ordering.command(part_of="ShoppingCart")
class GetOrCreateCart:
    """Resolve the customer's cart, creating an empty one on first access."""

    customer_id = Identifier(required=True)


@ordering.command(part_of="ShoppingCart")
class ClearCart:
    cart_id = Identifier(required=True)


@ordering.command_handler(part_of=ShoppingCart)
class ManageCartHandler:
    @handle(GetOrCreateCart)
    def get_or_create_cart(self, command):
        cart = find_cart(command.customer_id)
        if cart is None:
            cart = ShoppingCart.create(customer_id=command.customer_id)
            current_domain.repository_for(ShoppingCart).add(cart)
        return str(cart.id)

    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        cart.clear()
        repo.add(cart)
