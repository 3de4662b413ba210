"""Cart line management — commands and handler.

Adding and updating lines checks the requested quantity against current
stock on hand. Nothing is reserved; the order placement re-validates.
"""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.domain import ordering
from ordering.product.stock import check_availability


@ordering.command(part_of="ShoppingCart")
class AddCartLine:
    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@ordering.command(part_of="ShoppingCart")
class UpdateCartLine:
    """Set a line's quantity; zero removes the line."""

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=0)


@ordering.command(part_of="ShoppingCart")
class RemoveCartLine:
    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)


@ordering.command_handler(part_of=ShoppingCart)
class ManageCartLinesHandler:
    @handle(AddCartLine)
    def add_cart_line(self, command):
        _, on_hand = check_availability(command.product_id, command.quantity)

        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        cart.add_line(
            product_id=command.product_id,
            quantity=command.quantity,
            available=on_hand,
        )
        repo.add(cart)

    @handle(UpdateCartLine)
    def update_cart_line(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)

        available = None
        if command.quantity > 0 and cart.line_for(command.product_id) is not None:
            _, available = check_availability(command.product_id, command.quantity)

        cart.update_line(
            product_id=command.product_id,
            quantity=command.quantity,
            available=available,
        )
        repo.add(cart)

    @handle(RemoveCartLine)
    def remove_cart_line(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        removed = cart.remove_line(command.product_id)
        if removed:
            repo.add(cart)
        return removed
