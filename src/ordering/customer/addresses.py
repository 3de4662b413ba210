"""Address book — commands and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from ordering.customer.customer import Customer
from ordering.domain import ordering


@ordering.command(part_of="Customer")
class AddAddress:
    customer_id = Identifier(required=True)
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    postal_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)
    is_default = Boolean(default=False)


@ordering.command(part_of="Customer")
class SetDefaultAddress:
    customer_id = Identifier(required=True)
    address_id = Identifier(required=True)


@ordering.command(part_of="Customer")
class RemoveAddress:
    customer_id = Identifier(required=True)
    address_id = Identifier(required=True)


@ordering.command_handler(part_of=Customer)
class ManageAddressesHandler:
    @handle(AddAddress)
    def add_address(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        address = customer.add_address(
            street=command.street,
            city=command.city,
            postal_code=command.postal_code,
            country=command.country,
            is_default=command.is_default,
        )
        repo.add(customer)
        return str(address.id)

    @handle(SetDefaultAddress)
    def set_default_address(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        customer.set_default_address(command.address_id)
        repo.add(customer)

    @handle(RemoveAddress)
    def remove_address(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        customer.remove_address(command.address_id)
        repo.add(customer)


def list_addresses(customer_id) -> list:
    """The customer's addresses, default first."""
    customer = current_domain.repository_for(Customer).get(customer_id)
    return sorted(customer.addresses, key=lambda address: not address.is_default)
