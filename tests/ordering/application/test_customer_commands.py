"""Application tests for customer registration and the address book."""

import pytest
from ordering.customer.addresses import AddAddress, RemoveAddress, SetDefaultAddress, list_addresses
from ordering.customer.customer import Customer
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


def _add_address(customer_id, city, is_default=False):
    return current_domain.process(
        AddAddress(
            customer_id=customer_id,
            street="Calle 1",
            city=city,
            postal_code="08001",
            country="PE",
            is_default=is_default,
        ),
        asynchronous=False,
    )


class TestRegisterCustomer:
    def test_customer_persists(self, register_customer):
        customer_id, _ = register_customer()
        customer = current_domain.repository_for(Customer).get(customer_id)
        assert customer.contact()["email"] == "ana@example.com"


class TestAddressBook:
    def test_first_address_is_default(self, register_customer):
        customer_id, address_id = register_customer()
        addresses = list_addresses(customer_id)
        assert [str(a.id) for a in addresses] == [address_id]
        assert addresses[0].is_default is True

    def test_default_listed_first(self, register_customer):
        customer_id, first_id = register_customer()
        second_id = _add_address(customer_id, "Cusco", is_default=True)

        addresses = list_addresses(customer_id)

        assert [str(a.id) for a in addresses] == [second_id, first_id]

    def test_set_default(self, register_customer):
        customer_id, first_id = register_customer()
        second_id = _add_address(customer_id, "Cusco")

        current_domain.process(
            SetDefaultAddress(customer_id=customer_id, address_id=second_id),
            asynchronous=False,
        )

        defaults = [str(a.id) for a in list_addresses(customer_id) if a.is_default]
        assert defaults == [second_id]

    def test_remove_default_promotes_remaining(self, register_customer):
        customer_id, first_id = register_customer()
        second_id = _add_address(customer_id, "Cusco")

        current_domain.process(
            RemoveAddress(customer_id=customer_id, address_id=first_id),
            asynchronous=False,
        )

        addresses = list_addresses(customer_id)
        assert [str(a.id) for a in addresses] == [second_id]
        assert addresses[0].is_default is True

    def test_cannot_remove_last_address(self, register_customer):
        customer_id, address_id = register_customer()
        with pytest.raises(ValidationError):
            current_domain.process(
                RemoveAddress(customer_id=customer_id, address_id=address_id),
                asynchronous=False,
            )
        assert len(list_addresses(customer_id)) == 1

    def test_unknown_customer(self):
        with pytest.raises(ObjectNotFoundError):
            list_addresses("missing")
