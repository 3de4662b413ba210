"""Customer aggregate with its Address book.

Contact details feed the order confirmation summary. The address book keeps
exactly one default address whenever it is not empty, and never lets the
last address go.
"""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, DateTime, HasMany, String

from ordering.customer.events import (
    AddressAdded,
    AddressRemoved,
    CustomerRegistered,
    DefaultAddressChanged,
)
from ordering.domain import ordering


@ordering.entity(part_of="Customer")
class Address:
    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    postal_code: String(required=True, max_length=20)
    country: String(required=True, max_length=100)
    is_default: Boolean(default=False)


@ordering.aggregate
class Customer:
    name: String(required=True, max_length=150)
    email: String(required=True, max_length=254, unique=True)
    phone: String(max_length=30)
    addresses: HasMany(Address)
    registered_at: DateTime()

    @invariant.post
    def exactly_one_default_address_when_addresses_exist(self):
        if not self.addresses:
            return
        defaults = [a for a in self.addresses if a.is_default]
        if len(defaults) != 1:
            raise ValidationError({"addresses": ["Exactly one address must be marked as default"]})

    @invariant.post
    def email_must_look_like_an_address(self):
        if self.email and "@" not in self.email:
            raise ValidationError({"email": ["Invalid email address"]})

    @classmethod
    def register(cls, name, email, phone=None):
        customer = cls(name=name, email=email, phone=phone, registered_at=datetime.now(UTC))
        customer.raise_(
            CustomerRegistered(
                customer_id=str(customer.id),
                name=name,
                email=email,
            )
        )
        return customer

    def contact(self):
        return {"name": self.name, "email": self.email, "phone": self.phone}

    def address(self, address_id):
        address = next((a for a in self.addresses if str(a.id) == str(address_id)), None)
        if address is None:
            raise ObjectNotFoundError(f"Address {address_id} not found")
        return address

    def add_address(self, street, city, postal_code, country, is_default=False):
        # First address is always default
        if not self.addresses:
            is_default = True

        with atomic_change(self):
            if is_default:
                for addr in self.addresses:
                    addr.is_default = False

            address = Address(
                street=street,
                city=city,
                postal_code=postal_code,
                country=country,
                is_default=is_default,
            )
            self.add_addresses(address)

        self.raise_(
            AddressAdded(
                customer_id=str(self.id),
                address_id=str(address.id),
                city=city,
                country=country,
                is_default=is_default,
            )
        )
        return address

    def set_default_address(self, address_id):
        address = self.address(address_id)
        previous = next((a for a in self.addresses if a.is_default), None)

        with atomic_change(self):
            for addr in self.addresses:
                addr.is_default = False
            address.is_default = True

        self.raise_(
            DefaultAddressChanged(
                customer_id=str(self.id),
                address_id=str(address.id),
                previous_default_address_id=str(previous.id) if previous else None,
            )
        )

    def remove_address(self, address_id):
        address = self.address(address_id)
        if len(self.addresses) <= 1:
            raise ValidationError({"addresses": ["Cannot delete the only address"]})

        new_default = None
        with atomic_change(self):
            self.remove_addresses(address)
            if address.is_default:
                new_default = self.addresses[0]
                new_default.is_default = True

        self.raise_(
            AddressRemoved(
                customer_id=str(self.id),
                address_id=str(address_id),
                new_default_address_id=str(new_default.id) if new_default else None,
            )
        )
