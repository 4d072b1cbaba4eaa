"""Domain entities for the customer bounded context."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime

NIL_UUID = uuid.UUID(int=0)

_CUSTOMER_STATUSES = ("active", "inactive", "suspended")
_ADDRESS_TYPES = ("shipping", "billing")
_CARD_TYPES = ("visa", "mastercard", "amex", "discover")


class ValidationError(ValueError):
    """Raised when an entity fails domain validation."""


def _blank(value: str) -> bool:
    return not value.strip()


@dataclass
class Address:
    """A shipping or billing address belonging to a customer."""

    address_id: uuid.UUID = NIL_UUID
    customer_id: uuid.UUID = NIL_UUID
    address_type: str = ""
    first_name: str = ""
    last_name: str = ""
    address_1: str = ""
    address_2: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""

    def validate(self) -> None:
        """Raise ValidationError if the address is not acceptable."""
        if _blank(self.address_type):
            raise ValidationError("address type is required")
        if self.address_type not in _ADDRESS_TYPES:
            raise ValidationError("address type must be shipping or billing")
        if _blank(self.address_1):
            raise ValidationError("address line 1 is required")
        if _blank(self.city):
            raise ValidationError("city is required")
        if _blank(self.state):
            raise ValidationError("state is required")
        if _blank(self.zip):
            raise ValidationError("zip code is required")

    def full_address(self) -> str:
        """Return the address formatted on one line."""
        parts = [self.address_1]
        if self.address_2:
            parts.append(self.address_2)
        parts.extend([self.city + ",", self.state, self.zip])
        return " ".join(parts)


@dataclass
class CreditCard:
    """A payment card belonging to a customer."""

    card_id: uuid.UUID = NIL_UUID
    customer_id: uuid.UUID = NIL_UUID
    card_type: str = ""
    card_number: str = ""
    card_holder_name: str = ""
    card_expires: str = ""
    card_cvv: str = ""

    def validate(self) -> None:
        """Raise ValidationError if the card is not acceptable."""
        if _blank(self.card_type):
            raise ValidationError("card type is required")
        if self.card_type not in _CARD_TYPES:
            raise ValidationError("card type must be visa, mastercard, amex, or discover")
        if _blank(self.card_number):
            raise ValidationError("card number is required")
        if _blank(self.card_holder_name):
            raise ValidationError("card holder name is required")
        if _blank(self.card_expires):
            raise ValidationError("card expiration is required")
        if _blank(self.card_cvv):
            raise ValidationError("card CVV is required")

    def masked_number(self) -> str:
        """Return the card number with all but the last four digits hidden."""
        if len(self.card_number) < 4:
            return self.card_number
        return "****-****-****-" + self.card_number[-4:]


@dataclass
class CustomerStatus:
    """One entry in a customer's status history."""

    id: int = 0
    customer_id: uuid.UUID = NIL_UUID
    old_status: str = ""
    new_status: str = ""
    changed_at: datetime | None = None

    def validate(self) -> None:
        """Raise ValidationError if the status change is not acceptable."""
        if not self.old_status and not self.new_status:
            raise ValidationError(
                "at least one of old_status or new_status must be provided"
            )
        if self.old_status and self.old_status not in _CUSTOMER_STATUSES:
            raise ValidationError("old_status must be active, inactive, or suspended")
        if self.new_status and self.new_status not in _CUSTOMER_STATUSES:
            raise ValidationError("new_status must be active, inactive, or suspended")


@dataclass
class Customer:
    """A customer together with addresses, cards and status history."""

    customer_id: str = ""
    username: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    default_shipping_address_id: uuid.UUID | None = None
    default_billing_address_id: uuid.UUID | None = None
    default_credit_card_id: uuid.UUID | None = None
    customer_since: datetime | None = None
    customer_status: str = ""
    status_date_time: datetime | None = None
    addresses: list[Address] = field(default_factory=list)
    credit_cards: list[CreditCard] = field(default_factory=list)
    status_history: list[CustomerStatus] = field(default_factory=list)

    def validate(self) -> None:
        """Raise ValidationError if the customer is not acceptable."""
        if _blank(self.username):
            raise ValidationError("username is required")
        if len(self.username.encode("utf-8")) < 3:
            raise ValidationError("username must be at least 3 characters")
        if self.email and "@" not in self.email:
            raise ValidationError("email must be valid format")
        if self.customer_status and self.customer_status not in _CUSTOMER_STATUSES:
            raise ValidationError(
                "customer status must be active, inactive, or suspended"
            )

    def is_active(self) -> bool:
        """Return True if the customer's status is active."""
        return self.customer_status == "active"

    def full_name(self) -> str:
        """Return first and last name joined by a space, skipping empty parts."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)