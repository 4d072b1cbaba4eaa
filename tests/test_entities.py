import pytest

from shopping.entities import (
    Address,
    CreditCard,
    Customer,
    CustomerStatus,
    ValidationError,
)


@pytest.mark.parametrize(
    "customer, message",
    [
        (Customer(email="test@example.com", customer_status="active"), "username is required"),
        (
            Customer(username="ab", email="test@example.com", customer_status="active"),
            "username must be at least 3 characters",
        ),
        (
            Customer(username="testuser", email="invalid-email", customer_status="active"),
            "email must be valid format",
        ),
        (
            Customer(username="testuser", email="test@example.com", customer_status="invalid"),
            "customer status must be active, inactive, or suspended",
        ),
    ],
)
def test_customer_validate_errors(customer, message):
    with pytest.raises(ValidationError, match=message):
        customer.validate()


def test_customer_validate_valid():
    customer = Customer(username="testuser", email="test@example.com", customer_status="active")
    assert customer.validate() is None


def test_customer_blank_username_rejected():
    with pytest.raises(ValidationError, match="username is required"):
        Customer(username="   ").validate()


@pytest.mark.parametrize(
    "status, expected",
    [("active", True), ("inactive", False), ("suspended", False), ("", False)],
)
def test_customer_is_active(status, expected):
    assert Customer(customer_status=status).is_active() is expected


@pytest.mark.parametrize(
    "first, last, expected",
    [("John", "Doe", "John Doe"), ("John", "", "John"), ("", "Doe", "Doe"), ("", "", "")],
)
def test_customer_full_name(first, last, expected):
    assert Customer(first_name=first, last_name=last).full_name() == expected


def _address(**overrides):
    values = dict(
        address_type="shipping",
        address_1="123 Main St",
        city="Test City",
        state="TS",
        zip="12345",
    )
    values.update(overrides)
    return Address(**values)


def test_address_validate_valid():
    assert _address().validate() is None


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"address_type": ""}, "address type is required"),
        ({"address_type": "invalid"}, "address type must be shipping or billing"),
        ({"address_1": ""}, "address line 1 is required"),
        ({"city": " "}, "city is required"),
        ({"state": ""}, "state is required"),
        ({"zip": ""}, "zip code is required"),
    ],
)
def test_address_validate_errors(overrides, message):
    with pytest.raises(ValidationError, match=message):
        _address(**overrides).validate()


def test_address_full_address():
    addr = Address(
        address_1="123 Main St",
        address_2="Apt 4B",
        city="Test City",
        state="TS",
        zip="12345",
    )
    assert addr.full_address() == "123 Main St Apt 4B Test City, TS 12345"


def test_address_full_address_without_line_two():
    addr = Address(address_1="123 Main St", city="Test City", state="TS", zip="12345")
    assert addr.full_address() == "123 Main St Test City, TS 12345"


def _card(**overrides):
    values = dict(
        card_type="visa",
        card_number="card-1111",
        card_holder_name="John Doe",
        card_expires="12/25",
        card_cvv="123",
    )
    values.update(overrides)
    return CreditCard(**values)


def test_credit_card_validate_valid():
    assert _card().validate() is None


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"card_type": ""}, "card type is required"),
        ({"card_type": "invalid"}, "card type must be visa, mastercard, amex, or discover"),
        ({"card_number": ""}, "card number is required"),
        ({"card_holder_name": ""}, "card holder name is required"),
        ({"card_expires": ""}, "card expiration is required"),
        ({"card_cvv": ""}, "card CVV is required"),
    ],
)
def test_credit_card_validate_errors(overrides, message):
    with pytest.raises(ValidationError, match=message):
        _card(**overrides).validate()


@pytest.mark.parametrize(
    "number, expected",
    [("card-1111", "****-****-****-1111"), ("123", "123"), ("", "")],
)
def test_credit_card_masked_number(number, expected):
    assert CreditCard(card_number=number).masked_number() == expected


def test_customer_status_validate_valid():
    assert CustomerStatus(old_status="active", new_status="inactive").validate() is None


@pytest.mark.parametrize(
    "old, new, message",
    [
        ("invalid", "active", "old_status must be active, inactive, or suspended"),
        ("active", "invalid", "new_status must be active, inactive, or suspended"),
        ("", "", "at least one of old_status or new_status must be provided"),
    ],
)
def test_customer_status_validate_errors(old, new, message):
    with pytest.raises(ValidationError, match=message):
        CustomerStatus(old_status=old, new_status=new).validate()


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        Customer().validate()