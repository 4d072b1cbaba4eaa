# shopping

Customer domain objects and customer event messages for a shopping service.

- `shopping.entities` defines `Customer`, `Address`, `CreditCard` and
  `CustomerStatus` as dataclasses. Each has a `validate()` method that raises
  `ValidationError`, a subclass of `ValueError`, when a rule is broken.
- `shopping.events` defines the `Event` and `EventFactory` base classes, the
  `EventType` enum, the `CustomerEvent` and `CustomerEventPayload` types, JSON
  serialisation, and `CustomerEventFactory`, which reads that JSON back into
  events.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Entities

```python
from shopping.entities import Customer, Address, CreditCard, ValidationError

customer = Customer(username="jdoe", email="jdoe@example.com",
                    first_name="John", last_name="Doe", customer_status="active")
customer.validate()            # passes; raises ValidationError otherwise
customer.is_active()           # True
customer.full_name()           # "John Doe"

address = Address(address_type="shipping", address_1="123 Main St",
                  address_2="Apt 4B", city="Test City", state="TS", zip="12345")
address.full_address()         # "123 Main St Apt 4B Test City, TS 12345"

card = CreditCard(card_type="visa", card_number="0000", card_holder_name="John Doe",
                  card_expires="12/25", card_cvv="000")
card.masked_number()           # "****-****-****-0000"

try:
    Customer(username="ab").validate()
except ValidationError as exc:
    print(exc)                 # username must be at least 3 characters
```

The validation rules are:

- `Customer`: the username must not be blank and must be at least 3 characters
  long. An e-mail address, if given, must contain `@`. A status, if given, must
  be `active`, `inactive` or `suspended`.
- `Address`: the type must be `shipping` or `billing`. Address line 1, city,
  state and zip must not be blank.
- `CreditCard`: the type must be `visa`, `mastercard`, `amex` or `discover`.
  Number, holder name, expiry and CVV must not be blank.
- `CustomerStatus`: at least one of `old_status` and `new_status` must be set.
  Each one that is set must be `active`, `inactive` or `suspended`.

`masked_number()` returns a card number shorter than four characters as it is.

## Events

```python
from shopping.events import (
    CustomerEventFactory, EventType, new_customer_created_event,
)

event = new_customer_created_event("customer-123", {"source": "signup"})
event.type()      # "customer.created"
event.topic()     # "CustomerEvents"
data = event.to_json()

restored = CustomerEventFactory().from_json(data)
assert restored.type() == EventType.CUSTOMER_CREATED.value
```

`new_customer_event(customer_id, event_type, resource_id, details)` creates an
event with a fresh UUID and the current local time. There is also a shortcut
for each event type:

- `new_customer_created_event` and `new_customer_updated_event`
- `new_address_added_event`, `new_address_updated_event` and
  `new_address_deleted_event`
- `new_card_added_event`, `new_card_updated_event` and `new_card_deleted_event`
- `new_default_shipping_address_changed_event`,
  `new_default_billing_address_changed_event` and
  `new_default_credit_card_changed_event`

Every customer event uses the topic `CustomerEvents`.

`to_json()` returns UTF-8 bytes with the fields `id`, `type`, `timestamp` and
`payload`. The timestamp is written in RFC 3339 form. In the payload, an empty
`customer_id`, `resource_id` or `details` is left out, and detail keys are
sorted. `CustomerEventFactory.from_json()` accepts bytes or a string and raises
`ValueError` on malformed input. A type it does not recognise is kept as a
plain string.

## What this package does not do

The package defines data types, validation and the JSON event format only. It
has no storage or database access. It does not publish or consume events on a
message broker. It has no HTTP service and no command-line program.

## Running the tests

```
pytest
```