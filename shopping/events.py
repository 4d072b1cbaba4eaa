"""Event contracts: the event interface and customer domain events."""

from __future__ import annotations

import json
import re
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Generic, TypeVar

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_TIME_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(Z|z|[+-]\d{2}:\d{2})$"
)

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class Event(ABC):
    """Common interface of every event."""

    @abstractmethod
    def type(self) -> str:
        """Return the event type name."""

    @abstractmethod
    def topic(self) -> str:
        """Return the topic the event belongs to."""

    @abstractmethod
    def payload(self) -> Any:
        """Return the event payload."""

    @abstractmethod
    def to_json(self) -> bytes:
        """Serialise the event to JSON."""


E = TypeVar("E", bound=Event)


class EventFactory(ABC, Generic[E]):
    """Rebuilds events of one kind from JSON."""

    @abstractmethod
    def from_json(self, data: bytes | str) -> E:
        """Return the event encoded in data."""


class EventType(str, Enum):
    """Well-known customer event types."""

    CUSTOMER_CREATED = "customer.created"
    CUSTOMER_UPDATED = "customer.updated"

    ADDRESS_ADDED = "address.add"
    ADDRESS_UPDATED = "address.update"
    ADDRESS_DELETED = "address.delete"

    CARD_ADDED = "card.add"
    CARD_UPDATED = "card.update"
    CARD_DELETED = "card.delete"

    DEFAULT_SHIPPING_ADDRESS_CHANGED = "default.shipping_address.changed"
    DEFAULT_BILLING_ADDRESS_CHANGED = "default.billing_address.changed"
    DEFAULT_CREDIT_CARD_CHANGED = "default.credit_card.changed"

    def __str__(self) -> str:
        return self.value


def _type_text(event_type: EventType | str) -> str:
    return event_type.value if isinstance(event_type, EventType) else event_type


def _coerce_event_type(value: Any) -> EventType | str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"event type must be a string, not {type(value).__name__}")
    try:
        return EventType(value)
    except ValueError:
        return value


def _format_time(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += f".{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return text + "Z"
    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _parse_time(value: Any) -> datetime:
    if value is None:
        return _ZERO_TIME
    if not isinstance(value, str):
        raise ValueError("timestamp must be a string")
    match = _TIME_RE.match(value)
    if match is None:
        raise ValueError(f"invalid timestamp: {value!r}")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    microsecond = int((fraction or "")[:6].ljust(6, "0"))
    if zone in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = 1 if zone[0] == "+" else -1
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute), int(second),
        microsecond, tzinfo=tz,
    )


def _string_field(obj: dict, key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _details_field(obj: dict) -> dict[str, str] | None:
    value = obj.get("details")
    if value is None:
        return None
    if not isinstance(value, dict) or not all(isinstance(v, str) for v in value.values()):
        raise ValueError("field 'details' must be an object of strings")
    return dict(value)


@dataclass
class CustomerEventPayload:
    """Data carried by a customer event."""

    customer_id: str = ""
    event_type: EventType | str = ""
    resource_id: str = ""
    details: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form, leaving out empty optional fields."""
        result: dict[str, Any] = {}
        if self.customer_id:
            result["customer_id"] = self.customer_id
        result["event_type"] = _type_text(self.event_type)
        if self.resource_id:
            result["resource_id"] = self.resource_id
        if self.details:
            result["details"] = {k: self.details[k] for k in sorted(self.details)}
        return result

    @classmethod
    def from_dict(cls, obj: Any) -> CustomerEventPayload:
        """Build a payload from its JSON object form."""
        if obj is None:
            return cls()
        if not isinstance(obj, dict):
            raise ValueError("payload must be a JSON object")
        return cls(
            customer_id=_string_field(obj, "customer_id"),
            event_type=_coerce_event_type(obj.get("event_type")),
            resource_id=_string_field(obj, "resource_id"),
            details=_details_field(obj),
        )


@dataclass
class CustomerEvent(Event):
    """An event in the customer domain."""

    id: str = ""
    event_type: EventType | str = ""
    timestamp: datetime = _ZERO_TIME
    event_payload: CustomerEventPayload = field(default_factory=CustomerEventPayload)

    def type(self) -> str:
        return _type_text(self.event_type)

    def topic(self) -> str:
        return "CustomerEvents"

    def payload(self) -> CustomerEventPayload:
        return self.event_payload

    def to_json(self) -> bytes:
        document = {
            "id": self.id,
            "type": _type_text(self.event_type),
            "timestamp": _format_time(self.timestamp),
            "payload": self.event_payload.to_dict(),
        }
        text = json.dumps(document, ensure_ascii=False, separators=(",", ":"))
        for char, escape in _HTML_ESCAPES.items():
            text = text.replace(char, escape)
        return text.encode("utf-8")


class CustomerEventFactory(EventFactory[CustomerEvent]):
    """Rebuilds customer events from JSON."""

    def from_json(self, data: bytes | str) -> CustomerEvent:
        document = json.loads(data)
        if not isinstance(document, dict):
            raise ValueError("customer event must be a JSON object")
        return CustomerEvent(
            id=_string_field(document, "id"),
            event_type=_coerce_event_type(document.get("type")),
            timestamp=_parse_time(document.get("timestamp")),
            event_payload=CustomerEventPayload.from_dict(document.get("payload")),
        )


def new_customer_event(
    customer_id: str,
    event_type: EventType | str,
    resource_id: str,
    details: dict[str, str] | None,
) -> CustomerEvent:
    """Create a customer event with a fresh id and the current time."""
    return CustomerEvent(
        id=str(uuid.uuid4()),
        event_type=event_type,
        timestamp=datetime.now().astimezone(),
        event_payload=CustomerEventPayload(
            customer_id=customer_id,
            event_type=event_type,
            resource_id=resource_id,
            details=details,
        ),
    )


def new_customer_created_event(customer_id, details):
    return new_customer_event(customer_id, EventType.CUSTOMER_CREATED, customer_id, details)


def new_customer_updated_event(customer_id, details):
    return new_customer_event(customer_id, EventType.CUSTOMER_UPDATED, customer_id, details)


def new_address_added_event(customer_id, address_id, details):
    return new_customer_event(customer_id, EventType.ADDRESS_ADDED, address_id, details)


def new_address_updated_event(customer_id, address_id, details):
    return new_customer_event(customer_id, EventType.ADDRESS_UPDATED, address_id, details)


def new_address_deleted_event(customer_id, address_id, details):
    return new_customer_event(customer_id, EventType.ADDRESS_DELETED, address_id, details)


def new_card_added_event(customer_id, card_id, details):
    return new_customer_event(customer_id, EventType.CARD_ADDED, card_id, details)


def new_card_updated_event(customer_id, card_id, details):
    return new_customer_event(customer_id, EventType.CARD_UPDATED, card_id, details)


def new_card_deleted_event(customer_id, card_id, details):
    return new_customer_event(customer_id, EventType.CARD_DELETED, card_id, details)


def new_default_shipping_address_changed_event(customer_id, address_id, details):
    return new_customer_event(
        customer_id, EventType.DEFAULT_SHIPPING_ADDRESS_CHANGED, address_id, details
    )


def new_default_billing_address_changed_event(customer_id, address_id, details):
    return new_customer_event(
        customer_id, EventType.DEFAULT_BILLING_ADDRESS_CHANGED, address_id, details
    )


def new_default_credit_card_changed_event(customer_id, card_id, details):
    return new_customer_event(
        customer_id, EventType.DEFAULT_CREDIT_CARD_CHANGED, card_id, details
    )