"""Outbound event models for the PagerDuty Events API v2.

Optional fields are left out of the wire payload entirely when they are
unset or empty; the service expects omission rather than nulls.
"""

import json
from datetime import datetime
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer

Action = Literal["trigger", "acknowledge", "resolve"]
Severity = Literal["critical", "error", "warning", "info"]


class WireModel(BaseModel):
    """Immutable model that drops unset optional fields when serialized."""

    # Non-finite floats are kept as-is so encoding can reject them
    model_config = ConfigDict(frozen=True, populate_by_name=True, ser_json_inf_nan="constants")

    # Wire names of fields that are also dropped when empty ("" or [])
    omit_empty: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _omit_unset(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        return {
            key: value
            for key, value in data.items()
            if value is not None
            and not (key in self.omit_empty and value in ("", [], ()))
        }


class Link(WireModel):
    """A link shown alongside the incident."""

    href: str
    text: str


class Image(WireModel):
    """An image shown alongside the incident, with optional link and alt text."""

    omit_empty = frozenset({"href", "alt"})

    src: str
    href: str | None = None
    alt: str | None = None


class Payload(WireModel):
    """Descriptive body of a trigger event."""

    omit_empty = frozenset({"timestamp", "component", "group", "class"})

    summary: str
    source: str
    severity: Severity
    timestamp: datetime | str | None = None
    component: str | None = None
    group: str | None = None
    class_: str | None = Field(default=None, alias="class")
    custom_details: Any = Field(default=None, description="Arbitrary JSON data, passed through as-is")


class Event(WireModel):
    """A trigger, acknowledge or resolve event for one routing key."""

    omit_empty = frozenset({"dedup_key", "images", "links", "client", "client_url"})

    routing_key: str
    action: Action = Field(alias="event_action")
    dedup_key: str | None = None
    images: tuple[Image, ...] = ()
    links: tuple[Link, ...] = ()
    client: str | None = None
    client_url: str | None = None
    payload: Payload | None = None

    @classmethod
    def trigger(cls, routing_key: str, payload: Payload, **fields: Any) -> "Event":
        return cls(routing_key=routing_key, action="trigger", payload=payload, **fields)

    @classmethod
    def acknowledge(cls, routing_key: str, dedup_key: str, **fields: Any) -> "Event":
        return cls(routing_key=routing_key, action="acknowledge", dedup_key=dedup_key, **fields)

    @classmethod
    def resolve(cls, routing_key: str, dedup_key: str, **fields: Any) -> "Event":
        return cls(routing_key=routing_key, action="resolve", dedup_key=dedup_key, **fields)

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-compatible request body."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        """Encode the request body, raising ValueError on NaN or infinite numbers."""
        return json.dumps(self.to_wire(), allow_nan=False, separators=(",", ":"))
