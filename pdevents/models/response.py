"""Acknowledgment returned by the Events API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EventResponse(BaseModel):
    """Decoded 202 response body."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    routing_key: str = Field(default="")
    dedup_key: str = Field(default="")
    event_action: str = Field(default="")

    # Also sent by the live service
    status: str | None = None
    message: str | None = None

    @field_validator("routing_key", "dedup_key", "event_action", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value
