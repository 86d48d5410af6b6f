"""Request encoding and response handling shared by the sync and async submitters."""

import httpx
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from pdevents.config import get_settings
from pdevents.errors import DecodeError, ProtocolError, SerializationError
from pdevents.models.event import Event
from pdevents.models.response import EventResponse

JSON_HEADERS = {"Content-Type": "application/json"}


class BaseSubmitter:
    """Common behaviour for event submitters."""

    def __init__(self, *, url: str | None = None, timeout: float | None = None):
        settings = get_settings()
        self._url = url or settings.events_url
        self._timeout = settings.timeout if timeout is None else timeout

    @property
    def url(self) -> str:
        return self._url

    def _encode(self, event: Event) -> bytes:
        try:
            return event.to_json().encode("utf-8")
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise SerializationError(f"Failed to encode {event.action} event: {e}") from e

    def _build_request(self, client: httpx.Client | httpx.AsyncClient, body: bytes) -> httpx.Request:
        return client.build_request("POST", self._url, content=body, headers=JSON_HEADERS)

    def _protocol_error(self, response: httpx.Response, read_failed: bool) -> ProtocolError:
        if read_failed:
            return ProtocolError(response.status_code)
        return ProtocolError(response.status_code, response.text)

    def _decode(self, response: httpx.Response) -> EventResponse:
        try:
            return EventResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(f"Invalid response body: {response.text[:200]!r}") from e
