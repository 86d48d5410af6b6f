"""Events API v2 submitters.

Each call to ``submit`` performs exactly one POST to the enqueue endpoint and
either returns the decoded acknowledgment or raises an ``EventError``. Nothing
is retried; failures are left for the caller to handle.
"""

import logging
from types import TracebackType

import httpx

from pdevents.errors import TransportError
from pdevents.models.event import Event
from pdevents.models.response import EventResponse
from pdevents.submitters.base import BaseSubmitter

logger = logging.getLogger(__name__)


class EventSubmitter(BaseSubmitter):
    """Blocking submitter backed by an ``httpx.Client``.

    A caller-supplied client is used as-is and never closed here; its timeout
    settings apply. Without one, the submitter creates its own client with the
    configured timeout and closes it in ``close()``.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        *,
        url: str | None = None,
        timeout: float | None = None,
    ):
        super().__init__(url=url, timeout=timeout)
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self._timeout)

    def __enter__(self) -> "EventSubmitter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def submit(self, event: Event) -> EventResponse:
        """Send one event and return the service acknowledgment."""
        body = self._encode(event)
        request = self._build_request(self._client, body)

        logger.debug(f"Submitting {event.action} event to {self._url}")
        try:
            response = self._client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise TransportError(f"Failed to send {event.action} event: {e}") from e

        try:
            read_failed = False
            try:
                response.read()
            except httpx.HTTPError as e:
                if response.status_code == httpx.codes.ACCEPTED:
                    raise TransportError(f"Failed to read response body: {e}") from e
                read_failed = True

            if response.status_code != httpx.codes.ACCEPTED:
                raise self._protocol_error(response, read_failed)

            result = self._decode(response)
        finally:
            response.close()

        logger.info(f"Event accepted: action={result.event_action}, dedup_key={result.dedup_key}")
        return result


class AsyncEventSubmitter(BaseSubmitter):
    """Non-blocking counterpart of ``EventSubmitter`` using ``httpx.AsyncClient``."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        url: str | None = None,
        timeout: float | None = None,
    ):
        super().__init__(url=url, timeout=timeout)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self._timeout)

    async def __aenter__(self) -> "AsyncEventSubmitter":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def submit(self, event: Event) -> EventResponse:
        """Send one event and return the service acknowledgment."""
        body = self._encode(event)
        request = self._build_request(self._client, body)

        logger.debug(f"Submitting {event.action} event to {self._url}")
        try:
            response = await self._client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise TransportError(f"Failed to send {event.action} event: {e}") from e

        try:
            read_failed = False
            try:
                await response.aread()
            except httpx.HTTPError as e:
                if response.status_code == httpx.codes.ACCEPTED:
                    raise TransportError(f"Failed to read response body: {e}") from e
                read_failed = True

            if response.status_code != httpx.codes.ACCEPTED:
                raise self._protocol_error(response, read_failed)

            result = self._decode(response)
        finally:
            await response.aclose()

        logger.info(f"Event accepted: action={result.event_action}, dedup_key={result.dedup_key}")
        return result


def manage_event(event: Event, *, client: httpx.Client | None = None) -> EventResponse:
    """Trigger, acknowledge or resolve an event in a single call."""
    with EventSubmitter(client) as submitter:
        return submitter.submit(event)
