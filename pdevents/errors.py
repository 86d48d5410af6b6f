"""Errors raised while submitting an event."""


class EventError(Exception):
    """Base class for event submission failures."""


class SerializationError(EventError):
    """The event could not be encoded to JSON. No request was sent."""


class TransportError(EventError):
    """The request could not be sent or no response was received."""


class ProtocolError(EventError):
    """The service answered with a status other than 202 Accepted."""

    def __init__(self, status_code: int, body: str | None = None):
        self.status_code = status_code
        self.body = body
        if body is None:
            message = f"HTTP Status Code: {status_code}"
        else:
            message = f"HTTP Status Code: {status_code}, Message: {body}"
        super().__init__(message)


class DecodeError(EventError):
    """The service accepted the event but its response could not be decoded."""
