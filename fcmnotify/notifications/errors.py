from __future__ import annotations

from fcmnotify.models.result import SendResult


class FcmError(Exception):
    """Base error for a failed send. ``result`` is the result captured so far."""

    def __init__(self, message: str, result: SendResult | None = None) -> None:
        super().__init__(message)
        self.result = result or SendResult()


class FcmEncodingError(FcmError):
    """The message could not be serialized; nothing was sent."""


class FcmTransportError(FcmError):
    """The HTTP request did not complete."""


class FcmDecodeError(FcmError):
    """The gateway answered 200 with a body that does not parse."""
