from __future__ import annotations


class HawkCatcherError(Exception):
    """Base class for errors raised by hawkcatcher."""


class MissingTokenError(HawkCatcherError, ValueError):
    """Raised when a Catcher is built without an integration token."""

    def __init__(self, message: str = (
        "Integration Token is missed. You can get it on https://hawk.so at Project Settings."
    )) -> None:
        super().__init__(message)


class InvalidTokenError(HawkCatcherError, ValueError):
    """Raised when an integration token cannot be decoded."""


class DeliveryError(HawkCatcherError):
    """Raised inside the delivery channel when an event could not be sent.

    Never escapes to callers of ``send``; the channel logs and drops it.
    """
