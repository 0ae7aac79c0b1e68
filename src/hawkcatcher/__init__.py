"""hawkcatcher - Hawk error catcher for Python."""

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Optional

from hawkcatcher.catcher import Catcher
from hawkcatcher.config import CatcherSettings
from hawkcatcher.errors import DeliveryError, HawkCatcherError, InvalidTokenError, MissingTokenError
from hawkcatcher.version import __version__

_catcher: Optional[Catcher] = None


def init(settings: Any = None, **kwargs: Any) -> Catcher:
    """Initialize the process-wide catcher, replacing any previous one.

    Args:
        settings: Integration token, settings mapping or CatcherSettings.
        **kwargs: Settings given as keyword arguments, e.g.
            ``init(token="...", context={"env": "prod"})``.

    Returns:
        The initialized Catcher instance.

    Raises:
        MissingTokenError: No integration token was given.
        InvalidTokenError: The integration token cannot be decoded.
    """
    global _catcher
    if kwargs:
        if isinstance(settings, CatcherSettings):
            settings = dataclasses.asdict(settings)
        elif isinstance(settings, str):
            settings = {"token": settings}
        settings = {**(settings or {}), **kwargs}
    _catcher = Catcher(settings)
    return _catcher


def get_catcher() -> Optional[Catcher]:
    return _catcher


def send(
    error: BaseException,
    context: Optional[Dict[str, Any]] = None,
    user: Any = None,
) -> None:
    """Send ``error`` to Hawk. Does nothing until ``init`` has been called.

    Args:
        error: Exception to report.
        context: Extra context for this event.
        user: Affected user identifier.
    """
    catcher = _catcher
    if catcher is not None:
        catcher.send(error, context, user)


def test() -> None:
    """Send a test event. Does nothing until ``init`` has been called."""
    catcher = _catcher
    if catcher is not None:
        catcher.test()


def flush(timeout: Optional[float] = None) -> bool:
    catcher = _catcher
    if catcher is None:
        return True
    return catcher.flush(timeout)


__all__ = [
    "init",
    "send",
    "test",
    "flush",
    "get_catcher",
    "Catcher",
    "CatcherSettings",
    "HawkCatcherError",
    "MissingTokenError",
    "InvalidTokenError",
    "DeliveryError",
    "__version__",
]
