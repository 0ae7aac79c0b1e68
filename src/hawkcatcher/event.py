"""Turns exceptions into Hawk event payloads."""

from __future__ import annotations

import copy
import logging
import traceback
from typing import Any, Dict, List, Mapping, Optional

from hawkcatcher.version import __version__

logger = logging.getLogger("hawkcatcher")


def get_title(error: BaseException) -> str:
    message = str(error)
    return message or type(error).__name__


def get_type(error: BaseException) -> str:
    return type(error).__name__


def extract_backtrace(error: BaseException) -> List[Dict[str, Any]]:
    """Return the frames of ``error``'s traceback, innermost call first.

    An error that was never raised has no traceback and yields ``[]``.
    Extraction problems are logged and also yield ``[]``.
    """
    tb = getattr(error, "__traceback__", None)
    if tb is None:
        return []

    try:
        frames: List[Dict[str, Any]] = []
        for summary in reversed(traceback.extract_tb(tb)):
            frame: Dict[str, Any] = {
                "file": summary.filename,
                "line": summary.lineno,
                "function": summary.name,
            }
            colno = getattr(summary, "colno", None)
            if colno is not None:
                frame["column"] = colno
            if summary.line:
                frame["sourceCode"] = [{"line": summary.lineno, "content": summary.line}]
            frames.append(frame)
        return frames
    except Exception as e:
        logger.debug("Failed to extract backtrace: %s", e)
        return []


def merge_context(
    default_context: Optional[Mapping[str, Any]],
    call_context: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    """Overlay ``call_context`` on a copy of ``default_context``.

    The result shares no nested objects with either input.
    """
    merged: Dict[str, Any] = {}
    if default_context is not None:
        merged.update(default_context)
    if call_context is not None:
        merged.update(call_context)
    return copy.deepcopy(merged)


def compose_event(
    error: BaseException,
    context: Optional[Dict[str, Any]] = None,
    user: Any = None,
) -> Dict[str, Any]:
    """Build the event payload for ``error``.

    Args:
        error: The exception being reported.
        context: Already merged context for the event.
        user: Affected user, passed through as given.

    Returns:
        A JSON-ready payload dictionary.
    """
    return {
        "title": get_title(error),
        "type": get_type(error),
        "backtrace": extract_backtrace(error),
        "user": user,
        "context": dict(context or {}),
        "catcherVersion": __version__,
    }
