from __future__ import annotations

import logging
import sys
import threading
from types import TracebackType
from typing import Callable, Optional, Protocol, Type

logger = logging.getLogger("hawkcatcher")

ErrorCallback = Callable[[BaseException, bool], None]

_original_excepthook = sys.excepthook
_original_threading_excepthook = getattr(threading, "excepthook", None)


class GlobalHandler(Protocol):
    def install(self, callback: ErrorCallback) -> None: ...


def _notify(callback: ErrorCallback, exc_value: BaseException, is_fatal: bool) -> None:
    try:
        callback(exc_value, is_fatal)
    except Exception:
        logger.error("Global error callback failed", exc_info=True)


class ExceptHookHandler:
    """Routes uncaught exceptions to a callback as ``(error, is_fatal)``.

    Uncaught exceptions in the main thread arrive through ``sys.excepthook``
    and are fatal; those in other threads arrive through
    ``threading.excepthook`` and are not. Both chain to the hooks that were
    in place at import time, so installing again replaces the previous
    callback rather than stacking on top of it.
    """

    def install(self, callback: ErrorCallback) -> None:
        def hawk_excepthook(
            exc_type: Type[BaseException],
            exc_value: BaseException,
            exc_tb: Optional[TracebackType],
        ) -> None:
            _notify(callback, exc_value, True)
            _original_excepthook(exc_type, exc_value, exc_tb)

        sys.excepthook = hawk_excepthook

        if hasattr(threading, "excepthook"):
            def hawk_threading_excepthook(args: threading.ExceptHookArgs) -> None:
                if args.exc_value is not None:
                    _notify(callback, args.exc_value, False)
                if _original_threading_excepthook is not None:
                    _original_threading_excepthook(args)

            threading.excepthook = hawk_threading_excepthook
