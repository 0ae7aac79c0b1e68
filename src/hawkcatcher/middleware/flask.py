from __future__ import annotations

from typing import Any, Optional

from hawkcatcher.catcher import Catcher


def init_hawkcatcher(app: Any, catcher: Optional[Catcher] = None, **kwargs: Any) -> Catcher:
    """Report unhandled exceptions of a Flask application to Hawk.

    Listens to Flask's ``got_request_exception`` signal, so the application's
    own error responses are left untouched and HTTP errors such as 404 are
    not reported.

    Args:
        app: Flask application instance.
        catcher: Catcher to report through. Built from ``kwargs`` when omitted.
        **kwargs: Settings passed to the Catcher constructor.

    Returns:
        The Catcher used by the signal receiver.
    """
    from flask import got_request_exception, request

    if catcher is None:
        catcher = Catcher(kwargs)

    def report_exception(sender: Any, exception: BaseException, **extra: Any) -> None:
        catcher.send(
            exception,
            context={
                "source": "flask",
                "method": request.method,
                "path": request.path,
            },
        )

    got_request_exception.connect(report_exception, app, weak=False)
    return catcher
