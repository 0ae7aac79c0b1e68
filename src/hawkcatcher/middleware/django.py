from __future__ import annotations

from typing import Any, Callable

import hawkcatcher


class HawkCatcherMiddleware:
    """Django middleware that reports unhandled exceptions to Hawk.

    Reports through the catcher set up with ``hawkcatcher.init``.
    """

    def __init__(self, get_response: Callable[..., Any]) -> None:
        self.get_response = get_response

    def __call__(self, request: Any) -> Any:
        return self.get_response(request)

    def process_exception(self, request: Any, exception: Exception) -> None:
        hawkcatcher.send(
            exception,
            context={
                "source": "django",
                "method": request.method,
                "path": request.path,
            },
        )
