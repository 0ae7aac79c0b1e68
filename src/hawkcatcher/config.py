from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

BeforeSend = Callable[[Dict[str, Any]], Dict[str, Any]]


def _as_bool(v: Any) -> bool:
    """Read a flag that may come from a config file as a string."""
    if isinstance(v, str):
        return v.strip().lower() in ("1", "true", "yes", "on")
    return bool(v)


@dataclass(frozen=True)
class CatcherSettings:
    """Settings for one Catcher. Immutable once built.

    ``from_any`` accepts the same shapes ``hawkcatcher.init`` does:
    a bare integration token, a mapping, or an existing instance.
    Mapping keys may be snake_case or the camelCase names used by the
    other Hawk catchers (``collectorEndpoint``, ``beforeSend``,
    ``disableGlobalErrorsHandling``).
    """

    token: str = ""
    collector_endpoint: Optional[str] = None
    context: Optional[Dict[str, Any]] = None
    before_send: Optional[BeforeSend] = field(default=None, compare=False)
    disable_global_errors_handling: bool = False
    timeout: float = 1.0

    @classmethod
    def from_any(cls, v: Any) -> "CatcherSettings":
        if isinstance(v, CatcherSettings):
            return v
        if isinstance(v, str):
            return cls(token=v)
        if isinstance(v, Mapping):
            context = v.get("context")
            return cls(
                token=str(v.get("token") or ""),
                collector_endpoint=v.get("collector_endpoint") or v.get("collectorEndpoint") or None,
                context=dict(context) if isinstance(context, Mapping) else None,
                before_send=v.get("before_send") or v.get("beforeSend"),
                disable_global_errors_handling=_as_bool(
                    v.get("disable_global_errors_handling", v.get("disableGlobalErrorsHandling", False))
                ),
                timeout=float(v.get("timeout") or 1.0),
            )
        return cls()
