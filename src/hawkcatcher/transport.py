from __future__ import annotations

import json
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Dict, Optional, Protocol, Set
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from hawkcatcher.errors import DeliveryError

logger = logging.getLogger("hawkcatcher")


class Transport(Protocol):
    def post_json(self, url: str, body: bytes, timeout: float) -> int: ...


class UrllibTransport:
    """POSTs JSON bodies with urllib and returns the response status."""

    def post_json(self, url: str, body: bytes, timeout: float) -> int:
        req = Request(url, data=body, method="POST")
        req.add_header("Content-Type", "application/json")

        try:
            with urlopen(req, timeout=timeout) as resp:
                return resp.status
        except HTTPError as e:
            return e.code
        except (URLError, OSError) as e:
            raise DeliveryError(str(e)) from e


class DeliveryChannel:
    """Sends envelopes to the collector in the background.

    Each ``deliver`` call is one independent POST. Failures are logged and
    dropped; nothing is retried or queued for later.
    """

    def __init__(
        self,
        endpoint: str,
        transport: Optional[Transport] = None,
        timeout: float = 1.0,
    ) -> None:
        self.endpoint = endpoint
        self.transport = transport or UrllibTransport()
        self.timeout = timeout
        self._executor = ThreadPoolExecutor(thread_name_prefix="hawkcatcher")
        self._pending: Set[Future] = set()
        self._lock = threading.Lock()

    def deliver(self, envelope: Dict[str, Any]) -> Future:
        """Serialize ``envelope`` and POST it without waiting for the result."""
        try:
            body = json.dumps(envelope).encode("utf-8")
        except (TypeError, ValueError) as e:
            logger.error("[Hawk] Cannot send an event because of %s", e)
            done: Future = Future()
            done.set_result(None)
            return done

        future = self._executor.submit(self._post, body)
        with self._lock:
            self._pending.add(future)
        future.add_done_callback(self._forget)
        return future

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Wait for in-flight deliveries. Returns False on timeout."""
        with self._lock:
            pending = list(self._pending)
        if not pending:
            return True
        _, not_done = wait(pending, timeout=timeout)
        return not not_done

    def _post(self, body: bytes) -> None:
        try:
            status = self.transport.post_json(self.endpoint, body, self.timeout)
            if not 200 <= status < 300:
                raise DeliveryError(f"collector responded with HTTP {status}")
            logger.debug("Event delivered to %s", self.endpoint)
        except Exception as e:
            logger.error("[Hawk] Cannot send an event because of %s", e)

    def _forget(self, future: Future) -> None:
        with self._lock:
            self._pending.discard(future)
