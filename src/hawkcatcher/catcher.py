from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from hawkcatcher.config import CatcherSettings
from hawkcatcher.errors import InvalidTokenError, MissingTokenError
from hawkcatcher.event import compose_event, merge_context
from hawkcatcher.excepthook import ExceptHookHandler, GlobalHandler
from hawkcatcher.integration_token import decode_integration_token, resolve_collector_endpoint
from hawkcatcher.transport import DeliveryChannel, Transport

logger = logging.getLogger("hawkcatcher")

CATCHER_TYPE = "errors/python"
TEST_MESSAGE = "Hawk Python Catcher test message"


class Catcher:
    """Composes error events and sends them to the Hawk collector."""

    def __init__(
        self,
        settings: Any,
        *,
        transport: Optional[Transport] = None,
        global_handler: Optional[GlobalHandler] = None,
    ) -> None:
        self.settings = CatcherSettings.from_any(settings)
        self.token = self.settings.token

        if not self.token:
            raise MissingTokenError()

        try:
            integration_id = decode_integration_token(self.token)
        except InvalidTokenError:
            raise InvalidTokenError("Invalid integration token") from None

        self.collector_endpoint = resolve_collector_endpoint(
            integration_id, self.settings.collector_endpoint
        )
        self._channel = DeliveryChannel(
            self.collector_endpoint,
            transport=transport,
            timeout=self.settings.timeout,
        )

        if not self.settings.disable_global_errors_handling:
            (global_handler or ExceptHookHandler()).install(self._handle_global_error)

    def send(
        self,
        error: BaseException,
        context: Optional[Dict[str, Any]] = None,
        user: Any = None,
    ) -> None:
        """Compose an event for ``error`` and send it in the background.

        Never raises; failures are logged to the ``hawkcatcher`` logger.

        Args:
            error: Exception to report.
            context: Extra context, merged over the default context.
            user: Affected user identifier.
        """
        try:
            payload = compose_event(
                error,
                context=merge_context(self.settings.context, context),
                user=user,
            )

            # Filter sensitive data
            if callable(self.settings.before_send):
                payload = self.settings.before_send(payload)

            self._channel.deliver(self._envelope(payload))
        except Exception:
            logger.error("[Hawk] Cannot compose an event", exc_info=True)

    def test(self) -> None:
        """Send a test event."""
        try:
            raise Exception(TEST_MESSAGE)
        except Exception as e:
            self.send(e)

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Wait for events already handed to the channel to finish sending."""
        return self._channel.flush(timeout)

    def _envelope(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "token": self.token,
            "catcherType": CATCHER_TYPE,
            "payload": payload,
        }

    def _handle_global_error(self, error: BaseException, is_fatal: bool) -> None:
        # Uncaught errors only carry their class name; no backtrace or context.
        logger.error("Uncaught %s (fatal=%s)", type(error).__name__, is_fatal)
        self._channel.deliver(self._envelope({"title": type(error).__name__}))
