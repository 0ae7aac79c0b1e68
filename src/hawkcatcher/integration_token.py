from __future__ import annotations

import base64
import json
from typing import Optional

from hawkcatcher.errors import InvalidTokenError

COLLECTOR_DOMAIN = "k1.hawk.so"


def decode_integration_token(token: str) -> str:
    """Return the integration id encoded in an integration token.

    The token is base64 of a JSON object like ``{"integrationId": "..."}``.
    Missing base64 padding is tolerated.
    """
    try:
        padded = token + "=" * (-len(token) % 4)
        raw = base64.b64decode(padded).decode("utf-8")
        decoded = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise InvalidTokenError(f"Invalid integration token: {e}") from e

    if not isinstance(decoded, dict):
        raise InvalidTokenError("Invalid integration token. Decoded value is not an object.")

    integration_id = decoded.get("integrationId")
    if not isinstance(integration_id, str) or not integration_id:
        raise InvalidTokenError("Invalid integration token. There is no integration ID.")

    return integration_id


def resolve_collector_endpoint(integration_id: str, override: Optional[str] = None) -> str:
    """Return the collector URL for an integration."""
    return override or f"https://{integration_id}.{COLLECTOR_DOMAIN}/"
