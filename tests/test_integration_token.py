"""Tests for integration token decoding (integration_token.py)."""

import base64
import json

import pytest

from hawkcatcher.errors import InvalidTokenError
from hawkcatcher.integration_token import decode_integration_token, resolve_collector_endpoint

from conftest import make_token


def _encode(raw):
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


class TestDecodeIntegrationToken:
    @pytest.mark.parametrize("integration_id", ["abc123", "a", "0d2a-41f1-b6b4", "проект"])
    def test_returns_integration_id(self, integration_id):
        assert decode_integration_token(make_token(integration_id)) == integration_id

    def test_tolerates_missing_padding(self):
        token = make_token("abc").rstrip("=")
        assert decode_integration_token(token) == "abc"

    @pytest.mark.parametrize(
        "token",
        [
            "not a token!!",
            "@@@@",
            _encode("not json"),
            _encode("[1, 2, 3]"),
            _encode('"just a string"'),
            _encode('{"secret": "x"}'),
            _encode('{"integrationId": ""}'),
            _encode('{"integrationId": null}'),
            _encode('{"integrationId": 42}'),
            base64.b64encode(b"\xff\xfe\xfa").decode("ascii"),
            "ключ",
        ],
    )
    def test_rejects_malformed_tokens(self, token):
        with pytest.raises(InvalidTokenError):
            decode_integration_token(token)

    def test_extra_fields_are_ignored(self):
        token = _encode(json.dumps({"integrationId": "xyz", "secret": "s", "other": [1]}))
        assert decode_integration_token(token) == "xyz"


class TestResolveCollectorEndpoint:
    def test_derived_from_integration_id(self):
        assert resolve_collector_endpoint("abc123") == "https://abc123.k1.hawk.so/"

    def test_override_wins(self):
        assert resolve_collector_endpoint("abc123", "http://localhost:3000/") == "http://localhost:3000/"

    def test_empty_override_is_ignored(self):
        assert resolve_collector_endpoint("abc123", "") == "https://abc123.k1.hawk.so/"
