"""Shared pytest fixtures for hawkcatcher tests."""

import base64
import json
import sys
import threading

import pytest

import hawkcatcher


def make_token(integration_id="test-integration", **extra):
    """Build an integration token the way the Hawk garage does."""
    data = {"integrationId": integration_id, "secret": "s3cr3t", **extra}
    return base64.b64encode(json.dumps(data).encode("utf-8")).decode("ascii")


class RecordingTransport:
    """Transport double that remembers every POST instead of sending it."""

    def __init__(self, status=200, error=None):
        self.status = status
        self.error = error
        self.requests = []

    def post_json(self, url, body, timeout):
        self.requests.append({"url": url, "body": json.loads(body), "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.status

    @property
    def envelopes(self):
        return [r["body"] for r in self.requests]


class FakeGlobalHandler:
    """Stands in for the excepthook installer and keeps the callback."""

    def __init__(self):
        self.callback = None
        self.install_count = 0

    def install(self, callback):
        self.callback = callback
        self.install_count += 1


@pytest.fixture(autouse=True)
def isolate_global_state(monkeypatch):
    """Undo hook installation and reset the facade singleton after each test."""
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(threading, "excepthook", threading.excepthook)
    monkeypatch.setattr(hawkcatcher, "_catcher", None)


@pytest.fixture
def token():
    return make_token("abc123")


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def global_handler():
    return FakeGlobalHandler()


@pytest.fixture
def make_catcher(transport, global_handler):
    """Factory for Catchers wired to the recording transport."""

    def _make(settings):
        return hawkcatcher.Catcher(settings, transport=transport, global_handler=global_handler)

    return _make
