"""Pytest bootstrap configuration.

Pin environment variables that settings read at import time, before test
collection imports application modules.
"""
import os

import pytest

os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("API_CLIENT__DEBUG_MODE", "false")
os.environ.setdefault("API_CLIENT__LOG_REQUESTS", "false")

from application.ports.http_transport import TransportResponse  # noqa: E402


class RecordingTransport:
    """In-memory HTTPTransport that replays one canned response."""

    def __init__(self, status_code: int = 200, text: str = "{}"):
        self.status_code = status_code
        self.text = text
        self.calls = []
        self.closed = False

    def send(self, method, url, headers, body=None):
        self.calls.append(
            {"method": method, "url": url, "headers": dict(headers), "body": body}
        )
        return TransportResponse(status_code=self.status_code, text=self.text)

    def close(self):
        self.closed = True


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def make_transport():
    return RecordingTransport
