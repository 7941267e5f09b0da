import json

import httpx

from core.config import APIClientSettings
from infrastructure.external.api_clients.transport import HttpxTransport


def _mock_transport(captured, status_code=200, payload=None):
    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(status_code, json=payload if payload is not None else {"ok": True})

    return HttpxTransport(client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_string_body_is_sent_verbatim():
    captured = []
    transport = _mock_transport(captured, status_code=201)

    response = transport.send(
        "POST",
        "https://api.example.com/items",
        {"Content-Type": "application/json"},
        '{"a":1}',
    )

    assert response.status_code == 201
    assert json.loads(response.text) == {"ok": True}
    assert captured[0].method == "POST"
    assert captured[0].content == b'{"a":1}'
    assert captured[0].headers["content-type"] == "application/json"


def test_mapping_body_is_form_encoded():
    captured = []
    transport = _mock_transport(captured)

    transport.send("PUT", "https://api.example.com/items/1", {}, {"name": "x", "n": "2"})

    assert captured[0].content == b"name=x&n=2"
    assert captured[0].headers["content-type"] == "application/x-www-form-urlencoded"


def test_no_body_for_get():
    captured = []
    transport = _mock_transport(captured, status_code=404, payload={"message": "nope"})

    response = transport.send("GET", "https://api.example.com/items?a=1", {"Accept": "application/json"})

    assert response.status_code == 404
    assert captured[0].content == b""
    assert captured[0].url.params["a"] == "1"
    assert response.headers["content-type"] == "application/json"


def test_client_is_built_lazily_from_settings():
    transport = HttpxTransport(config=APIClientSettings(timeout=5, user_agent="test-agent/2"))
    assert transport._client is None

    client = transport.client

    assert client.timeout.read == 5
    assert client.headers["User-Agent"] == "test-agent/2"
    assert transport.client is client
    transport.close()
    assert transport._client is None
    assert client.is_closed


def test_close_without_client_is_noop():
    HttpxTransport().close()
