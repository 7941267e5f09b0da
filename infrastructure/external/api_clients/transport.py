"""
httpx-backed implementation of the HTTPTransport port.
"""
from __future__ import annotations

from typing import Mapping, Optional

import httpx

from application.ports.http_transport import RequestBody, TransportResponse
from core.config import APIClientSettings, settings


class HttpxTransport:
    """Synchronous transport over a single ``httpx.Client``.

    The client is created lazily so constructing an API client never opens
    sockets.
    """

    def __init__(
        self,
        config: Optional[APIClientSettings] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.config = config or settings.api_client
        self._client = client

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                timeout=httpx.Timeout(self.config.timeout),
                verify=self.config.verify_ssl,
                follow_redirects=self.config.follow_redirects,
                headers={"User-Agent": self.config.user_agent},
            )
        return self._client

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: RequestBody = None,
    ) -> TransportResponse:
        kwargs = {}
        if isinstance(body, (str, bytes)):
            kwargs["content"] = body
        elif body is not None:
            kwargs["data"] = dict(body)

        response = self.client.request(method, url, headers=dict(headers), **kwargs)
        return TransportResponse(
            status_code=response.status_code,
            text=response.text,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        """Close underlying HTTP client if created."""
        if self._client is not None:
            try:
                self._client.close()
            finally:
                self._client = None
