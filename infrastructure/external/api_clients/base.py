"""
REST API客户端基类

Subclasses configure headers in ``set_headers()`` and reset per-call state in
``clear()``; a call is ``self.build_request(route, body, method).fetch()``.

- GET bodies become the query string (falsy values dropped)
- JSON content type bodies are serialized, anything else is sent as given
- non-2xx responses come back as a ``ResponseError`` value, unless the client
  runs in debug mode
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

import httpx
from pydantic import BaseModel

from application.ports.http_transport import HTTPTransport, RequestBody
from core.config import settings
from core.logging_config import get_logger
from infrastructure.external.api_clients.codec import JSONCodec
from infrastructure.external.api_clients.transport import HttpxTransport

logger = get_logger(__name__)

RESPONSE_ERROR = "response-error"
JSON_CONTENT_TYPE = "application/json"
SENSITIVE_HEADERS = {"authorization", "x-api-key", "cookie"}


class HTTPMethod(Enum):
    """HTTP方法枚举"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


@dataclass(frozen=True)
class ResponseError:
    """Returned (never raised) by ``fetch()`` for a non-2xx status."""
    message: str
    detail: Any = None
    status_code: Optional[int] = None
    kind: str = RESPONSE_ERROR


def is_response_error(value: Any) -> bool:
    return isinstance(value, ResponseError)


class APIClientError(Exception):
    """Misuse of an API client (not an HTTP failure)."""
    pass


class RequestNotBuiltError(APIClientError):
    """``fetch()`` called without a preceding ``build_request()``."""
    pass


class BaseAPIClient:
    """
    REST API客户端基类

    One logical call at a time: the route/method/headers/body of the current
    call live on the instance between ``build_request()`` and ``fetch()``.
    Use one instance per thread.
    """

    def __init__(
        self,
        base_uri: str,
        debug_mode: Optional[bool] = None,
        transport: Optional[HTTPTransport] = None,
        codec: Optional[JSONCodec] = None,
    ):
        """
        Args:
            base_uri: prefix joined verbatim with each route
            debug_mode: return non-2xx bodies instead of ResponseError;
                defaults to ``settings.api_client.debug_mode``
            transport: HTTP transport, an HttpxTransport when omitted
            codec: JSON codec for request and response bodies
        """
        self.base_uri = base_uri
        self.debug_mode = settings.api_client.debug_mode if debug_mode is None else debug_mode
        self._owns_transport = transport is None
        self.transport: HTTPTransport = transport or HttpxTransport()
        self.codec = codec or JSONCodec()

        self.route: Optional[str] = None
        self.method: Optional[str] = None
        self.headers: Dict[str, str] = {}
        self.body: RequestBody = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self.transport.close()

    # Hooks

    def set_headers(self) -> None:
        """Called first by ``build_request()``; populate ``self.headers``."""
        self.headers = {}

    def clear(self) -> None:
        """Called by ``fetch()`` after the response arrives, ok or not."""
        self.headers = {}
        self.body = None
        self.route = None
        self.method = None

    # Request cycle

    def build_request(
        self,
        route: str,
        body: Union[Mapping[str, Any], BaseModel, str, None] = None,
        method: Union[str, HTTPMethod] = HTTPMethod.GET,
    ) -> "BaseAPIClient":
        if not route:
            raise ValueError("route must be a non-empty string")

        self.set_headers()

        self.method = method.value if isinstance(method, HTTPMethod) else method.upper()
        self.route = route
        self.body = None

        if isinstance(body, BaseModel):
            body = body.model_dump(exclude_unset=True)
        if body is None:
            body = {}

        if self.method == HTTPMethod.GET.value:
            if not isinstance(body, Mapping):
                raise TypeError("GET arguments must be a mapping of query parameters")
            params = {key: value for key, value in body.items() if value}
            if params:
                self.route = str(httpx.URL(route).copy_merge_params(params))
        elif self._content_type() == JSON_CONTENT_TYPE:
            self.body = self.codec.encode(body)
        else:
            # Caller is responsible for the encoding
            self.body = body

        return self

    def fetch(self) -> Any:
        """Send the built request.

        Returns the decoded JSON body (``None`` when it does not decode), or a
        ``ResponseError`` for a non-2xx status outside debug mode. Transport
        exceptions propagate.
        """
        if self.route is None or self.method is None:
            raise RequestNotBuiltError("build_request() must be called before fetch()")

        method = self.method
        url = self._build_url(self.route)
        self._log_request(method, url)

        try:
            response = self.transport.send(method, url, self.headers, self.body)
            data = self.codec.decode(response.text)
        finally:
            self.clear()

        code = response.status_code
        self._log_response(method, url, code)

        if not self.is_status_ok(code) and not self.debug_mode:
            return ResponseError(message=f"Status: {code}", detail=data, status_code=code)

        return data

    def request(
        self,
        route: str,
        body: Union[Mapping[str, Any], BaseModel, str, None] = None,
        method: Union[str, HTTPMethod] = HTTPMethod.GET,
    ) -> Any:
        """``build_request(route, body, method).fetch()`` in one step."""
        return self.build_request(route, body, method).fetch()

    def is_status_ok(self, code: int) -> bool:
        """Whether status is in [200, 300)."""
        return 200 <= code < 300

    # Helpers

    def _build_url(self, route: str) -> str:
        return f"{self.base_uri}{route}"

    def _content_type(self) -> Optional[str]:
        for name, value in self.headers.items():
            if name.lower() == "content-type":
                return value.split(";", 1)[0].strip().lower()
        return None

    def _should_log(self) -> bool:
        return self.debug_mode or settings.api_client.log_requests

    def _log_request(self, method: str, url: str) -> None:
        if self._should_log():
            logger.debug(
                "api_request",
                method=method,
                url=url,
                headers={k: v for k, v in self.headers.items()
                         if k.lower() not in SENSITIVE_HEADERS},
                has_body=self.body is not None,
            )

    def _log_response(self, method: str, url: str, status_code: int) -> None:
        if self._should_log():
            logger.debug(
                "api_response",
                method=method,
                url=url,
                status_code=status_code,
                ok=self.is_status_ok(status_code),
            )
