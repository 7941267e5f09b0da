"""
HTTP transport port (application/ports) exposing a replaceable protocol.

API clients depend on this Protocol; infrastructure provides the httpx adapter
and tests provide in-memory fakes.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol, Union, runtime_checkable


RequestBody = Union[str, bytes, Mapping[str, Any], None]


@dataclass(frozen=True)
class TransportResponse:
    """Status code and undecoded body of one HTTP exchange."""

    status_code: int
    text: str
    headers: Optional[Mapping[str, str]] = None


@runtime_checkable
class HTTPTransport(Protocol):
    """Sends one blocking HTTP request.

    A ``str``/``bytes`` body is sent verbatim, a mapping is form-encoded and
    ``None`` sends no body. Network failures are raised, not returned.
    """

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: RequestBody = None,
    ) -> TransportResponse: ...

    def close(self) -> None: ...
