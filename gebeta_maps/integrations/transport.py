"""
HTTP transport boundary
=======================

The request client never talks to the network directly; it hands a fully
built request to an ``HTTPTransport``.  The contract a transport must honour:

* Any HTTP response it receives is returned as a ``TransportResponse``,
  whatever the status (raising ``httpx.HTTPStatusError`` with the response
  attached is accepted as well).
* If the request went out but no reply came back (timeout, refused or reset
  connection) it raises ``httpx.RequestError``.
* Anything else it raises is treated as a failure to set the request up.

``HttpxTransport`` is the default implementation.  It opens one
``httpx.AsyncClient`` per call: there is no pooling and nothing to close.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

import httpx


@dataclass(frozen=True)
class TransportResponse:
    """Status code and decoded body of a received HTTP response."""

    status: int
    body: Any = None


class HTTPTransport(Protocol):
    """Protocol for the collaborator that performs the actual HTTP call."""

    async def send(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        body: Any = None,
        params: dict[str, str] | None = None,
        timeout_ms: int | float,
    ) -> TransportResponse:
        ...


def decode_body(response: httpx.Response) -> Any:
    """JSON-decode a response body, falling back to text; ``None`` if empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class HttpxTransport:
    """``HTTPTransport`` backed by ``httpx.AsyncClient``.

    Args:
        transport: Optional low-level httpx transport handed to every client
            (``httpx.MockTransport`` in tests).
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._transport = transport

    async def send(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        body: Any = None,
        params: dict[str, str] | None = None,
        timeout_ms: int | float,
    ) -> TransportResponse:
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.request(
                method,
                url,
                headers=headers,
                params=params or None,
                json=body,
                timeout=timeout_ms / 1000.0,
            )

        return TransportResponse(status=response.status_code, body=decode_body(response))


__all__ = ["TransportResponse", "HTTPTransport", "HttpxTransport", "decode_body"]
