"""
Error taxonomy
==============

Every failure surfaced by the SDK is a ``MapSDKError`` carrying the same
shape: ``code``, ``message``, ``status`` and optional ``details``.  Each
variant is tagged with an ``ErrorKind`` so callers can branch on the kind
(or on ``code``) without caring which class was raised.

The taxonomy only describes failures; logging them is the request
client's job.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from gebeta_maps.core.constants import ERROR_CODES


class ErrorKind(str, Enum):
    """Tag identifying the variant of a ``MapSDKError``."""

    API = "api"
    VALIDATION = "validation"
    NETWORK = "network"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"


class MapSDKError(Exception):
    """Base error raised by the SDK."""

    kind: ErrorKind = ErrorKind.API

    def __init__(
        self,
        code: str,
        message: str,
        status: int | None,
        details: Any = None,
        *,
        kind: ErrorKind | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status
        self.details = details
        if kind is not None:
            self.kind = kind

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "code": self.code,
            "message": self.message,
            "status": self.status,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code!r}, message={self.message!r}, "
            f"status={self.status!r}, details={self.details!r})"
        )


class ValidationError(MapSDKError):
    """Client-side input was rejected before any request was sent."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(ERROR_CODES["VALIDATION"], message, 400, details)


class NetworkError(MapSDKError):
    """No usable response was received from the API."""

    kind = ErrorKind.NETWORK

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(ERROR_CODES["NETWORK"], message, 500, details)


class AuthError(MapSDKError):
    """The API rejected the credentials (HTTP 401 / 403)."""

    kind = ErrorKind.AUTH

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(ERROR_CODES["AUTH"], message, 401, details)


__all__ = [
    "ErrorKind",
    "MapSDKError",
    "ValidationError",
    "NetworkError",
    "AuthError",
]
