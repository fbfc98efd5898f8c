"""
Base request client
===================

Owns the client configuration, builds outbound headers, performs every HTTP
call through the injected ``HTTPTransport`` and turns anything other than an
HTTP 200 into a typed ``MapSDKError``.

Failures are logged once here, at error level with the endpoint and method,
and then raised.  There is no retry: every failure ends the call.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import httpx

from gebeta_maps.core.config import ClientConfig
from gebeta_maps.core.constants import BASE_URL, ERROR_CODES, SDK_VERSION, SUCCESS_STATUS
from gebeta_maps.core.errors import AuthError, ErrorKind, MapSDKError, NetworkError
from gebeta_maps.core.logger import LoggerProtocol, SDKLogger
from gebeta_maps.core.validator import Validator
from gebeta_maps.integrations.transport import HTTPTransport, HttpxTransport, decode_body

# ---------------------------------------------------------------------------
# Error-status mapping
# ---------------------------------------------------------------------------

# status -> (kind, default message); anything unlisted is a generic API error.
_STATUS_ERRORS: dict[int, tuple[ErrorKind, str]] = {
    401: (ErrorKind.AUTH, "Authentication failed"),
    403: (ErrorKind.AUTH, "Access forbidden"),
    429: (ErrorKind.RATE_LIMIT, "Rate limit exceeded"),
}

_DEFAULT_ERROR_MESSAGE = "API request failed"


def _auth_error(status: int, message: str, error: dict[str, Any]) -> MapSDKError:
    return AuthError(message, error.get("details"))


def _rate_limit_error(status: int, message: str, error: dict[str, Any]) -> MapSDKError:
    return MapSDKError(
        ERROR_CODES["RATE_LIMIT"],
        message,
        status,
        error.get("details"),
        kind=ErrorKind.RATE_LIMIT,
    )


def _api_error(status: int, message: str, error: dict[str, Any]) -> MapSDKError:
    return MapSDKError(
        error.get("code") or ERROR_CODES["API"],
        message,
        status,
        error.get("details"),
    )


_ERROR_BUILDERS: dict[ErrorKind, Callable[[int, str, dict[str, Any]], MapSDKError]] = {
    ErrorKind.AUTH: _auth_error,
    ErrorKind.RATE_LIMIT: _rate_limit_error,
    ErrorKind.API: _api_error,
}


def _error_object(body: Any) -> dict[str, Any]:
    """Return ``body["error"]`` when it is a dict, else an empty dict."""
    if isinstance(body, Mapping):
        error = body.get("error")
        if isinstance(error, Mapping):
            return dict(error)
    return {}


def map_error_response(status: int, body: Any) -> MapSDKError:
    """Build the error matching an HTTP status and its response body."""
    error = _error_object(body)
    kind, default_message = _STATUS_ERRORS.get(status, (ErrorKind.API, _DEFAULT_ERROR_MESSAGE))
    message = error.get("message") or default_message
    return _ERROR_BUILDERS[kind](status, message, error)


def _original_message(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class BaseClient:
    """Shared request pipeline for the Gebeta Maps services.

    Args:
        config: Mapping or ``ClientConfig`` with ``api_key`` and the optional
            ``timeout`` (ms), ``headers`` and ``debug`` options.
        transport: HTTP collaborator; defaults to ``HttpxTransport``.
        logger: Logging collaborator; defaults to an ``SDKLogger`` honouring
            the ``debug`` option.
    """

    def __init__(
        self,
        config: Mapping[str, Any] | ClientConfig,
        *,
        transport: HTTPTransport | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self.config = ClientConfig.from_input(config)
        self.logger: LoggerProtocol = logger or SDKLogger(debug=self.config.debug)
        self.validator = Validator()
        self.transport: HTTPTransport = transport or HttpxTransport()

    def _get_headers(self) -> dict[str, str]:
        """Default headers overlaid with the configured custom headers."""
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
            "X-SDK-Version": SDK_VERSION,
            "User-Agent": f"MapSDK/{SDK_VERSION} Python",
            **self.config.headers,
        }

    def _handle_error_response(self, status: int, body: Any) -> None:
        raise map_error_response(status, body)

    async def make_request(
        self,
        endpoint: str,
        method: str,
        body: Any = None,
        query_params: Mapping[str, str] | None = None,
    ) -> Any:
        """Send one request to ``BASE_URL + endpoint``.

        Returns:
            The response body, verbatim, when the API answers HTTP 200.

        Raises:
            AuthError: On HTTP 401 / 403.
            MapSDKError: On any other non-200 status (``RATE_LIMIT_EXCEEDED``
                for 429).
            NetworkError: When no response was received or the request
                could not be sent.
        """
        url = f"{BASE_URL}{endpoint}"
        params = dict(query_params or {})

        try:
            response = await self.transport.send(
                method,
                url,
                headers=self._get_headers(),
                body=body,
                params=params,
                timeout_ms=self.config.timeout,
            )
        except httpx.HTTPStatusError as exc:
            error_body = decode_body(exc.response)
            self.logger.error(
                "Request failed",
                {"error": error_body, "endpoint": endpoint, "method": method},
            )
            raise map_error_response(exc.response.status_code, error_body) from exc
        except httpx.RequestError as exc:
            self.logger.error("No response received", {"endpoint": endpoint, "method": method})
            raise NetworkError(
                "Network request failed", {"originalError": _original_message(exc)}
            ) from exc
        except Exception as exc:
            self.logger.error(
                "Request error", {"error": exc, "endpoint": endpoint, "method": method}
            )
            raise NetworkError(
                "Network request failed", {"originalError": _original_message(exc)}
            ) from exc

        if response.status != SUCCESS_STATUS:
            self.logger.error(
                "Request failed",
                {"error": response.body, "endpoint": endpoint, "method": method},
            )
            self._handle_error_response(response.status, response.body)

        self.logger.debug(
            "Request successful",
            {"endpoint": endpoint, "method": method, "status": response.status},
        )
        return response.body


__all__ = ["BaseClient", "map_error_response"]
