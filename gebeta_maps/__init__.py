"""
Gebeta Maps SDK
===============

Async client for the Gebeta Maps routing API.

Typical usage::

    from gebeta_maps import GeoPoint, MapSDK

    sdk = MapSDK({"api_key": "..."})
    route = await sdk.get_service().get_directions(
        GeoPoint(8.9877, 38.7648),
        GeoPoint(9.0877, 38.7648),
    )
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from gebeta_maps.core.config import ClientConfig, SDKSettings
from gebeta_maps.core.constants import SDK_VERSION
from gebeta_maps.core.errors import (
    AuthError,
    ErrorKind,
    MapSDKError,
    NetworkError,
    ValidationError,
)
from gebeta_maps.core.logger import LoggerProtocol, NullLogger, SDKLogger
from gebeta_maps.core.validator import Validator
from gebeta_maps.integrations.transport import HTTPTransport, HttpxTransport, TransportResponse
from gebeta_maps.models.geo import GeoPoint
from gebeta_maps.services.mapService import MapService

__version__ = SDK_VERSION


class MapSDK:
    """Entry point: validates the configuration and hands out the service."""

    def __init__(
        self,
        config: Mapping[str, Any] | ClientConfig,
        *,
        transport: HTTPTransport | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        Validator().validate_config(config)
        self._service = MapService(config, transport=transport, logger=logger)

    @classmethod
    def from_env(cls, **overrides: Any) -> "MapSDK":
        """Build an SDK from ``GEBETA_*`` environment variables.

        Keyword arguments override individual options (``api_key``,
        ``timeout``, ``headers``, ``debug``); ``transport`` and ``logger`` are
        passed through to the constructor.
        """
        transport = overrides.pop("transport", None)
        logger = overrides.pop("logger", None)
        config = {**SDKSettings().to_config(), **overrides}
        return cls(config, transport=transport, logger=logger)

    @property
    def service(self) -> MapService:
        return self._service

    def get_service(self) -> MapService:
        return self._service

    @staticmethod
    def get_version() -> str:
        return SDK_VERSION


__all__ = [
    "MapSDK",
    "MapService",
    "GeoPoint",
    "ClientConfig",
    "SDKSettings",
    "MapSDKError",
    "ValidationError",
    "NetworkError",
    "AuthError",
    "ErrorKind",
    "SDKLogger",
    "NullLogger",
    "LoggerProtocol",
    "HTTPTransport",
    "HttpxTransport",
    "TransportResponse",
    "Validator",
    "__version__",
]
