"""
HTTP integration package
========================

The transport boundary and the base request client every service builds on.
"""

from gebeta_maps.integrations.baseClient import BaseClient, map_error_response
from gebeta_maps.integrations.transport import (
    HTTPTransport,
    HttpxTransport,
    TransportResponse,
)

__all__ = [
    "BaseClient",
    "map_error_response",
    "HTTPTransport",
    "HttpxTransport",
    "TransportResponse",
]
