"""
SDK-wide constants
==================

Base origin of the Gebeta Maps API, SDK version, defaults and the fixed
tables shared by the client, the routing service and the error taxonomy.
"""

from __future__ import annotations

from typing import Final

BASE_URL: Final[str] = "https://mapapi.gebeta.app"

SDK_VERSION: Final[str] = "1.0.0"

# Milliseconds, matching the ``timeout`` config option.
DEFAULT_TIMEOUT: Final[int] = 30000

# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------

ERROR_CODES: Final[dict[str, str]] = {
    "VALIDATION": "VALIDATION_ERROR",
    "NETWORK": "NETWORK_ERROR",
    "AUTH": "AUTH_ERROR",
    "RATE_LIMIT": "RATE_LIMIT_EXCEEDED",
    "API": "API_ERROR",
}

# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

HTTP_METHODS: Final[dict[str, str]] = {
    "GET": "GET",
    "POST": "POST",
    "PUT": "PUT",
    "DELETE": "DELETE",
}

SUCCESS_STATUS: Final[int] = 200

# ---------------------------------------------------------------------------
# Routing endpoints
# ---------------------------------------------------------------------------

DIRECTIONS_ENDPOINT: Final[str] = "/api/route/direction"
MATRIX_ENDPOINT: Final[str] = "/api/route/matrix"
ONM_ENDPOINT: Final[str] = "/api/route/onm"
TSS_ENDPOINT: Final[str] = "/api/route/tss"
