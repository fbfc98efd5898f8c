"""
Gebeta routing service
======================

The four routing operations of the Gebeta Maps API: directions, distance
matrix, one-to-many (ONM) and route optimization (TSS).

Each operation validates its points, encodes them in the provider's
``{lat,lon}`` format, and sends a GET whose query string carries every
parameter, the API key included.  Validation and request errors propagate
unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from gebeta_maps.core.constants import (
    DIRECTIONS_ENDPOINT,
    HTTP_METHODS,
    MATRIX_ENDPOINT,
    ONM_ENDPOINT,
    TSS_ENDPOINT,
)
from gebeta_maps.core.errors import ValidationError
from gebeta_maps.integrations.baseClient import BaseClient
from gebeta_maps.models.geo import format_point, format_points


def _is_location_list(locations: Any) -> bool:
    return isinstance(locations, (list, tuple)) and len(locations) > 0


class MapService(BaseClient):
    """Client for the Gebeta routing endpoints."""

    def _validate_locations(self, operation: str, locations: Any, details: Any) -> None:
        """Reject a missing, empty or non-list ``locations``, then check each point."""
        if not _is_location_list(locations):
            raise ValidationError(f"{operation}: Invalid locations provided.", details)

        for location in locations:
            self.validator.validate_lat_lng(location)

    async def get_directions(
        self,
        origin: Any,
        destination: Any,
        waypoints: Sequence[Any] | None = None,
        instruction: bool = False,
    ) -> Any:
        """Fetch directions between two points.

        Args:
            origin: Start point (``GeoPoint``, mapping or object with
                ``latitude``/``longitude``).
            destination: End point.
            waypoints: Ordered intermediate points.  They are formatted as
                given and not validated.
            instruction: Ask the API for turn-by-turn instructions.

        Returns:
            The parsed directions response.
        """
        self.validator.validate_lat_lng(origin)
        self.validator.validate_lat_lng(destination)

        params = {
            "origin": format_point(origin),
            "destination": format_point(destination),
            "apiKey": self.config.api_key,
            "waypoints": format_points(waypoints or []),
            "instruction": "1" if instruction else "0",
        }

        return await self.make_request(DIRECTIONS_ENDPOINT, HTTP_METHODS["GET"], None, params)

    async def get_route_matrix(self, locations: Sequence[Any]) -> Any:
        """Fetch the distance matrix between every pair of ``locations``."""
        self._validate_locations("get_route_matrix", locations, locations)

        params = {
            "json": format_points(locations),
            "apiKey": self.config.api_key,
        }

        return await self.make_request(MATRIX_ENDPOINT, HTTP_METHODS["GET"], None, params)

    async def get_route_onm(self, origin: Any, locations: Sequence[Any]) -> Any:
        """Fetch routes from one ``origin`` to each of ``locations``."""
        self.validator.validate_lat_lng(origin)
        self._validate_locations(
            "get_route_onm",
            locations,
            {"origin": origin, "locations": locations},
        )

        params = {
            "origin": format_point(origin),
            "json": format_points(locations),
            "apiKey": self.config.api_key,
        }

        return await self.make_request(ONM_ENDPOINT, HTTP_METHODS["GET"], None, params)

    async def get_route_optimization(self, locations: Sequence[Any]) -> Any:
        """Ask the API for an efficient visiting order of ``locations``."""
        self._validate_locations("get_route_optimization", locations, locations)

        params = {
            "json": format_points(locations),
            "apiKey": self.config.api_key,
        }

        return await self.make_request(TSS_ENDPOINT, HTTP_METHODS["GET"], None, params)


__all__ = ["MapService"]
