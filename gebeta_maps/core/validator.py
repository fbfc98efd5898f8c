"""
Input validation
================

Structural and range checks for geographic points and client configuration.
Every check raises ``ValidationError`` on failure and returns ``None``
otherwise; nothing here touches the network.

Points and configs may be mappings (``{"latitude": 9.0, ...}``) or objects
exposing the same names as attributes (``GeoPoint``, ``ClientConfig``).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from gebeta_maps.core.errors import ValidationError

_LATITUDE_RANGE = (-90, 90)
_LONGITUDE_RANGE = (-180, 180)

# Scalars (bool included) are never a point.  Containers, empty or not, get
# past the structural check and are rejected by the numeric one.
_SCALAR_TYPES = (str, bytes, int, float, complex)


def _field(obj: Any, name: str) -> Any:
    """Read ``name`` from a mapping key or an attribute, ``None`` if absent."""
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Validator:
    """Validation rules shared by the facade, the client and the services."""

    def validate_lat_lng(self, point: Any) -> None:
        if point is None or isinstance(point, _SCALAR_TYPES):
            raise ValidationError("Invalid LatLng object")

        latitude = _field(point, "latitude")
        longitude = _field(point, "longitude")

        if not _is_number(latitude) or not _is_number(longitude):
            raise ValidationError("Latitude and longitude must be numbers")

        if latitude < _LATITUDE_RANGE[0] or latitude > _LATITUDE_RANGE[1]:
            raise ValidationError("Latitude must be between -90 and 90")

        if longitude < _LONGITUDE_RANGE[0] or longitude > _LONGITUDE_RANGE[1]:
            raise ValidationError("Longitude must be between -180 and 180")

    def validate_config(self, config: Any) -> None:
        """Check the options the SDK cannot work without.

        Only ``api_key`` and ``timeout`` are inspected.  A falsy timeout is
        accepted here; the client replaces it with the default.
        """
        if config is None or not _field(config, "api_key"):
            raise ValidationError("API key is required")

        timeout = _field(config, "timeout")
        if timeout and not _is_number(timeout):
            raise ValidationError("Timeout must be a number")

    def validate_options(self, options: Mapping[str, Any], allowed_keys: Iterable[str]) -> None:
        allowed = set(allowed_keys)
        invalid = [key for key in options if key not in allowed]

        if invalid:
            raise ValidationError(
                f"Invalid options: {', '.join(map(str, invalid))}",
                {"invalid_options": invalid},
            )


__all__ = ["Validator"]
