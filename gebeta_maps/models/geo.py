"""
Geographic value objects
========================

``GeoPoint`` plus the provider's point wire format: ``{<lat>,<lon>}`` with
literal braces, no quoting, numbers as given, and comma-joined when a single
query field carries several points.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float


def _coordinates(point: Any) -> tuple[Any, Any]:
    if isinstance(point, Mapping):
        return point.get("latitude"), point.get("longitude")
    return getattr(point, "latitude", None), getattr(point, "longitude", None)


def format_point(point: Any) -> str:
    latitude, longitude = _coordinates(point)
    return f"{{{latitude},{longitude}}}"


def format_points(points: Iterable[Any]) -> str:
    """Comma-join formatted points, ``""`` for an empty iterable."""
    return ",".join(format_point(point) for point in points)


__all__ = ["GeoPoint", "format_point", "format_points"]
