from gebeta_maps.models.geo import GeoPoint, format_point, format_points

__all__ = ["GeoPoint", "format_point", "format_points"]
