from gebeta_maps.services.mapService import MapService

__all__ = ["MapService"]
