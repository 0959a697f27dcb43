from freeeats.services.geocoding.geocoding_service import GeocodingService

__all__ = ["GeocodingService"]
