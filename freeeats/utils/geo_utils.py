"""
Geolocation utilities
"""

import math
from dataclasses import dataclass

EARTH_RADIUS_M = 6371000.0
METERS_PER_MILE = 1609.344


@dataclass(frozen=True)
class GeoPoint:
    """Geographic point with latitude and longitude"""
    latitude: float
    longitude: float

    def __post_init__(self):
        if not (-90 <= self.latitude <= 90):
            raise ValueError("Latitude must be between -90 and 90")
        if not (-180 <= self.longitude <= 180):
            raise ValueError("Longitude must be between -180 and 180")


def distance_meters(point1: GeoPoint, point2: GeoPoint) -> float:
    """Great-circle distance using the Haversine formula"""
    lat1, lon1 = math.radians(point1.latitude), math.radians(point1.longitude)
    lat2, lon2 = math.radians(point2.latitude), math.radians(point2.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2)
    c = 2 * math.asin(math.sqrt(a))
    return c * EARTH_RADIUS_M


def miles_to_meters(miles: float) -> float:
    return miles * METERS_PER_MILE
