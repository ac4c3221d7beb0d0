"""Geo engine core package."""

from geo_engine.distance import EARTH_RADIUS_KM, haversine_distance_km
from geo_engine.models import GeoPoint
from geo_engine.nearest import EmptyCandidatesError, find_nearest

__all__ = [
    "EARTH_RADIUS_KM",
    "EmptyCandidatesError",
    "GeoPoint",
    "find_nearest",
    "haversine_distance_km",
]
