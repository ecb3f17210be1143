"""
Geographic utilities for ZIP Population Coverage.
Great-circle distance between ZIP centroids.
"""
import math

# Earth radius used by the meters-based haversine formula (WGS84 equatorial)
EARTH_RADIUS_M = 6378137
METERS_PER_MILE = 1609.34


def _to_rad(degrees):
    return degrees * math.pi / 180.0


def haversine_meters(lat1, lng1, lat2, lng2):
    """Calculate distance between two points in meters."""
    lat1_rad, lat2_rad = _to_rad(lat1), _to_rad(lat2)
    dlat = lat2_rad - lat1_rad
    dlng = _to_rad(lng2) - _to_rad(lng1)
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlng / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(h))


def distance_miles(a, b):
    """
    Distance in statute miles between two points.

    Both arguments only need ``lat`` and ``lng`` attributes in degrees,
    so ZipRecord instances can be passed directly.
    """
    return haversine_meters(a.lat, a.lng, b.lat, b.lng) / METERS_PER_MILE
