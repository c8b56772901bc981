# Standard library imports
import math

# Local application imports
from app.services.verification.types import GeoPoint

# Mean Earth radius
EARTH_RADIUS_METERS = 6_371_000.0


def distance(point_a: GeoPoint, point_b: GeoPoint) -> float:
    """
    Great-circle distance in meters between two points (haversine formula).

    Symmetric and zero for identical points. Inputs are expected to be valid
    latitude/longitude pairs in degrees.
    """
    lat1, lon1 = math.radians(point_a.latitude), math.radians(point_a.longitude)
    lat2, lon2 = math.radians(point_b.latitude), math.radians(point_b.longitude)
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Rounding can push a a hair above 1 for antipodal points
    return 2 * EARTH_RADIUS_METERS * math.asin(math.sqrt(min(1.0, a)))


def bounding_box(center: GeoPoint, radius_meters: float) -> tuple[float, float, float, float] | None:
    """
    (min_lat, max_lat, min_lon, max_lon) box containing every point within
    ``radius_meters`` of ``center``, for narrowing database queries.

    Uses the exact extent of the spherical cap on the same sphere as
    ``distance``, so nothing the haversine check would accept falls outside.
    Returns None when the cap reaches a pole or crosses the antimeridian, in
    which case callers should skip the prefilter and rely on ``distance`` alone.
    """
    angular_radius = radius_meters / EARTH_RADIUS_METERS
    dlat = math.degrees(angular_radius)
    min_lat, max_lat = center.latitude - dlat, center.latitude + dlat
    if min_lat <= -90 or max_lat >= 90:
        return None

    ratio = math.sin(angular_radius) / math.cos(math.radians(center.latitude))
    if ratio >= 1:
        return None
    dlon = math.degrees(math.asin(ratio))
    min_lon, max_lon = center.longitude - dlon, center.longitude + dlon
    if min_lon < -180 or max_lon > 180:
        return None

    return min_lat, max_lat, min_lon, max_lon
