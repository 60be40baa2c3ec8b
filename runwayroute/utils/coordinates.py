# runwayroute/utils/coordinates.py
"""
Spherical geodesy kernel. Logging is omitted here as these are high-frequency,
low-level functions called once or more per rendered frame.

Earth is a sphere of RouteConstants.EARTH_RADIUS_NM; degrees are converted
with RouteConstants.DEG_TO_RAD / RAD_TO_DEG only, so results are reproducible
across implementations that use the same constants.
"""
import math

from ..constants import RouteConstants
from ..data_models import Coordinate

DEG_TO_RAD = RouteConstants.DEG_TO_RAD
RAD_TO_DEG = RouteConstants.RAD_TO_DEG
EARTH_RADIUS_NM = RouteConstants.EARTH_RADIUS_NM

# Below this angular distance (radians) two points are treated as coincident
_COINCIDENT_RAD = 1e-12


def normalize_heading(heading_deg: float) -> float:
    """Wraps a heading into [0, 360)."""
    heading = heading_deg % 360.0
    # -1e-15 % 360.0 rounds up to 360.0
    if heading >= 360.0:
        heading = 0.0
    return heading


def normalize_longitude(lon: float) -> float:
    """Wraps a longitude into (-180, 180]."""
    wrapped = (lon + 180.0) % 360.0 - 180.0
    if wrapped <= -180.0:
        wrapped += 360.0
    return wrapped


def heading_difference(from_deg: float, to_deg: float) -> float:
    """Signed shortest turn from one heading to another, in [-180, 180)."""
    return (to_deg - from_deg + 180.0) % 360.0 - 180.0


def blend_heading(from_deg: float, to_deg: float, weight: float = 0.5) -> float:
    """Heading part way between two headings, turning the shorter way."""
    return normalize_heading(from_deg + heading_difference(from_deg, to_deg) * weight)


def _angular_distance(a: Coordinate, b: Coordinate) -> float:
    lat1_rad, lon1_rad = a.lat * DEG_TO_RAD, a.lon * DEG_TO_RAD
    lat2_rad, lon2_rad = b.lat * DEG_TO_RAD, b.lon * DEG_TO_RAD
    dlat = lat2_rad - lat1_rad; dlon = lon2_rad - lon1_rad
    h = math.sin(dlat / 2)**2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2)**2
    h = min(1.0, max(0.0, h))
    return 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def distance_nm(a: Coordinate, b: Coordinate) -> float:
    """Haversine great-circle distance in nautical miles."""
    return EARTH_RADIUS_NM * _angular_distance(a, b)


def bearing_deg(a: Coordinate, b: Coordinate) -> float:
    """Initial great-circle bearing from a to b in [0, 360). Coincident points give 0."""
    if a.lat == b.lat and a.lon == b.lon:
        return 0.0
    lat1_rad, lat2_rad = a.lat * DEG_TO_RAD, b.lat * DEG_TO_RAD
    dlon = (b.lon - a.lon) * DEG_TO_RAD
    y = math.sin(dlon) * math.cos(lat2_rad)
    x = math.cos(lat1_rad) * math.sin(lat2_rad) - math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(dlon)
    return normalize_heading(math.atan2(y, x) * RAD_TO_DEG)


def destination_point(origin: Coordinate, bearing: float, distance: float) -> Coordinate:
    """Start at origin, fly `distance` nm on initial `bearing` degrees."""
    if distance == 0:
        return origin
    lat_rad = origin.lat * DEG_TO_RAD; lon_rad = origin.lon * DEG_TO_RAD; bearing_rad = bearing * DEG_TO_RAD
    angular_distance = distance / EARTH_RADIUS_NM
    dest_lat_rad = math.asin(math.sin(lat_rad) * math.cos(angular_distance) +
                             math.cos(lat_rad) * math.sin(angular_distance) * math.cos(bearing_rad))
    dest_lon_rad = lon_rad + math.atan2(math.sin(bearing_rad) * math.sin(angular_distance) * math.cos(lat_rad),
                                        math.cos(angular_distance) - math.sin(lat_rad) * math.sin(dest_lat_rad))
    return Coordinate(lat=dest_lat_rad * RAD_TO_DEG, lon=normalize_longitude(dest_lon_rad * RAD_TO_DEG))


def interpolate_great_circle(a: Coordinate, b: Coordinate, fraction: float) -> Coordinate:
    """Spherical linear interpolation from a (fraction 0) to b (fraction 1)."""
    f = min(1.0, max(0.0, fraction))
    if f == 0.0:
        return a
    if f == 1.0:
        return b

    d = _angular_distance(a, b)
    if d < _COINCIDENT_RAD:
        return a
    sin_d = math.sin(d)
    if sin_d < _COINCIDENT_RAD:
        # Antipodal: every meridian is a great circle through both points
        return destination_point(a, 0.0, f * d * EARTH_RADIUS_NM)

    lat1_rad, lon1_rad = a.lat * DEG_TO_RAD, a.lon * DEG_TO_RAD
    lat2_rad, lon2_rad = b.lat * DEG_TO_RAD, b.lon * DEG_TO_RAD
    A = math.sin((1 - f) * d) / sin_d
    B = math.sin(f * d) / sin_d

    x = A * math.cos(lat1_rad) * math.cos(lon1_rad) + B * math.cos(lat2_rad) * math.cos(lon2_rad)
    y = A * math.cos(lat1_rad) * math.sin(lon1_rad) + B * math.cos(lat2_rad) * math.sin(lon2_rad)
    z = A * math.sin(lat1_rad) + B * math.sin(lat2_rad)

    return Coordinate(
        lat=math.atan2(z, math.sqrt(x * x + y * y)) * RAD_TO_DEG,
        lon=normalize_longitude(math.atan2(y, x) * RAD_TO_DEG),
    )


# --- Compatibility Layer for callers that work in raw lat/lon floats ---

def haversine_distance_nm(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Alias for distance_nm on raw floats."""
    return distance_nm(Coordinate(lat1, lon1), Coordinate(lat2, lon2))


def calculate_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Alias for bearing_deg on raw floats."""
    return bearing_deg(Coordinate(lat1, lon1), Coordinate(lat2, lon2))
