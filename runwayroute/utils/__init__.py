# Exposes the geodesy kernel and helpers for easier access.

from .coordinates import (
    distance_nm, bearing_deg, interpolate_great_circle, destination_point,
    normalize_heading, normalize_longitude, heading_difference, blend_heading,
)
from .profile import AltitudeProfile
from .naming import generate_waypoint_name, heading_from_designator, reciprocal_designator
from .geojson import route_to_geojson, waypoints_to_geojson

__all__ = [
    "distance_nm",
    "bearing_deg",
    "interpolate_great_circle",
    "destination_point",
    "normalize_heading",
    "normalize_longitude",
    "heading_difference",
    "blend_heading",
    "AltitudeProfile",
    "generate_waypoint_name",
    "heading_from_designator",
    "reciprocal_designator",
    "route_to_geojson",
    "waypoints_to_geojson",
]
