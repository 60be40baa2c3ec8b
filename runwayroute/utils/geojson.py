# runwayroute/utils/geojson.py
"""
GeoJSON export of a synthesized route for map layers. Coordinates are in
GeoJSON [lon, lat] order.
"""
from typing import Any, Dict, List

from ..data_models import Route, Waypoint


def _line_coordinates(waypoints: List[Waypoint]) -> List[List[float]]:
    return [[wp.position.lon, wp.position.lat] for wp in waypoints]


def route_to_geojson(route: Route, name: str = "route") -> Dict[str, Any]:
    """Builds a FeatureCollection: the whole route, then one line per phase segment."""
    features = [{
        "type": "Feature",
        "geometry": {"type": "LineString", "coordinates": _line_coordinates(list(route.waypoints))},
        "properties": {
            "name": name,
            "type": "route",
            "phase": "all",
            "total_distance_nm": route.total_distance_nm,
            "total_time_min": route.total_time_min,
        },
    }]

    for phase, waypoints in route.phase_segments():
        if len(waypoints) < 2:
            continue
        features.append({
            "type": "Feature",
            "geometry": {"type": "LineString", "coordinates": _line_coordinates(waypoints)},
            "properties": {"name": f"{phase.value} segment", "type": "segment", "phase": phase.value},
        })

    return {"type": "FeatureCollection", "features": features}


def waypoints_to_geojson(route: Route) -> Dict[str, Any]:
    """One Point feature per waypoint, carrying its profile data."""
    features = []
    for wp in route.waypoints:
        features.append({
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [wp.position.lon, wp.position.lat]},
            "properties": {
                "id": wp.id,
                "name": wp.name,
                "phase": wp.phase.value,
                "altitude_ft": wp.altitude_ft,
                "speed_kts": wp.speed_kts,
                "cumulative_distance_nm": wp.cumulative_distance_nm,
                "cumulative_time_min": wp.cumulative_time_min,
            },
        })
    return {"type": "FeatureCollection", "features": features}
