# runwayroute/__init__.py
"""
Initializes the runwayroute package, defining its public API.

Route synthesis and progress sampling are the core; the runway loader,
playback clock and GeoJSON export are thin collaborators around them.
"""
# Core operations
from .core import RouteSynthesizer, synthesize
from .sampler import sample, sample_series

# Public data models
from .data_models import Coordinate, RunwayEnd, FlightPhase, Waypoint, Route, Sample

# Geodesy kernel
from .utils.coordinates import distance_nm, bearing_deg, interpolate_great_circle, destination_point
from .utils.geojson import route_to_geojson

# Collaborators
from .playback import PlaybackClock
from .runway_loader import AptDatLoader
from .config import RouteConfig
from .exceptions import (
    RouteError, InvalidRouteParameterError, RunwayDataError, RunwayNotFoundError, PlaybackError,
)

__all__ = [
    'RouteSynthesizer', 'synthesize', 'sample', 'sample_series',
    'Coordinate', 'RunwayEnd', 'FlightPhase', 'Waypoint', 'Route', 'Sample',
    'distance_nm', 'bearing_deg', 'interpolate_great_circle', 'destination_point',
    'route_to_geojson', 'PlaybackClock', 'AptDatLoader', 'RouteConfig',
    'RouteError', 'InvalidRouteParameterError', 'RunwayDataError', 'RunwayNotFoundError', 'PlaybackError',
]
