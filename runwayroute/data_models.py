# runwayroute/data_models.py
"""
Defines the core data structures shared by the synthesizer, the sampler and
the reference collaborators (runway loader, playback clock, visualizer).

A Route is frozen once built: the playback loop reads it on every frame and
nothing is allowed to mutate it underneath.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class Coordinate:
    """A point on the sphere in decimal degrees."""
    lat: float
    lon: float


@dataclass(frozen=True)
class RunwayEnd:
    """One usable end of a runway, as supplied by the airport/runway provider."""
    threshold: Coordinate
    heading_deg: float
    elevation_ft: float
    designator: Optional[str] = None
    airport: Optional[str] = None


class FlightPhase(Enum):
    THRESHOLD_DEP = "THRESHOLD_DEP"
    DEPARTURE = "DEPARTURE"
    SID = "SID"
    ENROUTE = "ENROUTE"
    STAR = "STAR"
    APPROACH = "APPROACH"
    THRESHOLD_ARR = "THRESHOLD_ARR"


@dataclass(frozen=True)
class Waypoint:
    """A single fix of a synthesized route.

    ``heading_deg`` is the direction flown INTO this fix, except for the two
    thresholds which carry the runway (departure) and landing (arrival)
    headings.
    """
    id: str
    name: str
    phase: FlightPhase
    position: Coordinate
    altitude_ft: float
    speed_kts: float
    distance_from_prev_nm: float
    cumulative_distance_nm: float
    time_from_prev_min: float
    cumulative_time_min: float
    heading_deg: float


@dataclass(frozen=True)
class Route:
    """Represents a complete runway-to-runway route."""
    waypoints: Tuple[Waypoint, ...]
    total_distance_nm: float
    total_time_min: float
    cruise_altitude_ft: float
    cruise_speed_kts: float = 0.0
    is_degenerate: bool = False

    @property
    def departure(self) -> Waypoint:
        return self.waypoints[0]

    @property
    def arrival(self) -> Waypoint:
        return self.waypoints[-1]

    def waypoint_by_id(self, waypoint_id: str) -> Optional[Waypoint]:
        for wp in self.waypoints:
            if wp.id == waypoint_id:
                return wp
        return None

    def positions(self) -> np.ndarray:
        """Returns an (n, 2) array of (lat, lon) rows in traversal order."""
        return np.array([(wp.position.lat, wp.position.lon) for wp in self.waypoints], dtype=float)

    def phase_segments(self) -> List[Tuple[FlightPhase, List[Waypoint]]]:
        """Groups consecutive waypoints that share a phase."""
        segments: List[Tuple[FlightPhase, List[Waypoint]]] = []
        for wp in self.waypoints:
            if segments and segments[-1][0] is wp.phase:
                segments[-1][1].append(wp)
            else:
                segments.append((wp.phase, [wp]))
        return segments

    def summary(self) -> Dict[str, float]:
        """Scalar outputs consumed by dispatch and fuel planning."""
        return {
            "total_distance_nm": self.total_distance_nm,
            "total_time_min": self.total_time_min,
            "cruise_altitude_ft": self.cruise_altitude_ft,
            "waypoint_count": len(self.waypoints),
        }


@dataclass(frozen=True)
class Sample:
    """The aircraft state at a given progress along a route. Never stored."""
    position: Coordinate
    altitude_ft: float
    heading_deg: float
    speed_kts: float
    phase: FlightPhase
    distance_flown_nm: float
    time_elapsed_min: float
