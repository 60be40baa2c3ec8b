# runwayroute/core.py
"""
Runway-anchored route synthesis.

A route always starts on the departure runway threshold and ends on the
arrival runway threshold, never on an airport reference point. Between them
the synthesizer lays out a straight-out climb, a SID exit turned half way onto
course, evenly spaced enroute fixes on the threshold-to-threshold great
circle, a STAR entry, and a final approach fix on the extended centerline.
"""
import logging
import math
from typing import List, Optional

from .config import RouteConfig
from .constants import RouteConstants
from .data_models import Coordinate, FlightPhase, Route, RunwayEnd, Waypoint
from .exceptions import InvalidRouteParameterError
from .utils.coordinates import (
    bearing_deg, blend_heading, destination_point, distance_nm, interpolate_great_circle, normalize_heading,
)
from .utils.naming import generate_waypoint_name, runway_label
from .utils.profile import AltitudeProfile


class RouteSynthesizer:
    def __init__(self):
        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=RouteConfig.LOG_LEVEL, format=RouteConfig.LOG_FORMAT)

    def synthesize(self, departure: RunwayEnd, arrival: RunwayEnd,
                   cruise_altitude_ft: float = RouteConfig.DEFAULT_CRUISE_ALTITUDE_FT,
                   cruise_speed_kts: float = RouteConfig.DEFAULT_CRUISE_SPEED_KTS) -> Route:
        """Builds the route from departure threshold to arrival threshold.

        Raises InvalidRouteParameterError for non-finite or out-of-range input.
        Coincident thresholds do not raise; they collapse to a degenerate route.
        """
        self._validate_runway_end("departure", departure)
        self._validate_runway_end("arrival", arrival)
        cruise_altitude_ft = self._validate_positive("cruise_altitude_ft", cruise_altitude_ft)
        cruise_speed_kts = self._validate_positive("cruise_speed_kts", cruise_speed_kts)

        dep = departure.threshold
        arr = arrival.threshold
        dep_heading = normalize_heading(departure.heading_deg)
        landing_heading = normalize_heading(arrival.heading_deg + 180.0)
        direct_nm = distance_nm(dep, arr)
        scale, is_degenerate = self._layout_scale(direct_nm)

        logging.info(f"Synthesizing route from ({dep.lat:.4f}, {dep.lon:.4f}) to ({arr.lat:.4f}, {arr.lon:.4f}), "
                     f"direct {direct_nm:.1f} nm, FL{cruise_altitude_ft / 100:.0f} at {cruise_speed_kts:.0f} kt")

        builder = _WaypointBuilder()

        # 1. Departure threshold
        builder.add(
            id='THR_DEP', name=runway_label(departure.designator), phase=FlightPhase.THRESHOLD_DEP,
            position=dep, altitude_ft=departure.elevation_ft, speed_kts=0.0,
            leg_speed_kts=None, heading_deg=dep_heading,
        )

        # 2. Straight-out initial climb on runway heading
        climb_out = destination_point(dep, dep_heading, RouteConstants.CLIMB_OUT_DISTANCE_NM * scale)
        builder.add(
            id='DEP01', name=f"{departure.airport or ''}DEP", phase=FlightPhase.DEPARTURE,
            position=climb_out, altitude_ft=RouteConstants.CLIMB_OUT_ALTITUDE_FT,
            speed_kts=RouteConstants.CLIMB_OUT_SPEED_KTS,
            leg_speed_kts=RouteConstants.CLIMB_OUT_LEG_SPEED_KTS, heading_deg=dep_heading,
        )

        # 3. SID exit, half way between runway heading and course
        sid_distance = RouteConstants.SID_DISTANCE_NM * scale
        course = bearing_deg(dep, arr)
        sid_heading = blend_heading(dep_heading, course, 0.5)
        sid_point = destination_point(dep, sid_heading, sid_distance)
        builder.add(
            id='SID01', name=f"{departure.airport or ''}SID", phase=FlightPhase.SID,
            position=sid_point,
            altitude_ft=min(RouteConstants.TRANSITION_ALTITUDE_FT,
                            cruise_altitude_ft * RouteConstants.SID_ALTITUDE_FRACTION),
            speed_kts=RouteConstants.SID_SPEED_KTS, leg_speed_kts=RouteConstants.SID_LEG_SPEED_KTS,
        )

        # 4. Enroute fixes, re-anchored on the threshold-to-threshold great circle
        star_along_track = direct_nm - RouteConstants.STAR_ENTRY_DISTANCE_NM * scale
        enroute_length = max(0.0, star_along_track - sid_distance)
        profile = AltitudeProfile.for_enroute(sid_distance, star_along_track, cruise_altitude_ft)
        count = self._enroute_count(enroute_length)
        logging.debug(f"Enroute leg {enroute_length:.1f} nm with {count} fixes, "
                      f"TOC {profile.toc_distance_nm:.1f} nm, TOD {profile.tod_distance_nm:.1f} nm")

        for i in range(count):
            along_track = sid_distance + enroute_length * (i + 1) / (count + 1)
            altitude = profile.altitude_at(along_track)
            speed = cruise_speed_kts if altitude > RouteConstants.TRANSITION_ALTITUDE_FT \
                else RouteConstants.BELOW_TRANSITION_SPEED_KTS
            builder.add(
                id=f"ENR{i + 1:02d}", name=generate_waypoint_name(i), phase=FlightPhase.ENROUTE,
                position=self._on_course(dep, arr, along_track, direct_nm),
                altitude_ft=altitude, speed_kts=speed, leg_speed_kts=speed,
            )

        # 5. STAR entry
        builder.add(
            id='STAR01', name=f"{arrival.airport or ''}ARR", phase=FlightPhase.STAR,
            position=self._on_course(dep, arr, star_along_track, direct_nm),
            altitude_ft=RouteConstants.STAR_ALTITUDE_FT, speed_kts=RouteConstants.STAR_SPEED_KTS,
            leg_speed_kts=RouteConstants.STAR_LEG_SPEED_KTS,
        )

        # 6. Final approach fix on the extended centerline
        builder.add(
            id='APP01', name='FAF', phase=FlightPhase.APPROACH,
            position=destination_point(arr, landing_heading, RouteConstants.FAF_DISTANCE_NM * scale),
            altitude_ft=RouteConstants.FAF_ALTITUDE_FT, speed_kts=RouteConstants.FAF_SPEED_KTS,
            leg_speed_kts=RouteConstants.FAF_LEG_SPEED_KTS,
        )

        # 7. Arrival threshold. Stored heading is the reciprocal of the runway heading,
        # so it differs from the final-leg bearing sampled just before touchdown.
        builder.add(
            id='THR_ARR', name=runway_label(arrival.designator), phase=FlightPhase.THRESHOLD_ARR,
            position=arr, altitude_ft=arrival.elevation_ft, speed_kts=RouteConstants.LANDING_SPEED_KTS,
            leg_speed_kts=RouteConstants.FINAL_LEG_SPEED_KTS, heading_deg=landing_heading,
        )

        route = Route(
            waypoints=tuple(builder.waypoints),
            total_distance_nm=builder.cumulative_distance_nm,
            total_time_min=builder.cumulative_time_min,
            cruise_altitude_ft=cruise_altitude_ft,
            cruise_speed_kts=cruise_speed_kts,
            is_degenerate=is_degenerate,
        )
        logging.info(f"Route generated: {len(route.waypoints)} waypoints, "
                     f"{route.total_distance_nm:.1f} nm, {route.total_time_min:.1f} min")
        return route

    def _layout_scale(self, direct_nm: float):
        """Scale applied to the fixed phase offsets, and whether the route is degenerate."""
        if direct_nm < RouteConstants.DEGENERATE_DISTANCE_NM:
            logging.warning(f"Departure and arrival thresholds are {direct_nm:.4f} nm apart. "
                            f"Collapsing to a degenerate route.")
            return 0.0, True
        if direct_nm < RouteConstants.NOMINAL_LAYOUT_DISTANCE_NM:
            scale = direct_nm / RouteConstants.NOMINAL_LAYOUT_DISTANCE_NM
            logging.warning(f"Route of {direct_nm:.1f} nm is shorter than the nominal "
                            f"{RouteConstants.NOMINAL_LAYOUT_DISTANCE_NM:.0f} nm layout. "
                            f"Scaling SID/STAR/approach offsets by {scale:.2f}.")
            return scale, False
        return 1.0, False

    def _enroute_count(self, enroute_length_nm: float) -> int:
        count = math.ceil(enroute_length_nm / RouteConstants.ENROUTE_SPACING_NM)
        return min(RouteConstants.MAX_ENROUTE_WAYPOINTS, max(RouteConstants.MIN_ENROUTE_WAYPOINTS, count))

    def _on_course(self, dep: Coordinate, arr: Coordinate, along_track_nm: float, direct_nm: float) -> Coordinate:
        if direct_nm <= 0:
            return dep
        return interpolate_great_circle(dep, arr, along_track_nm / direct_nm)

    def _validate_runway_end(self, label: str, end: RunwayEnd) -> None:
        if not isinstance(end, RunwayEnd):
            raise InvalidRouteParameterError(label, end, "Expected a RunwayEnd")
        if not isinstance(end.threshold, Coordinate):
            raise InvalidRouteParameterError(f"{label}.threshold", end.threshold, "Expected a Coordinate")
        lat = self._validate_finite(f"{label}.threshold.lat", end.threshold.lat)
        lon = self._validate_finite(f"{label}.threshold.lon", end.threshold.lon)
        if not -90.0 <= lat <= 90.0:
            raise InvalidRouteParameterError(f"{label}.threshold.lat", lat, "Latitude out of range")
        if not -180.0 <= lon <= 180.0:
            raise InvalidRouteParameterError(f"{label}.threshold.lon", lon, "Longitude out of range")
        self._validate_finite(f"{label}.heading_deg", end.heading_deg)
        self._validate_finite(f"{label}.elevation_ft", end.elevation_ft)

    def _validate_finite(self, name: str, value) -> float:
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise InvalidRouteParameterError(name, value, "Not a number")
        if not math.isfinite(number):
            raise InvalidRouteParameterError(name, value, "Not a finite number")
        return number

    def _validate_positive(self, name: str, value) -> float:
        number = self._validate_finite(name, value)
        if number <= 0:
            raise InvalidRouteParameterError(name, value, "Must be positive")
        return number


class _WaypointBuilder:
    """Accumulates waypoints with their per-leg distance and time bookkeeping."""

    def __init__(self):
        self.waypoints: List[Waypoint] = []
        self.cumulative_distance_nm = 0.0
        self.cumulative_time_min = 0.0

    def add(self, id: str, name: str, phase: FlightPhase, position: Coordinate, altitude_ft: float,
            speed_kts: float, leg_speed_kts: Optional[float], heading_deg: Optional[float] = None) -> Waypoint:
        if not self.waypoints:
            leg_distance = 0.0
            leg_time = 0.0
        else:
            previous = self.waypoints[-1]
            leg_distance = distance_nm(previous.position, position)
            leg_time = leg_distance / leg_speed_kts * RouteConstants.MINUTES_PER_HOUR
            if heading_deg is None:
                # Zero-length legs keep the previous heading instead of the kernel's 0 default
                heading_deg = bearing_deg(previous.position, position) if leg_distance > 0 else previous.heading_deg

        self.cumulative_distance_nm += leg_distance
        self.cumulative_time_min += leg_time
        waypoint = Waypoint(
            id=id, name=name, phase=phase, position=position,
            altitude_ft=float(altitude_ft), speed_kts=float(speed_kts),
            distance_from_prev_nm=leg_distance, cumulative_distance_nm=self.cumulative_distance_nm,
            time_from_prev_min=leg_time, cumulative_time_min=self.cumulative_time_min,
            heading_deg=normalize_heading(heading_deg),
        )
        self.waypoints.append(waypoint)
        return waypoint


def synthesize(departure: RunwayEnd, arrival: RunwayEnd,
               cruise_altitude_ft: float = RouteConfig.DEFAULT_CRUISE_ALTITUDE_FT,
               cruise_speed_kts: float = RouteConfig.DEFAULT_CRUISE_SPEED_KTS) -> Route:
    """Convenience wrapper around RouteSynthesizer().synthesize()."""
    return RouteSynthesizer().synthesize(departure, arrival, cruise_altitude_ft, cruise_speed_kts)
