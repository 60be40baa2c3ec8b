# runwayroute/sampler.py
"""
Progress sampling along a synthesized route.

Stateless and called once per rendered frame, so nothing here logs. Progress
is fractional completion BY DISTANCE and may jump backwards (scrubbing).
"""
import math
from bisect import bisect_right
from typing import List

import numpy as np

from .config import RouteConfig
from .data_models import Route, Sample
from .utils.coordinates import bearing_deg, interpolate_great_circle


def clamp_progress(progress: float) -> float:
    if progress is None or math.isnan(progress):
        return 0.0
    return min(1.0, max(0.0, float(progress)))


def sample(route: Route, progress: float) -> Sample:
    """Aircraft state at `progress` in [0, 1]; out-of-range values are clamped."""
    p = clamp_progress(progress)
    waypoints = route.waypoints
    target_nm = p * route.total_distance_nm

    # Last waypoint whose cumulative distance is not beyond the target
    cumulative = [wp.cumulative_distance_nm for wp in waypoints]
    index = max(0, bisect_right(cumulative, target_nm) - 1)

    if p >= 1.0 or index >= len(waypoints) - 1:
        final = waypoints[-1]
        return Sample(
            position=final.position, altitude_ft=final.altitude_ft, heading_deg=final.heading_deg,
            speed_kts=final.speed_kts, phase=final.phase,
            distance_flown_nm=route.total_distance_nm, time_elapsed_min=route.total_time_min,
        )

    current_wp = waypoints[index]
    next_wp = waypoints[index + 1]

    segment_length = next_wp.cumulative_distance_nm - current_wp.cumulative_distance_nm
    if segment_length > 0:
        fraction = (target_nm - current_wp.cumulative_distance_nm) / segment_length
    else:
        fraction = 0.0
    fraction = min(1.0, max(0.0, fraction))

    position = interpolate_great_circle(current_wp.position, next_wp.position, fraction)
    altitude = current_wp.altitude_ft + (next_wp.altitude_ft - current_wp.altitude_ft) * fraction
    speed = current_wp.speed_kts + (next_wp.speed_kts - current_wp.speed_kts) * fraction

    # Heading is re-derived at the sampled point; stored headings describe the leg INTO a fix
    if position.lat == next_wp.position.lat and position.lon == next_wp.position.lon:
        heading = next_wp.heading_deg
    else:
        heading = bearing_deg(position, next_wp.position)

    time_elapsed = current_wp.cumulative_time_min + \
        (next_wp.cumulative_time_min - current_wp.cumulative_time_min) * fraction

    return Sample(
        position=position,
        altitude_ft=altitude,
        heading_deg=heading,
        speed_kts=speed,
        phase=current_wp.phase,
        distance_flown_nm=target_nm,
        time_elapsed_min=time_elapsed,
    )


def sample_series(route: Route, count: int = RouteConfig.DEFAULT_SERIES_POINTS) -> List[Sample]:
    """Samples at `count` evenly spaced progress values from 0 to 1 inclusive."""
    if count < 1:
        return []
    return [sample(route, float(p)) for p in np.linspace(0.0, 1.0, count)]
