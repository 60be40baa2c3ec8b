#!/usr/bin/env python3
"""
Synthesizes a runway-to-runway route, prints the waypoint table, replays it
at high speed in the terminal and writes the 2D map and 3D profile.

Usage:
    python examples/E010_route_playback.py [apt.dat path]
"""
import sys
import time
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

# --- MODULAR IMPORTS ---
from runwayroute import (
    AptDatLoader, Coordinate, PlaybackClock, RouteError, RouteSynthesizer, RunwayEnd, route_to_geojson,
)
from runwayroute.visualization import RouteVisualizer

# Fallback thresholds when no apt.dat is available
KJFK_13R = RunwayEnd(Coordinate(40.64848, -73.81630), heading_deg=134.0, elevation_ft=13.0, designator="13R", airport="KJFK")
KBOS_04R = RunwayEnd(Coordinate(42.35630, -71.01260), heading_deg=35.0, elevation_ft=19.0, designator="04R", airport="KBOS")


def _load_runways(apt_dat_path=None):
    try:
        loader = AptDatLoader(apt_dat_path)
        return loader.load_runway_end("KJFK", "13R"), loader.load_runway_end("KBOS", "04R")
    except RouteError as e:
        print(f"WARNING: {e}. Using built-in thresholds.")
        return KJFK_13R, KBOS_04R


def main():
    departure, arrival = _load_runways(sys.argv[1] if len(sys.argv) > 1 else None)
    route = RouteSynthesizer().synthesize(departure, arrival, cruise_altitude_ft=24000, cruise_speed_kts=300)

    print(f"\n{'ID':<8}{'NAME':<10}{'PHASE':<15}{'ALT':>7}{'SPD':>6}{'LEG':>8}{'CUM':>8}{'TIME':>7}")
    for wp in route.waypoints:
        print(f"{wp.id:<8}{wp.name:<10}{wp.phase.value:<15}{wp.altitude_ft:>7.0f}{wp.speed_kts:>6.0f}"
              f"{wp.distance_from_prev_nm:>8.1f}{wp.cumulative_distance_nm:>8.1f}{wp.cumulative_time_min:>7.1f}")
    print(f"\nTotal: {route.total_distance_nm:.1f} nm, {route.total_time_min:.1f} min, "
          f"{len(route_to_geojson(route)['features'])} map features")

    # Whole flight in about five seconds of wall time
    playback = PlaybackClock(route, speed_multiplier=route.total_time_min * 60 / 5)
    playback.play()
    while not playback.is_complete():
        state = playback.frame()
        print(f"\r{state.phase.value:<14} {state.position.lat:9.4f} {state.position.lon:10.4f} "
              f"{state.altitude_ft:7.0f} ft {state.heading_deg:5.1f}° {state.speed_kts:5.0f} kt "
              f"{state.distance_flown_nm:7.1f} nm", end="", flush=True)
        time.sleep(1 / 30)
    print()

    visualizer = RouteVisualizer()
    visualizer.save_map(visualizer.create_route_map(route, playback.frame()), "route_map.html")
    visualizer.save_3d_plot(visualizer.create_profile_plot(route), "route_profile.html")


if __name__ == "__main__":
    main()
