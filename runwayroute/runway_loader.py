# runwayroute/runway_loader.py
"""
Loads runway ends from an X-Plane / FlightGear apt.dat file (plain or gzipped).

This is the airport/runway provider for the synthesizer: it turns each land
runway row into two RunwayEnd records whose thresholds account for any
displaced threshold and whose headings are true bearings down the runway.
"""
import gzip
import logging
import os
import platform
from typing import Dict, List, Optional

from .config import RouteConfig
from .constants import RouteConstants
from .data_models import Coordinate, RunwayEnd
from .exceptions import RunwayDataError, RunwayNotFoundError
from .utils.coordinates import calculate_bearing, destination_point, haversine_distance_nm
from .utils.naming import heading_from_designator, reciprocal_designator


class AptDatLoader:
    """Extracts runway ends from apt.dat files, indexed by airport ICAO code."""

    AIRPORT_CODES = {'1', '16', '17'}
    RUNWAY_CODES = {'100'}

    def __init__(self, apt_dat_path: Optional[str] = None):
        self.apt_dat_path = apt_dat_path or self._find_apt_dat()
        self._runway_ends: Optional[Dict[str, List[RunwayEnd]]] = None
        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=RouteConfig.LOG_LEVEL, format=RouteConfig.LOG_FORMAT)
        logging.info(f"AptDatLoader initialized. Path: {self.apt_dat_path}")

    def list_runway_ends(self, icao: str) -> List[RunwayEnd]:
        """All runway ends of an airport, in file order."""
        ends = self._load().get(icao.upper())
        if not ends:
            raise RunwayNotFoundError(icao.upper())
        return list(ends)

    def load_runway_end(self, icao: str, designator: str) -> RunwayEnd:
        wanted = designator.strip().upper()
        for end in self.list_runway_ends(icao):
            if end.designator == wanted:
                return end
        raise RunwayNotFoundError(icao.upper(), wanted)

    def load_opposite_end(self, icao: str, designator: str) -> RunwayEnd:
        """The other end of the same runway, e.g. '07L' for '25R'."""
        return self.load_runway_end(icao, reciprocal_designator(designator.strip().upper()))

    def _load(self) -> Dict[str, List[RunwayEnd]]:
        if self._runway_ends is not None:
            return self._runway_ends
        if not self.apt_dat_path or not os.path.exists(self.apt_dat_path):
            raise RunwayDataError(f"apt.dat file not found: {self.apt_dat_path}")
        try:
            self._runway_ends = self._parse_runways(self.apt_dat_path)
        except OSError as e:
            raise RunwayDataError(f"Failed to read runway data from {self.apt_dat_path}: {e}") from e
        total = sum(len(ends) for ends in self._runway_ends.values())
        logging.info(f"Loaded {total} runway ends at {len(self._runway_ends)} airports from apt.dat.")
        return self._runway_ends

    def _open(self, file_path: str):
        if file_path.endswith('.gz'):
            return gzip.open(file_path, 'rt', encoding='utf-8', errors='ignore')
        return open(file_path, 'r', encoding='utf-8', errors='ignore')

    def _parse_runways(self, file_path: str) -> Dict[str, List[RunwayEnd]]:
        runway_ends: Dict[str, List[RunwayEnd]] = {}
        current_airport = None
        current_elevation_ft = 0.0

        with self._open(file_path) as f:
            for line in f:
                parts = line.strip().split()
                if not parts: continue

                if parts[0] in self.AIRPORT_CODES and len(parts) >= 5:
                    current_airport = parts[4].upper()
                    try:
                        current_elevation_ft = float(parts[1])
                    except ValueError:
                        current_elevation_ft = 0.0

                elif parts[0] in self.RUNWAY_CODES and current_airport:
                    ends = self._parse_runway_line(parts, current_airport, current_elevation_ft)
                    if ends:
                        runway_ends.setdefault(current_airport, []).extend(ends)
        return runway_ends

    def _parse_runway_line(self, parts: List[str], airport_code: str, elevation_ft: float) -> Optional[List[RunwayEnd]]:
        try:
            if len(parts) < 20: return None

            id1, lat1, lon1 = parts[8].upper(), float(parts[9]), float(parts[10])
            displaced1_m = float(parts[11])
            id2, lat2, lon2 = parts[17].upper(), float(parts[18]), float(parts[19])
            displaced2_m = float(parts[20]) if len(parts) > 20 else 0.0

            if not (self._is_valid_coord(lat1, lon1) and self._is_valid_coord(lat2, lon2)): return None

            if haversine_distance_nm(lat1, lon1, lat2, lon2) > 0:
                heading1 = calculate_bearing(lat1, lon1, lat2, lon2)
                heading2 = calculate_bearing(lat2, lon2, lat1, lon1)
            else:
                # Zero-length runway: fall back to the painted designator
                heading1 = heading_from_designator(id1)
                heading2 = heading_from_designator(id2)
                if heading1 is None or heading2 is None:
                    return None
                heading1, heading2 = heading1 % 360.0, heading2 % 360.0

            return [
                self._make_end(airport_code, id1, lat1, lon1, heading1, displaced1_m, elevation_ft),
                self._make_end(airport_code, id2, lat2, lon2, heading2, displaced2_m, elevation_ft),
            ]
        except (ValueError, IndexError):
            return None

    def _make_end(self, airport_code: str, designator: str, lat: float, lon: float, heading: float,
                  displaced_m: float, elevation_ft: float) -> RunwayEnd:
        threshold = Coordinate(lat, lon)
        if displaced_m > 0:
            threshold = destination_point(threshold, heading, displaced_m * RouteConstants.METERS_TO_NM)
        return RunwayEnd(threshold=threshold, heading_deg=heading, elevation_ft=elevation_ft,
                         designator=designator, airport=airport_code)

    def _is_valid_coord(self, lat: float, lon: float) -> bool:
        return -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0

    def _find_apt_dat(self) -> Optional[str]:
        system = platform.system()
        paths = []
        if system == "Linux":
            paths = ["/usr/share/games/flightgear/Airports/apt.dat.gz", "/usr/share/flightgear/Airports/apt.dat.gz", os.path.expanduser("~/.fgfs/Airports/apt.dat.gz")]
        elif system == "Windows":
            paths = [os.path.join(os.environ.get("ProgramFiles", "C:\\Program Files"), "FlightGear", "data", "Airports", "apt.dat.gz")]
        elif system == "Darwin":
            paths = ["/Applications/FlightGear.app/Contents/Resources/data/Airports/apt.dat.gz"]

        for path in paths:
            if os.path.exists(path):
                return path
        return None
