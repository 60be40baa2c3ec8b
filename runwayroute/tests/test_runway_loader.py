#!/usr/bin/env python3
# runwayroute/tests/test_runway_loader.py

import gzip
import sys
import tempfile
import unittest
from pathlib import Path

# Add project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from runwayroute.core import synthesize
from runwayroute.data_models import Coordinate
from runwayroute.exceptions import RunwayDataError, RunwayNotFoundError
from runwayroute.runway_loader import AptDatLoader
from runwayroute.utils.coordinates import bearing_deg, distance_nm

APT_DAT = """I
1100 Generated for tests

1     13 0 0 KJFK John F Kennedy Intl
100 60.96 1 0 0.25 0 2 1 04L 40.62202 -73.78558 0.00 0.00 2 0 0 1 22R 40.64241 -73.75588 300.00 0.00 2 0 0 1
100 45.72 1 0 0.25 0 2 1 13R 40.64848 -73.81630 0.00 0.00 2 0 0 1 31L 40.62017 -73.77051 0.00 0.00 2 0 0 1
101 Sealane that must be ignored

1     19 0 0 KBOS General Edward Lawrence Logan Intl
100 45.72 1 0 0.25 0 2 1 04R 42.35630 -71.01260 0.00 0.00 2 0 0 1 22L 42.38230 -70.99810 0.00 0.00 2 0 0 1
99
"""


class TestAptDatLoader(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "apt.dat"
        self.path.write_text(APT_DAT, encoding="utf-8")
        self.loader = AptDatLoader(str(self.path))

    def tearDown(self):
        self.tmp.cleanup()

    def test_lists_both_ends_of_each_runway(self):
        designators = [end.designator for end in self.loader.list_runway_ends("kjfk")]
        self.assertEqual(designators, ["04L", "22R", "13R", "31L"])

    def test_runway_end_fields(self):
        end = self.loader.load_runway_end("KJFK", "04l")
        self.assertEqual(end.airport, "KJFK")
        self.assertEqual(end.elevation_ft, 13.0)
        self.assertEqual(end.threshold, Coordinate(40.62202, -73.78558))
        expected = bearing_deg(Coordinate(40.62202, -73.78558), Coordinate(40.64241, -73.75588))
        self.assertAlmostEqual(end.heading_deg, expected, places=9)

    def test_displaced_threshold_moves_down_the_runway(self):
        end = self.loader.load_runway_end("KJFK", "22R")
        raw = Coordinate(40.64241, -73.75588)
        self.assertAlmostEqual(distance_nm(raw, end.threshold), 300.0 / 1852.0, places=6)
        self.assertAlmostEqual(bearing_deg(raw, end.threshold), end.heading_deg, places=3)

    def test_opposite_end(self):
        self.assertEqual(self.loader.load_opposite_end("KJFK", "13R").designator, "31L")

    def test_gzipped_file(self):
        gz_path = Path(self.tmp.name) / "apt.dat.gz"
        with gzip.open(gz_path, "wt", encoding="utf-8") as f:
            f.write(APT_DAT)
        loader = AptDatLoader(str(gz_path))
        self.assertEqual(loader.load_runway_end("KBOS", "04R").elevation_ft, 19.0)

    def test_missing_airport_and_runway(self):
        with self.assertRaises(RunwayNotFoundError):
            self.loader.list_runway_ends("EGLL")
        with self.assertRaises(RunwayNotFoundError) as ctx:
            self.loader.load_runway_end("KJFK", "09")
        self.assertEqual(ctx.exception.designator, "09")

    def test_missing_file(self):
        loader = AptDatLoader(str(Path(self.tmp.name) / "nope.dat"))
        with self.assertRaises(RunwayDataError):
            loader.list_runway_ends("KJFK")

    def test_feeds_synthesizer(self):
        route = synthesize(self.loader.load_runway_end("KJFK", "13R"), self.loader.load_runway_end("KBOS", "04R"))
        self.assertEqual(route.waypoints[0].name, "RWY 13R")
        self.assertEqual(route.waypoints[1].name, "KJFKDEP")
        self.assertEqual(route.waypoints[-1].position, Coordinate(42.3563, -71.0126))


if __name__ == '__main__':
    unittest.main()
