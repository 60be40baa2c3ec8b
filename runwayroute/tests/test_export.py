#!/usr/bin/env python3
# runwayroute/tests/test_export.py

import sys
import tempfile
import unittest
from pathlib import Path

import folium
import plotly.graph_objects as go

# Add project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from runwayroute.core import synthesize
from runwayroute.data_models import Coordinate, RunwayEnd
from runwayroute.sampler import sample
from runwayroute.utils.geojson import route_to_geojson, waypoints_to_geojson
from runwayroute.visualization.plotter import RouteVisualizer

JFK_13R = RunwayEnd(Coordinate(40.6485, -73.8163), heading_deg=134.0, elevation_ft=13.0)
BOS_04R = RunwayEnd(Coordinate(42.3563, -71.0126), heading_deg=35.0, elevation_ft=19.0)


class TestGeoJson(unittest.TestCase):
    def setUp(self):
        self.route = synthesize(JFK_13R, BOS_04R, 24000, 300)

    def test_route_feature_collection(self):
        collection = route_to_geojson(self.route, name="KJFK-KBOS")
        self.assertEqual(collection["type"], "FeatureCollection")
        whole, *segments = collection["features"]
        self.assertEqual(whole["properties"]["name"], "KJFK-KBOS")
        self.assertEqual(len(whole["geometry"]["coordinates"]), len(self.route.waypoints))
        self.assertEqual(whole["geometry"]["coordinates"][0], [JFK_13R.threshold.lon, JFK_13R.threshold.lat])
        # Only the enroute phase has more than one fix
        self.assertEqual([f["properties"]["phase"] for f in segments], ["ENROUTE"])

    def test_waypoint_points(self):
        collection = waypoints_to_geojson(self.route)
        self.assertEqual(len(collection["features"]), len(self.route.waypoints))
        self.assertEqual(collection["features"][-1]["properties"]["id"], "THR_ARR")


class TestRouteVisualizer(unittest.TestCase):
    def setUp(self):
        self.route = synthesize(JFK_13R, BOS_04R, 24000, 300)
        self.visualizer = RouteVisualizer()
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()

    def test_route_map(self):
        m = self.visualizer.create_route_map(self.route, sample(self.route, 0.4))
        self.assertIsInstance(m, folium.Map)
        out = Path(self.tmp.name) / "route.html"
        self.visualizer.save_map(m, str(out))
        self.assertTrue(out.exists())

    def test_profile_plot(self):
        fig = self.visualizer.create_profile_plot(self.route)
        self.assertIsInstance(fig, go.Figure)
        self.assertEqual(len(fig.data), 2)
        self.assertEqual(len(fig.data[1].x), len(self.route.waypoints))


if __name__ == '__main__':
    unittest.main()
