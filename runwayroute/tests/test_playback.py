#!/usr/bin/env python3
# runwayroute/tests/test_playback.py

import sys
import unittest
from pathlib import Path

# Add project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from runwayroute.core import synthesize
from runwayroute.data_models import Coordinate, RunwayEnd
from runwayroute.exceptions import PlaybackError
from runwayroute.playback import PlaybackClock
from runwayroute.sampler import sample

JFK_13R = RunwayEnd(Coordinate(40.6485, -73.8163), heading_deg=134.0, elevation_ft=13.0)
BOS_04R = RunwayEnd(Coordinate(42.3563, -71.0126), heading_deg=35.0, elevation_ft=19.0)


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class TestPlaybackClock(unittest.TestCase):
    def setUp(self):
        self.route = synthesize(JFK_13R, BOS_04R, 24000, 300)
        self.clock = FakeClock()
        # x60: one wall-clock second is one simulated minute
        self.playback = PlaybackClock(self.route, speed_multiplier=60.0, time_source=self.clock)

    def test_starts_paused_at_departure(self):
        self.assertFalse(self.playback.is_playing)
        self.assertEqual(self.playback.progress(), 0.0)
        self.assertEqual(self.playback.frame(), sample(self.route, 0.0))

    def test_progress_follows_simulated_time(self):
        self.playback.play()
        self.clock.advance(self.route.total_time_min / 2)
        self.assertAlmostEqual(self.playback.progress(), 0.5, places=9)
        self.assertEqual(self.playback.frame(), sample(self.route, self.playback.progress()))

    def test_pause_freezes_progress(self):
        self.playback.play()
        self.clock.advance(self.route.total_time_min / 4)
        self.playback.pause()
        frozen = self.playback.progress()
        self.clock.advance(1000.0)
        self.assertEqual(self.playback.progress(), frozen)
        self.playback.play()
        self.clock.advance(self.route.total_time_min / 4)
        self.assertAlmostEqual(self.playback.progress(), 0.5, places=9)

    def test_seek_while_playing(self):
        self.playback.play()
        self.clock.advance(5.0)
        self.playback.seek(0.8)
        self.assertAlmostEqual(self.playback.progress(), 0.8, places=9)
        self.playback.seek(-3.0)
        self.assertEqual(self.playback.progress(), 0.0)

    def test_speed_change_applies_from_now(self):
        self.playback.play()
        self.clock.advance(self.route.total_time_min / 4)
        self.playback.set_speed(120.0)
        self.clock.advance(self.route.total_time_min / 8)
        self.assertAlmostEqual(self.playback.progress(), 0.5, places=9)

    def test_completes_and_restarts(self):
        self.playback.play()
        self.clock.advance(self.route.total_time_min * 2)
        self.assertTrue(self.playback.is_complete())
        self.assertEqual(self.playback.frame().position, BOS_04R.threshold)
        self.playback.pause()
        self.playback.play()
        self.assertEqual(self.playback.progress(), 0.0)

    def test_stop_resets(self):
        self.playback.play()
        self.clock.advance(10.0)
        self.playback.stop()
        self.assertFalse(self.playback.is_playing)
        self.assertEqual(self.playback.progress(), 0.0)

    def test_invalid_speed(self):
        for bad in (0.0, -2.0, float('nan')):
            with self.assertRaises(PlaybackError):
                self.playback.set_speed(bad)
        with self.assertRaises(PlaybackError):
            PlaybackClock(self.route, speed_multiplier=0.0)

    def test_zero_time_route_completes_immediately(self):
        route = synthesize(JFK_13R, JFK_13R, 35000, 450)
        playback = PlaybackClock(route, time_source=self.clock)
        playback.play()
        self.assertTrue(playback.is_complete())


if __name__ == '__main__':
    unittest.main()
