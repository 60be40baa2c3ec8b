# runwayroute/playback.py
"""
Reference playback driver: turns wall-clock time into route progress.

The route itself stays frozen; the clock only owns play/pause/seek state and
asks the sampler for a fresh Sample on every frame.
"""
import logging
import math
import time
from typing import Callable

from .config import RouteConfig
from .data_models import Route, Sample
from .exceptions import PlaybackError
from .sampler import sample, clamp_progress


class PlaybackClock:
    """Advances progress at `speed_multiplier` simulated seconds per wall second."""

    def __init__(self, route: Route, speed_multiplier: float = RouteConfig.DEFAULT_PLAYBACK_SPEED,
                 time_source: Callable[[], float] = time.monotonic):
        self.route = route
        self.time_source = time_source
        self._check_speed(speed_multiplier)
        self.speed_multiplier = float(speed_multiplier)
        self._base_progress = 0.0
        self._started_at = None

    @property
    def is_playing(self) -> bool:
        return self._started_at is not None

    def play(self) -> None:
        if self.is_playing:
            return
        if self.is_complete():
            self._base_progress = 0.0
        self._started_at = self.time_source()
        logging.info(f"Playback started at {self._base_progress:.3f} (x{self.speed_multiplier:g}).")

    def pause(self) -> None:
        if not self.is_playing:
            return
        self._base_progress = self.progress()
        self._started_at = None
        logging.info(f"Playback paused at {self._base_progress:.3f}.")

    def stop(self) -> None:
        self._started_at = None
        self._base_progress = 0.0
        logging.info("Playback stopped.")

    def seek(self, progress: float) -> None:
        """Jumps to a progress value; keeps playing if already playing."""
        self._base_progress = clamp_progress(progress)
        if self.is_playing:
            self._started_at = self.time_source()

    def set_speed(self, speed_multiplier: float) -> None:
        self._check_speed(speed_multiplier)
        # Re-base so the change only affects time from now on
        self._base_progress = self.progress()
        if self.is_playing:
            self._started_at = self.time_source()
        self.speed_multiplier = float(speed_multiplier)

    def progress(self) -> float:
        if not self.is_playing:
            return self._base_progress
        if self.route.total_time_min <= 0:
            return 1.0
        elapsed_min = (self.time_source() - self._started_at) * self.speed_multiplier / 60.0
        return clamp_progress(self._base_progress + elapsed_min / self.route.total_time_min)

    def is_complete(self) -> bool:
        return self.progress() >= 1.0

    def frame(self) -> Sample:
        """The aircraft state for the current frame."""
        return sample(self.route, self.progress())

    def _check_speed(self, speed_multiplier: float) -> None:
        if speed_multiplier is None or not math.isfinite(speed_multiplier) or speed_multiplier <= 0:
            raise PlaybackError(f"Playback speed multiplier must be positive, got {speed_multiplier!r}")
