# MIT License (see LICENSE)
"""
Simulation time control.

The fixed tick runs at a constant wall-clock rate. Changing the time scale
changes how much simulated time each tick covers:

    effective_tick_duration = base_tick_duration * time_scale

so the integrator always takes the same number of steps per real second and
slowing the simulation down also makes it more precise. Pausing sets the
scale to zero; ticks keep arriving but advance nothing.

A clock belongs to one Simulation. Nothing here is process-global.
"""
from __future__ import annotations
import logging
from typing import Callable

from .constants import DEFAULT_TICK

logger = logging.getLogger(__name__)


class SimulationClock:
    """
    Time-scale multiplier with pause/resume.

    States:
        Running(scale): saved_time_scale == 0.0, time_scale == scale.
        Paused(saved):  time_scale == 0.0, saved_time_scale holds the scale
                        to restore.

    Attributes:
        base_tick_duration: Unscaled fixed tick in seconds. Set once.
        time_scale: Current multiplier (0 while paused).
        saved_time_scale: Scale to restore on resume, 0.0 while running.
        effective_tick_duration: base_tick_duration * time_scale.
    """

    def __init__(self, base_tick_duration: float = DEFAULT_TICK, time_scale: float = 1.0) -> None:
        if base_tick_duration <= 0:
            raise ValueError(f"base_tick_duration must be positive, got {base_tick_duration}")
        if time_scale < 0:
            raise ValueError(f"time_scale must be non-negative, got {time_scale}")
        self._base_tick_duration = float(base_tick_duration)
        self.time_scale = float(time_scale)
        self.saved_time_scale = 0.0
        self._paused = False
        self._listeners: list[Callable[["SimulationClock"], None]] = []
        self.effective_tick_duration = self._base_tick_duration * self.time_scale

    @property
    def base_tick_duration(self) -> float:
        return self._base_tick_duration

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def display_text(self) -> str:
        """Label for a time-scale readout."""
        return f"Time Scale: {self.time_scale}"

    def subscribe(self, callback: Callable[["SimulationClock"], None]) -> None:
        """Register a callback invoked with the clock after every change."""
        self._listeners.append(callback)

    def halve(self) -> None:
        """Halve the time scale. No effect on the scale restored by a resume."""
        self._rescale(0.5)

    def double(self) -> None:
        """Double the time scale. No effect on the scale restored by a resume."""
        self._rescale(2.0)

    def toggle_pause(self) -> None:
        """Pause if running, resume the saved scale if paused."""
        if self._paused:
            self.time_scale = self.saved_time_scale
            self.saved_time_scale = 0.0
            self._paused = False
            logger.info(f"Resumed at time scale {self.time_scale}")
        else:
            self.saved_time_scale = self.time_scale
            self.time_scale = 0.0
            self._paused = True
            logger.info(f"Paused (saved time scale {self.saved_time_scale})")
        self._changed()

    def _rescale(self, factor: float) -> None:
        # Paused scale is 0 and stays 0; the saved scale is restored untouched
        self.time_scale *= factor
        logger.info(f"Time scale x{factor} -> {self.time_scale}")
        self._changed()

    def _changed(self) -> None:
        self.effective_tick_duration = self._base_tick_duration * self.time_scale
        for callback in self._listeners:
            callback(self)
