"""Screen dimensions, scaling and the fixed timestep of the game loop."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

WINDOW_TITLE = "SoupDL 06"
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600

NO_VSYNC_REFRESH_RATE = 30
"""Frames per second the game runs at when vsync is off."""

ASSUMED_REFRESH_RATE = 60
"""Refresh rate used when the display's cannot be found out."""

TIMESTEP_WARN = 2.0


def frame_ticks(rate: int) -> int:
    """Return how many milliseconds a frame lasts at ``rate`` frames per second."""
    if rate <= 0:
        raise ValueError(f"invalid frame rate {rate}")
    return int(1000.0 / rate)


def timestep(vsync: bool, refresh_rate: int | None, no_vsync_rate: int) -> float:
    """Return the fixed timestep: 1.0 at 60 frames per second.

    Without vsync the game runs at ``no_vsync_rate``; with vsync at the
    display's ``refresh_rate``, taken as 60 Hz when it is unknown (None or 0).
    """
    if not vsync:
        if no_vsync_rate <= 0:
            raise ValueError(f"invalid frame rate {no_vsync_rate}")
        step = 60.0 / no_vsync_rate
    else:
        rate = refresh_rate or 0
        if rate <= 0:
            logger.error(
                "couldn't get the display refresh rate. assuming %d Hz.",
                ASSUMED_REFRESH_RATE,
            )
            rate = ASSUMED_REFRESH_RATE
        step = 60.0 / rate
    logger.info("set timestep to %f", step)
    if step > TIMESTEP_WARN:
        logger.warning(
            "fixed timestep value is greater than 2. this is caused by the low "
            "refresh rate of your display. continuing with this can cause physics issues."
        )
    return step


@dataclass
class Screen:
    """Logical screen size after the renderer's scale is applied."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    xscale: float = 1.0
    yscale: float = 1.0
    vsync: bool = True
    no_vsync_refresh_rate: int = NO_VSYNC_REFRESH_RATE

    @property
    def no_vsync_frame_ticks(self) -> int:
        return frame_ticks(self.no_vsync_refresh_rate)

    def scale(
        self, xscale: float, yscale: float, window_width: int, window_height: int
    ) -> tuple[int, int]:
        """Set the render scale and return the new logical screen size."""
        if xscale <= 0 or yscale <= 0:
            raise ValueError(f"invalid screen scale {xscale}x{yscale}")
        self.xscale = xscale
        self.yscale = yscale
        return self.update_dimensions(window_width, window_height)

    def update_dimensions(self, window_width: int, window_height: int) -> tuple[int, int]:
        """Recompute the logical size from the window size and return it."""
        self.width = math.ceil(window_width / self.xscale)
        self.height = math.ceil(window_height / self.yscale)
        return self.width, self.height