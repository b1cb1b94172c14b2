"""
clock.py
--------
Real-time pacing for the fixed-step loop.
"""

import pygame

from bubble_trouble.core.debug.debug_logger import DebugLogger


class FrameClock:
    """
    Presents the current frame, then sleeps.

    Long waits (level announcements) keep pumping the event queue so the
    window stays responsive.
    """

    PUMP_INTERVAL_MS = 50

    def __init__(self, render=None):
        """
        Args:
            render: Optional zero-argument callable that draws the current frame
        """
        self.render = render

    def wait(self, seconds: float):
        if self.render is not None:
            self.render()

        remaining = int(round(seconds * 1000))
        if remaining > self.PUMP_INTERVAL_MS:
            DebugLogger.trace(f"Pausing {seconds:.2f}s", category="timing")

        while remaining > 0:
            chunk = min(remaining, self.PUMP_INTERVAL_MS)
            pygame.time.wait(chunk)
            pygame.event.pump()
            remaining -= chunk
