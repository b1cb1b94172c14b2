"""
shooter.py
----------
Defines the player-controlled Shooter.

The shooter is a rigid compound shape: a circular head sitting directly on
top of a rectangular body. Only its horizontal position changes.
"""

from bubble_trouble.core.debug.debug_logger import DebugLogger
from bubble_trouble.core.runtime.game_settings import Display, Palette, ShooterDefaults
from bubble_trouble.entities.bullet import Bullet


class Shooter:
    """Player avatar that slides along the floor and fires upward."""

    __slots__ = ('x', 'body_y', 'speed', 'head_radius', 'body_width',
                 'body_height', 'color')

    def __init__(self, start_x: float, start_y: float, speed: float,
                 head_radius: float = None, body_width: float = None, body_height: float = None):
        """
        Args:
            start_x: Initial horizontal center
            start_y: Body center Y (fixed for the session)
            speed: Horizontal speed in px/s
            head_radius, body_width, body_height: Geometry overrides
        """
        if speed < 0:
            raise ValueError(f"Shooter speed must be non-negative, got {speed}")

        self.x = start_x
        self.body_y = start_y
        self.speed = speed
        self.head_radius = head_radius if head_radius is not None else ShooterDefaults.HEAD_RADIUS
        self.body_width = body_width if body_width is not None else ShooterDefaults.BODY_WIDTH
        self.body_height = body_height if body_height is not None else ShooterDefaults.BODY_HEIGHT
        self.color = Palette.SHOOTER_SAFE

    # ===========================================================
    # Actions
    # ===========================================================

    def move(self, dt: float, leftward: bool):
        """Slide by speed*dt, keeping the body inside the window."""
        step = self.speed * dt
        target = self.x - step if leftward else self.x + step
        half_w = self.body_width / 2
        self.x = max(half_w, min(target, Display.WIDTH - half_w))

    def shoot(self) -> Bullet:
        """Spawn a bullet at the top of the head."""
        bullet = Bullet(self.x, self.get_head_center_y() - self.head_radius)
        DebugLogger.trace(f"Shot fired from x={self.x:.1f}", category="entity")
        return bullet

    def set_color(self, color):
        self.color = tuple(color)

    def get_color(self):
        return self.color

    # ===========================================================
    # Geometry
    # ===========================================================

    def get_head_center_x(self) -> float:
        return self.x

    def get_head_center_y(self) -> float:
        return self.body_y - self.body_height / 2 - self.head_radius

    def get_head_radius(self) -> float:
        return self.head_radius

    def get_body_center_x(self) -> float:
        return self.x

    def get_body_center_y(self) -> float:
        return self.body_y

    def get_body_width(self) -> float:
        return self.body_width

    def get_body_height(self) -> float:
        return self.body_height

    def get_body_bounds(self):
        """(left, top, right, bottom) of the body rectangle."""
        half_w = self.body_width / 2
        half_h = self.body_height / 2
        return (self.x - half_w, self.body_y - half_h, self.x + half_w, self.body_y + half_h)

    def __repr__(self) -> str:
        return f"<Shooter x={self.x:.1f} y={self.body_y:.1f} color={self.color}>"
