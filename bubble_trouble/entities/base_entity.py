"""
base_entity.py
--------------
Foundational kinematic body shared by bubbles and bullets.

Coordinate System
-----------------
All bodies use center-based screen coordinates:
- self.pos is the circle center (y grows downward)
- self.vel is in pixels per second
- self.radius is the collision and render radius
"""

from typing import Optional

import pygame

from bubble_trouble.core.debug.debug_logger import DebugLogger
from bubble_trouble.entities.entity_state import LifecycleState


class KinematicBody:
    """
    Circular body integrated with explicit Euler steps.

    Subclassed by Bubble and Bullet.
    """

    __slots__ = ('pos', 'vel', 'radius', 'death_state')

    def __init__(self, x: float, y: float, radius: float, vx: float = 0.0, vy: float = 0.0):
        """
        Args:
            x: Center X position
            y: Center Y position
            radius: Body radius, must be positive
            vx: Horizontal velocity (px/s)
            vy: Vertical velocity (px/s, positive is downward)
        """
        if radius <= 0:
            raise ValueError(f"{type(self).__name__}: radius must be positive, got {radius}")

        self.pos = pygame.Vector2(x, y)
        self.vel = pygame.Vector2(vx, vy)
        self.radius = radius
        self.death_state = LifecycleState.ALIVE

    # ===================================================================
    # Motion
    # ===================================================================

    def advance(self, dt: float, gravity: float = 0.0):
        """
        Integrate one step: gravity into vertical velocity, then velocity into position.

        Args:
            dt: Step duration in seconds
            gravity: Downward acceleration (px/s^2)
        """
        if gravity:
            self.vel.y += gravity * dt
        self.pos.x += self.vel.x * dt
        self.pos.y += self.vel.y * dt

    def bounce(self, left: Optional[float] = None, right: Optional[float] = None,
               top: Optional[float] = None, bottom: Optional[float] = None) -> bool:
        """
        Keep the body inside the given walls.

        A wall the body has crossed clamps its position back to the wall and,
        if the body is still heading outward, reflects that velocity
        component with its magnitude preserved. ``None`` means no wall.

        Returns:
            bool: True if any wall was touched this step
        """
        r = self.radius
        touched = False

        if left is not None and self.pos.x < left + r:
            self.pos.x = left + r
            if self.vel.x < 0:
                self.vel.x = -self.vel.x
            touched = True
        elif right is not None and self.pos.x > right - r:
            self.pos.x = right - r
            if self.vel.x > 0:
                self.vel.x = -self.vel.x
            touched = True

        if top is not None and self.pos.y < top + r:
            self.pos.y = top + r
            if self.vel.y < 0:
                self.vel.y = -self.vel.y
            touched = True
        elif bottom is not None and self.pos.y > bottom - r:
            self.pos.y = bottom - r
            if self.vel.y > 0:
                self.vel.y = -self.vel.y
            touched = True

        if touched:
            DebugLogger.trace(f"{type(self).__name__} bounced at {self.pos}", category="entity")
        return touched

    # ===================================================================
    # Accessors
    # ===================================================================

    def get_center(self):
        return (self.pos.x, self.pos.y)

    def get_center_x(self) -> float:
        return self.pos.x

    def get_center_y(self) -> float:
        return self.pos.y

    def get_radius(self) -> float:
        return self.radius

    # ===================================================================
    # Lifecycle
    # ===================================================================

    def mark_dead(self):
        """Flag the body for removal by its owning collection."""
        self.death_state = LifecycleState.DEAD

    @property
    def alive(self) -> bool:
        return self.death_state == LifecycleState.ALIVE

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} "
            f"pos=({self.pos.x:.1f}, {self.pos.y:.1f}) "
            f"vel=({self.vel.x:.1f}, {self.vel.y:.1f}) "
            f"r={self.radius}>"
        )
