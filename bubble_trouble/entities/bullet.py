"""
bullet.py
---------
Defines the Bullet fired by the shooter.

Responsibilities
----------------
- Travel straight up at a constant speed.
- Report when it has left the top of the play area so its owner can drop it.
"""

from bubble_trouble.core.runtime.game_settings import BulletDefaults
from bubble_trouble.entities.base_entity import KinematicBody


class Bullet(KinematicBody):
    """Straight-line upward projectile."""

    __slots__ = ()

    def __init__(self, x: float, y: float, speed: float = None):
        """
        Args:
            x, y: Spawn position (center)
            speed: Upward speed in px/s (defaults to BulletDefaults.SPEED)
        """
        speed = BulletDefaults.SPEED if speed is None else speed
        super().__init__(x, y, BulletDefaults.RADIUS, 0, -abs(speed))

    def next_step(self, dt: float) -> bool:
        """
        Move one step.

        Returns:
            bool: False once the bullet has passed above the top boundary
        """
        self.advance(dt)
        return self.pos.y >= 0
