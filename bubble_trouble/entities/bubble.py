"""
bubble.py
---------
Defines the Bubble entity: a bouncing circle that splits when hit.

Responsibilities
----------------
- Fall under gravity and bounce off the side walls and the floor line.
- Stay free above the play area (no ceiling).
- Produce its two half-size children when popped.
- Carry the shooter-contact latch written by collision resolution.
"""

from bubble_trouble.core.runtime.game_settings import Display, Physics, BubbleDefaults
from bubble_trouble.entities.base_entity import KinematicBody
from bubble_trouble.entities.entity_state import ContactState


class Bubble(KinematicBody):
    """Splitting target bubble."""

    __slots__ = ('color', 'contact')

    def __init__(self, x: float, y: float, radius: float, vx: float, vy: float, color):
        """
        Args:
            x, y: Center position
            radius: Bubble radius (positive)
            vx, vy: Initial velocity (px/s)
            color: RGB tuple
        """
        super().__init__(x, y, radius, vx, vy)
        self.color = tuple(color)
        self.contact = ContactState.NOT_TOUCHING

    # ===========================================================
    # Update Logic
    # ===========================================================

    def next_step(self, dt: float):
        """Apply gravity, move, then bounce off the walls and floor."""
        self.advance(dt, Physics.GRAVITY)
        self.bounce(left=0, right=Display.WIDTH, bottom=Display.PLAY_Y_HEIGHT)

    # ===========================================================
    # Splitting
    # ===========================================================

    def is_base_size(self) -> bool:
        """Base-size bubbles vanish when hit instead of splitting."""
        return self.radius <= BubbleDefaults.DEFAULT_RADIUS

    def split(self, level: int) -> list:
        """
        Build the children produced when this bubble is popped.

        Children share the parent center and color, have half its radius,
        no vertical speed, and opposite horizontal speeds scaled by level.

        Returns:
            list[Bubble]: Two children, or an empty list for a base-size bubble
        """
        if self.is_base_size():
            return []

        radius = self.radius / 2
        speed = level * BubbleDefaults.DEFAULT_VX
        x, y = self.pos.x, self.pos.y
        return [
            Bubble(x, y, radius, -speed, 0, self.color),
            Bubble(x, y, radius, speed, 0, self.color),
        ]

    # ===========================================================
    # Accessors
    # ===========================================================

    def get_color(self):
        return self.color

    @property
    def touching_shooter(self) -> bool:
        return self.contact == ContactState.TOUCHING

    @touching_shooter.setter
    def touching_shooter(self, value: bool):
        self.contact = ContactState.TOUCHING if value else ContactState.NOT_TOUCHING
