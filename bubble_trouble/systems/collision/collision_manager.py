"""
collision_manager.py
--------------------
Applies the game's collision rules to the bubble and bullet collections.

Responsibilities
----------------
- Pop bubbles hit by bullets, spawning split children in place.
- Track bubble-vs-shooter contact and report edge-triggered damage.
- Set the shooter's color from its contact status.

Removal is done in two passes: entities are first marked dead while
scanning, then each collection is compacted in place.
"""

from bubble_trouble.core.debug.debug_logger import DebugLogger
from bubble_trouble.core.runtime.game_settings import Palette
from bubble_trouble.systems.collision.collision_checks import is_bubble_hit, is_shooter_hit


class CollisionManager:
    """Detects collisions and applies hit, split and contact rules."""

    def __init__(self, shooter):
        self.shooter = shooter
        DebugLogger.init_entry("CollisionManager Initialized")

    # ===========================================================
    # Bullet vs Bubble
    # ===========================================================

    def resolve_bullet_hits(self, bullets: list, bubbles: list, level: int) -> int:
        """
        Pop every bubble struck by a bullet this tick.

        Bullets are scanned newest first and bubbles last to first. A bullet
        destroys at most one bubble. Children of a popped bubble join the end
        of the collection and can be hit by older bullets in the same tick.

        Args:
            bullets: Live bullets, oldest first (compacted in place)
            bubbles: Live bubbles (compacted in place)
            level: Current level, scales the speed of split children

        Returns:
            int: Number of bubbles hit
        """
        hits = 0

        for bullet in reversed(bullets):
            for bubble in reversed(bubbles):
                if not bubble.alive or not is_bubble_hit(bubble, bullet):
                    continue

                children = bubble.split(level)
                bubbles.extend(children)
                bubble.mark_dead()
                bullet.mark_dead()
                hits += 1

                DebugLogger.state(
                    f"Bubble r={bubble.radius:g} popped -> {len(children)} children",
                    category="collision"
                )
                break

        if hits:
            bullets[:] = [b for b in bullets if b.alive]
            bubbles[:] = [b for b in bubbles if b.alive]
        return hits

    # ===========================================================
    # Shooter vs Bubble
    # ===========================================================

    def resolve_shooter_contact(self, bubbles: list) -> int:
        """
        Update each bubble's contact latch against the shooter.

        Damage is counted only when a bubble goes from not touching to
        touching; staying in contact costs nothing further, and leaving
        contact re-arms the latch.

        Returns:
            int: Health points lost this tick
        """
        damage = 0
        in_contact = False

        for bubble in bubbles:
            if is_shooter_hit(self.shooter, bubble):
                in_contact = True
                if not bubble.touching_shooter:
                    bubble.touching_shooter = True
                    damage += 1
            else:
                bubble.touching_shooter = False

        self.shooter.set_color(Palette.SHOOTER_CONTACT if in_contact else Palette.SHOOTER_SAFE)

        if damage:
            DebugLogger.state(f"Shooter hit by {damage} bubble(s)", category="collision")
        return damage
