"""
Collision system exports.

Pure intersection predicates plus the resolver that applies hit and
contact rules to the bubble and bullet collections.
"""

from bubble_trouble.systems.collision.collision_checks import is_bubble_hit, is_shooter_hit
from bubble_trouble.systems.collision.collision_manager import CollisionManager

__all__ = [
    'is_bubble_hit',
    'is_shooter_hit',
    'CollisionManager',
]
