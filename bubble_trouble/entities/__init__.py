"""
bubble_trouble/entities/__init__.py
-----------------------------------
Entity module exports.

Exports:
    KinematicBody  - Shared circular body with motion and wall bounce
    Bubble         - Bouncing, splitting target
    Bullet         - Upward projectile fired by the shooter
    Shooter        - Player avatar (head circle + body rectangle)
    LifecycleState - ALIVE / DEAD marker used for removal passes
    ContactState   - Bubble-vs-shooter contact latch
"""

from bubble_trouble.entities.entity_state import LifecycleState, ContactState
from bubble_trouble.entities.base_entity import KinematicBody
from bubble_trouble.entities.bubble import Bubble
from bubble_trouble.entities.bullet import Bullet
from bubble_trouble.entities.shooter import Shooter

__all__ = [
    # States
    'LifecycleState',
    'ContactState',
    # Entities
    'KinematicBody',
    'Bubble',
    'Bullet',
    'Shooter',
]
