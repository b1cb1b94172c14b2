"""
entity_state.py
---------------
Defines runtime state enumerations for entities.
Contains only states that change over time during gameplay.
"""

from enum import IntEnum


class LifecycleState(IntEnum):
    """
    Tracks whether an entity is still part of the simulation.
    Collision resolution marks entities DEAD; owners compact them out.
    """
    ALIVE = 0
    DEAD = 1


class ContactState(IntEnum):
    """
    Per-bubble contact latch against the shooter.

    Written only by collision resolution, never by the bubble's own
    physics step. Damage is applied on the NOT_TOUCHING -> TOUCHING edge.
    """
    NOT_TOUCHING = 0
    TOUCHING = 1
