"""
Level system exports.

Provides the per-level bubble layouts.
"""

from bubble_trouble.systems.level.level_definitions import LEVEL_DEFINITIONS, create_bubbles, time_limit_for

__all__ = [
    'LEVEL_DEFINITIONS',
    'create_bubbles',
    'time_limit_for',
]
