"""
Runtime configuration exports.

Provides game-wide constants, round states and session statistics. All
exports are lightweight with no initialization overhead.
"""

from bubble_trouble.core.runtime.game_settings import (
    Display,
    Physics,
    BubbleDefaults,
    BulletDefaults,
    ShooterDefaults,
    Rules,
    Palette,
    apply_overrides,
    ticks_per_second,
)
from bubble_trouble.core.runtime.round_state import RoundState
from bubble_trouble.core.runtime.session_stats import SessionStats

__all__ = [
    # Settings
    'Display',
    'Physics',
    'BubbleDefaults',
    'BulletDefaults',
    'ShooterDefaults',
    'Rules',
    'Palette',
    'apply_overrides',
    'ticks_per_second',
    # State
    'RoundState',
    'SessionStats',
]
