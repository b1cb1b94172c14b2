"""
level_definitions.py
--------------------
Starting bubble layout for each level.

Each entry lists bubbles as (x as a fraction of window width, radius as a
multiple of the base radius, vx as a multiple of the base speed). All
bubbles start at BubbleDefaults.START_Y with no vertical speed.
"""

from bubble_trouble.core.debug.debug_logger import DebugLogger
from bubble_trouble.core.runtime.game_settings import Display, BubbleDefaults, Palette, Rules
from bubble_trouble.entities.bubble import Bubble


LEVEL_DEFINITIONS = {
    1: {
        "color": "LEVEL_1_BUBBLE",
        "bubbles": [
            (1 / 2, 1, -1.0),
            (1 / 4, 1, 1.0),
        ],
    },
    2: {
        "color": "LEVEL_2_BUBBLE",
        "bubbles": [
            (1 / 2, 2, -1.0),
            (1 / 3, 2, 1.0),
            (2 / 3, 2, 1.5),
        ],
    },
    3: {
        "color": "LEVEL_3_BUBBLE",
        "bubbles": [
            (1 / 2, 4, -1.0),
            (1 / 3, 4, 1.0),
            (2 / 3, 4, 1.5),
        ],
    },
}


def create_bubbles(level: int) -> list:
    """
    Build the starting bubbles for a level.

    Raises:
        ValueError: If the level has no definition
    """
    definition = LEVEL_DEFINITIONS.get(level)
    if definition is None:
        raise ValueError(f"No bubble layout for level {level}")

    color = getattr(Palette, definition["color"])
    bubbles = [
        Bubble(
            Display.WIDTH * x_frac,
            BubbleDefaults.START_Y,
            BubbleDefaults.DEFAULT_RADIUS * size,
            BubbleDefaults.DEFAULT_VX * speed,
            0,
            color,
        )
        for x_frac, size, speed in definition["bubbles"]
    ]
    DebugLogger.system(f"Level {level}: spawned {len(bubbles)} bubbles", category="level")
    return bubbles


def time_limit_for(level: int) -> int:
    """Seconds allowed for a level; each level gets less time than the last."""
    return Rules.INITIAL_TIME_LIMIT - (level - 1) * Rules.TIME_LIMIT_STEP
