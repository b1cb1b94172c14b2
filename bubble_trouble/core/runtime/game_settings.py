"""
game_settings.py
----------------
Centralized constants for all game systems.

Every section is a plain class of constants. ``apply_overrides`` lets a
config file replace individual values at startup.
"""

from bubble_trouble.core.debug.debug_logger import DebugLogger


# ===========================================================
# Display & Layout
# ===========================================================

class Display:
    """Window and HUD layout."""
    WIDTH: int = 500
    HEIGHT: int = 500
    CAPTION: str = "Bubble Trouble"

    # Floor line; bubbles bounce on it, labels live below it
    PLAY_Y_HEIGHT: int = 450

    LEFT_MARGIN: int = 70
    TOP_MARGIN: int = 20
    MIDDLE_MARGIN: int = 250
    RIGHT_MARGIN: int = 430

    STATUS_POS = (250, 250)
    FONT_SIZE: int = 20


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Fixed-step simulation timing."""
    STEP_TIME: float = 0.02
    GRAVITY: float = 100.0  # px/s^2, bubbles only


# ===========================================================
# Entities
# ===========================================================

class BubbleDefaults:
    """Bubble sizes and speeds."""
    DEFAULT_RADIUS: float = 10
    DEFAULT_VX: float = 100
    START_Y: float = 50


class BulletDefaults:
    """Player projectile."""
    RADIUS: float = 3
    SPEED: float = 200  # upward


class ShooterDefaults:
    """Player avatar geometry and speed."""
    HEAD_RADIUS: float = 8
    BODY_WIDTH: float = 18
    BODY_HEIGHT: float = 36
    SPEED: float = 400


# ===========================================================
# Game Rules
# ===========================================================

class Rules:
    """Level, health and timer rules."""
    MAX_LEVEL: int = 3
    MAX_HEALTH: int = 3
    INITIAL_TIME_LIMIT: int = 50   # seconds for level 1
    TIME_LIMIT_STEP: int = 5       # seconds removed per level
    ANNOUNCE_SECONDS: float = 3.0


# ===========================================================
# Colors
# ===========================================================

class Palette:
    """RGB colors used by entities and HUD."""
    SHOOTER_SAFE = (0, 255, 0)
    SHOOTER_CONTACT = (0, 0, 255)
    BULLET = (0, 0, 0)
    FLOOR = (0, 0, 255)
    BACKGROUND = (255, 255, 255)
    TEXT = (0, 0, 0)

    LEVEL_1_BUBBLE = (255, 105, 180)
    LEVEL_2_BUBBLE = (128, 0, 128)
    LEVEL_3_BUBBLE = (128, 0, 0)

    STATUS_INFO = (0, 0, 255)
    STATUS_LOSE = (255, 0, 0)
    STATUS_WIN = (0, 255, 0)


def ticks_per_second() -> int:
    """Number of simulation ticks in one displayed second."""
    return int(round(1 / Physics.STEP_TIME))


def bottom_margin() -> float:
    """Y of the bottom HUD row, just below the floor line."""
    return Display.PLAY_Y_HEIGHT + Display.TOP_MARGIN


def shooter_start() -> tuple:
    """Body center of a fresh shooter: centered, standing on the floor."""
    return Display.WIDTH / 2, Display.PLAY_Y_HEIGHT - ShooterDefaults.BODY_HEIGHT / 2


# ===========================================================
# Runtime Overrides
# ===========================================================

SECTIONS = {
    "display": Display,
    "physics": Physics,
    "bubble": BubbleDefaults,
    "bullet": BulletDefaults,
    "shooter": ShooterDefaults,
    "rules": Rules,
    "palette": Palette,
}


def apply_overrides(config: dict) -> int:
    """
    Apply nested ``{section: {NAME: value}}`` overrides onto the settings classes.

    Args:
        config: Parsed config dictionary

    Returns:
        int: Number of values applied
    """
    applied = 0
    for section_name, values in (config or {}).items():
        section = SECTIONS.get(section_name.lower())
        if section is None or not isinstance(values, dict):
            DebugLogger.warn(f"Ignoring unknown config section '{section_name}'", category="loading")
            continue

        for key, value in values.items():
            attr = key.upper()
            if not hasattr(section, attr):
                DebugLogger.warn(f"Ignoring unknown setting {section_name}.{key}", category="loading")
                continue
            if isinstance(getattr(section, attr), tuple) and isinstance(value, list):
                value = tuple(value)
            setattr(section, attr, value)
            applied += 1

    if applied:
        DebugLogger.system(f"Applied {applied} setting override(s)", category="loading")
    return applied
