"""
conftest.py
-----------
Shared pytest configuration and fixtures for Bubble Trouble tests.

Contains:
- Headless SDL setup so pygame never opens a window
- Common collaborator fixtures (HUD, clock, shooter)
- Entity factory helpers
"""

import os
import sys

# Must be set before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
from unittest.mock import MagicMock

# Add project root to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from bubble_trouble.core.debug.debug_logger import LoggerConfig
from bubble_trouble.core.runtime.game_settings import ShooterDefaults, shooter_start
from bubble_trouble.entities.bubble import Bubble
from bubble_trouble.entities.shooter import Shooter
from bubble_trouble.ui.hud_manager import HUDManager


PINK = (255, 105, 180)


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Silence console logging during tests."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


# ===========================================================
# Collaborators
# ===========================================================

@pytest.fixture
def hud():
    """Real HUD label store (pure Python, no rendering)."""
    return HUDManager()


@pytest.fixture
def mock_clock():
    """Clock whose wait() returns immediately."""
    clock = MagicMock()
    clock.wait = MagicMock()
    return clock


@pytest.fixture
def shooter():
    """Shooter at the default start position (body center 250, 432)."""
    return Shooter(*shooter_start(), ShooterDefaults.SPEED)


# ===========================================================
# Test utilities
# ===========================================================

def make_bubble(x=100.0, y=100.0, radius=10.0, vx=0.0, vy=0.0, color=PINK):
    """Create a bubble with test-friendly defaults."""
    return Bubble(x, y, radius, vx, vy, color)


@pytest.fixture
def bubble_factory():
    """Factory creating bubbles with test-friendly defaults."""
    return make_bubble


def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "scenario: end-to-end gameplay scenarios")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
