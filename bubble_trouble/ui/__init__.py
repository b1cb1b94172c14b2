"""
UI exports.

Provides the HUD labels the game writes its text state to.
"""

from bubble_trouble.ui.hud_manager import HUDManager, UILabel

__all__ = ['HUDManager', 'UILabel']
