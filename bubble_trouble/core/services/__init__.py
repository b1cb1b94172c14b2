"""
Core service exports.

InputManager and FrameClock need a running pygame display and are
imported from their modules directly.
"""

from bubble_trouble.core.services.config_manager import load_config

__all__ = ['load_config']
