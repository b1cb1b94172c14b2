"""Debug and logging utilities."""

from bubble_trouble.core.debug.debug_logger import DebugLogger, LoggerConfig

__all__ = ['DebugLogger', 'LoggerConfig']
