"""
debug_logger.py
---------------
Console logger for Bubble Trouble.

Every message carries a category ("round", "collision", ...) and a level.
A message prints only when logging is enabled, its category is switched on
in LoggerConfig.CATEGORIES, and its level is within LoggerConfig.LOG_LEVEL.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Which categories print, and how verbose the output is."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        "system": True,
        "loading": True,
        "display": True,
        "input": False,     # one line per key press
        "timing": False,
        "round": True,
        "level": True,
        "collision": True,
        "entity": False,    # per-bounce / per-shot traces
    }

    SHOW_TIMESTAMP = True


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static, category-filtered console logger."""

    RULE_WIDTH = 48

    LEVEL_VALUES = {"NONE": 0, "ERROR": 1, "WARN": 2, "INFO": 3, "VERBOSE": 4}

    # tag -> (color, level)
    TAGS = {
        "SYSTEM": (Colors.MAGENTA, "INFO"),
        "STATE": (Colors.CYAN, "INFO"),
        "ACTION": (Colors.GREEN, "INFO"),
        "TRACE": (Colors.BLUE, "VERBOSE"),
        "WARN": (Colors.YELLOW, "WARN"),
        "FAIL": (Colors.RED, "ERROR"),
    }

    @staticmethod
    def set_level(level: str):
        """Change the global verbosity. Unknown names are rejected."""
        level = level.upper()
        if level not in DebugLogger.LEVEL_VALUES:
            raise ValueError(f"Unknown log level: {level}")
        LoggerConfig.LOG_LEVEL = level

    # ===========================================================
    # Core Logging
    # ===========================================================

    @staticmethod
    def _enabled(category: str, level: str) -> bool:
        if not LoggerConfig.ENABLE_LOGGING or not LoggerConfig.CATEGORIES.get(category, False):
            return False
        limit = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)
        return DebugLogger.LEVEL_VALUES[level] <= limit

    @staticmethod
    def _source() -> str:
        """Class name of the caller, or its module name for plain functions."""
        frame = sys._getframe(3)
        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__
        return frame.f_globals.get("__name__", "?").rsplit(".", 1)[-1]

    @staticmethod
    def _log(tag: str, message: str, category: str):
        color, level = DebugLogger.TAGS[tag]
        if not DebugLogger._enabled(category, level):
            return

        line = f"[{DebugLogger._source()}][{tag}] {message}"
        if LoggerConfig.SHOW_TIMESTAMP:
            line = f"[{datetime.now():%H:%M:%S}] {line}"
        print(f"{color}{line}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._log("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "system"):
        DebugLogger._log("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._log("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "collision"):
        """Per-tick detail, shown only at VERBOSE."""
        DebugLogger._log("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        DebugLogger._log("FAIL", msg, category)

    # ===========================================================
    # Startup Output
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a ruled section header."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.RULE_WIDTH
        print(f"\n{Colors.WHITE}{rule}\n{title.center(DebugLogger.RULE_WIDTH)}{Colors.RESET}")

    @staticmethod
    def init_entry(component: str, detail: str = ""):
        """One startup line per initialized component."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        suffix = f" ({detail})" if detail else ""
        print(f"{Colors.WHITE}  > {component}{suffix} {Colors.GREEN}[OK]{Colors.RESET}")
