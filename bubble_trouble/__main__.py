"""
Entry point: ``python -m bubble_trouble``.

Usage:
    python -m bubble_trouble                       # Play with defaults
    python -m bubble_trouble --config my.yaml      # Override settings
    python -m bubble_trouble --log-level VERBOSE   # Trace every tick
"""

import sys
import argparse

from bubble_trouble.core.debug.debug_logger import DebugLogger
from bubble_trouble.core.runtime.game_settings import apply_overrides
from bubble_trouble.core.services.config_manager import load_config


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Bubble Trouble arcade shooter")
    parser.add_argument("--config", metavar="FILE",
                        help="Settings override file (.json, .yaml or .py)")
    parser.add_argument("--log-level", default="INFO",
                        choices=sorted(DebugLogger.LEVEL_VALUES),
                        help="Console log verbosity")
    args = parser.parse_args(argv)

    DebugLogger.set_level(args.log_level)

    if args.config:
        try:
            apply_overrides(load_config(args.config, strict=True))
        except FileNotFoundError as e:
            DebugLogger.fail(str(e), category="loading")
            return 2

    # Imported late so the window opens after overrides are applied
    from bubble_trouble.core.runtime.game_loop import GameLoop
    return GameLoop().run()


if __name__ == "__main__":
    sys.exit(main())
