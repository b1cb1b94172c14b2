#!/usr/bin/env python3
"""
run_tests.py
------------
Auto-test runner for Bubble Trouble.
Monitors file changes and automatically runs tests.

Usage:
    python run_tests.py                    # Start watching for changes
    python run_tests.py --run-once         # Run tests once and exit
    python run_tests.py --physics-only     # Run only entity and collision tests
    python run_tests.py --coverage         # Add a coverage report
"""

import sys
import os
import time
import subprocess
import argparse
from pathlib import Path
from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler

PACKAGE = "bubble_trouble"
WATCHED_DIRS = [PACKAGE, "tests"]


class TestRunner(FileSystemEventHandler):
    """File system event handler that runs tests on file changes."""

    def __init__(self, args):
        self.args = args
        self.last_run = 0
        self.debounce_time = 1.0
        self.project_root = Path(__file__).parent

    def on_modified(self, event):
        """Handle file modification events."""
        if event.is_directory:
            return

        file_path = Path(event.src_path)
        file_path_str = str(file_path).replace('\\', '/')
        if not (file_path.suffix == '.py' and
                any(f"{d}/" in file_path_str for d in WATCHED_DIRS)):
            return

        # Debounce rapid file changes
        current_time = time.time()
        if current_time - self.last_run < self.debounce_time:
            return

        self.last_run = current_time
        self.run_tests()

    def run_tests(self):
        """Run the test suite. Returns True when pytest passed."""
        print("\n" + "=" * 60)
        print("Running tests...")
        print("=" * 60)

        cmd = [sys.executable, "-m", "pytest", "-v"]

        if self.args.physics_only:
            cmd.extend(["tests/entities", "tests/systems/test_collision_checks.py"])

        if self.args.coverage:
            cmd.extend([
                f"--cov={PACKAGE}",
                "--cov-report=term-missing",
                "--cov-fail-under=70"
            ])

        try:
            result = subprocess.run(cmd, cwd=self.project_root, capture_output=False)
        except KeyboardInterrupt:
            print("\nTest execution interrupted")
            return False

        if result.returncode == 0:
            print("All tests passed!")
            return True
        print("Some tests failed!")
        return False


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Auto-test runner for Bubble Trouble")
    parser.add_argument("--run-once", action="store_true",
                        help="Run tests once and exit")
    parser.add_argument("--physics-only", action="store_true",
                        help="Run only entity and collision tests")
    parser.add_argument("--coverage", action="store_true",
                        help="Generate coverage report")

    args = parser.parse_args()

    try:
        import pytest  # noqa: F401
    except ImportError:
        print("pytest not found. Please install with:")
        print("   pip install -e .[test]")
        return 1

    test_runner = TestRunner(args)

    if args.run_once:
        return 0 if test_runner.run_tests() else 1

    print("Starting file watcher...")
    print(f"Monitoring: {', '.join(WATCHED_DIRS)}")
    print("Press Ctrl+C to stop")

    test_runner.run_tests()

    observer = Observer()
    for directory in WATCHED_DIRS:
        if os.path.exists(directory):
            observer.schedule(test_runner, directory, recursive=True)

    observer.start()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        observer.stop()
        print("\nFile watcher stopped")

    observer.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())
