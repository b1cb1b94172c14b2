"""
game_loop.py
------------
Defines the GameLoop that wires pygame to the RoundController.

Responsibilities
----------------
- Initialize pygame, the window and the core services (HUD, input, clock)
- Run the fixed-step loop: poll -> quit check -> input -> tick -> wait
- Hold the end screen until the player acknowledges it
"""

import pygame

from bubble_trouble.core.debug.debug_logger import DebugLogger
from bubble_trouble.core.runtime.game_settings import Display, Physics
from bubble_trouble.core.services.clock import FrameClock
from bubble_trouble.core.services.input_manager import InputManager
from bubble_trouble.graphics.renderer import Renderer
from bubble_trouble.systems.round.round_controller import RoundController
from bubble_trouble.ui.hud_manager import HUDManager


class GameLoop:
    """Core runtime controller that manages the game's main loop."""

    def __init__(self):
        """Initialize pygame and all foundational systems."""
        DebugLogger.section("Initializing GameLoop")

        pygame.init()
        pygame.font.init()
        pygame.display.set_caption(Display.CAPTION)
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        DebugLogger.init_entry("Pygame", f"window {Display.WIDTH}x{Display.HEIGHT}")

        self.hud = HUDManager()
        self.input_manager = InputManager()
        self.renderer = Renderer(self.screen, self.hud)
        self.clock = FrameClock(render=self.renderer.draw)

        self.controller = RoundController(self.hud, self.clock)
        self.renderer.bind(self.controller)

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================

    def run(self) -> int:
        """
        Play one session until it ends or the player quits.

        Returns:
            int: Process exit code
        """
        self.controller.start()
        DebugLogger.section("Game Loop")

        try:
            while True:
                char = self.input_manager.poll()
                self.controller.handle_input(char)
                if self.controller.quit_requested:
                    DebugLogger.action("Quit signal received")
                    break

                self.controller.tick()
                if self.controller.is_over:
                    self.renderer.draw()
                    self.input_manager.await_acknowledgment()
                    break

                self.clock.wait(Physics.STEP_TIME)
        finally:
            pygame.quit()
            DebugLogger.system("Pygame terminated")

        return 0
