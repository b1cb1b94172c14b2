"""
input_manager.py
----------------
Translates pygame events into the game's single-character commands.

Provides:
- Non-blocking poll yielding at most one command per tick
- Blocking acknowledgment wait for end-of-game screens
"""

import pygame

from bubble_trouble.core.debug.debug_logger import DebugLogger
from bubble_trouble.systems.round.round_controller import Action


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    Action.MOVE_LEFT: [pygame.K_a, pygame.K_LEFT],
    Action.MOVE_RIGHT: [pygame.K_d, pygame.K_RIGHT],
    Action.FIRE: [pygame.K_w, pygame.K_UP, pygame.K_SPACE],
    Action.QUIT: [pygame.K_q, pygame.K_ESCAPE],
}


class InputManager:
    """
    Keyboard input source.

    Usage:
        char = input_manager.poll()        # None when nothing happened
        controller.handle_input(char)
    """

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: {char: [pygame key codes]} (DEFAULT_KEY_BINDINGS if None)
        """
        DebugLogger.init_entry("InputManager")
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS

        self._key_to_char = {}
        for char, keys in self.key_bindings.items():
            for key in keys:
                self._key_to_char[key] = char

    # ===========================================================
    # Translation
    # ===========================================================

    def translate(self, event):
        """
        Map one pygame event to a command character.

        Bound keys map to their command; other printable keys pass through
        as their own character so the caller can echo them. Window close
        maps to quit.

        Returns:
            str | None: Command character, or None for irrelevant events
        """
        if event.type == pygame.QUIT:
            return Action.QUIT

        if event.type != pygame.KEYDOWN:
            return None

        char = self._key_to_char.get(event.key)
        if char is not None:
            return char

        text = getattr(event, "unicode", "")
        return text if text and text.isprintable() else None

    # ===========================================================
    # Polling
    # ===========================================================

    def poll(self):
        """Consume one pending event without blocking. Returns its command or None."""
        event = pygame.event.poll()
        if event.type == pygame.NOEVENT:
            return None
        char = self.translate(event)
        if char is not None:
            DebugLogger.trace(f"Key '{char}'", category="input")
        return char

    def await_acknowledgment(self):
        """Block until the player clicks, presses a key, or closes the window."""
        DebugLogger.system("Waiting for acknowledgment", category="input")
        pygame.event.clear()
        while True:
            event = pygame.event.wait()
            if event.type in (pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
                return
