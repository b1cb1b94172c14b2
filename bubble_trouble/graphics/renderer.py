"""
renderer.py
-----------
Draws the current game frame with pygame primitives.

Responsibilities
----------------
- Bubbles and bullets as filled circles
- Shooter as head circle on top of body rectangle
- Floor marker and visible HUD labels
"""

import pygame

from bubble_trouble.core.debug.debug_logger import DebugLogger
from bubble_trouble.core.runtime.game_settings import Display, Palette


class Renderer:
    """Renders a RoundController and HUDManager onto a pygame surface."""

    def __init__(self, surface, hud, font=None):
        """
        Args:
            surface: Target pygame.Surface (usually the display surface)
            hud: HUDManager whose labels are drawn
            font: pygame.font.Font (default system font if None)
        """
        self.surface = surface
        self.hud = hud
        self.font = font or pygame.font.Font(None, Display.FONT_SIZE)
        self.controller = None
        DebugLogger.init_entry("Renderer Initialized")

    def bind(self, controller):
        """Attach the round whose entities are drawn."""
        self.controller = controller

    # ===========================================================
    # Frame
    # ===========================================================

    def draw(self):
        """Render the frame and present it on the window."""
        self.render_frame()
        pygame.display.flip()

    def render_frame(self):
        self.surface.fill(Palette.BACKGROUND)

        start, end = self.hud.floor_line
        pygame.draw.line(self.surface, self.hud.floor_color, start, end)

        if self.controller is not None:
            self._draw_entities(self.controller)

        for label in self.hud.visible_labels():
            self._draw_label(label)

    def _draw_entities(self, controller):
        for bubble in controller.bubbles:
            pygame.draw.circle(self.surface, bubble.color, bubble.pos, bubble.radius)

        for bullet in controller.bullets:
            pygame.draw.circle(self.surface, Palette.BULLET, bullet.pos, bullet.radius)

        shooter = controller.shooter
        left, top, right, bottom = shooter.get_body_bounds()
        body = pygame.Rect(round(left), round(top), round(right - left), round(bottom - top))
        pygame.draw.rect(self.surface, shooter.color, body)
        head = (shooter.get_head_center_x(), shooter.get_head_center_y())
        pygame.draw.circle(self.surface, shooter.color, head, shooter.get_head_radius())

    def _draw_label(self, label):
        text = self.font.render(label.text, True, label.color)
        self.surface.blit(text, text.get_rect(center=(label.x, label.y)))
