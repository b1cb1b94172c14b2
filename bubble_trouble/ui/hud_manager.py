"""
hud_manager.py
--------------
Named HUD text labels and the floor marker.

The game only writes to labels; the Renderer reads them each frame.
Nothing here touches pygame, so the HUD can be driven headless.
"""

from bubble_trouble.core.debug.debug_logger import DebugLogger
from bubble_trouble.core.runtime.game_settings import Display, Palette, bottom_margin


class UILabel:
    """Single line of text at a fixed screen position."""

    __slots__ = ('name', 'x', 'y', 'text', 'color', 'visible')

    def __init__(self, name: str, x: float, y: float, text: str = "", color=None, visible: bool = True):
        self.name = name
        self.x = x
        self.y = y
        self.text = text
        self.color = tuple(color) if color is not None else Palette.TEXT
        self.visible = visible

    def set_message(self, text: str):
        self.text = text

    def set_color(self, color):
        self.color = tuple(color)

    def show(self):
        self.visible = True

    def hide(self):
        self.visible = False

    def __repr__(self) -> str:
        flag = "" if self.visible else " hidden"
        return f"<UILabel {self.name}='{self.text}'{flag}>"


class HUDManager:
    """Owns every HUD label by name."""

    def __init__(self):
        top = Display.TOP_MARGIN
        bottom = bottom_margin()
        status_x, status_y = Display.STATUS_POS

        self.labels = {
            "command": UILabel("command", Display.LEFT_MARGIN, bottom, "Cmd: _"),
            "level": UILabel("level", Display.MIDDLE_MARGIN, bottom),
            "score": UILabel("score", Display.RIGHT_MARGIN, bottom),
            "time": UILabel("time", Display.LEFT_MARGIN, top),
            "health": UILabel("health", Display.RIGHT_MARGIN, top),
            "status": UILabel("status", status_x, status_y, color=Palette.STATUS_INFO, visible=False),
        }

        # Floor marker spans the window at the bottom of the play area
        self.floor_line = ((0, Display.PLAY_Y_HEIGHT), (Display.WIDTH, Display.PLAY_Y_HEIGHT))
        self.floor_color = Palette.FLOOR

        DebugLogger.init_entry("HUDManager Initialized")

    def label(self, name: str) -> UILabel:
        """Look up a label by name."""
        try:
            return self.labels[name]
        except KeyError:
            raise KeyError(f"Unknown HUD label '{name}'") from None

    def visible_labels(self):
        return [lbl for lbl in self.labels.values() if lbl.visible]
