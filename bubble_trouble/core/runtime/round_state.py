"""
round_state.py
--------------
States of the level/session state machine.

    PLAYING --(bubbles cleared)--> LEVEL_CLEAR --> PLAYING (next level) | WON
    PLAYING --(health <= 0 or time <= 0)--> LOST

WON and LOST are terminal.
"""

from enum import Enum


class RoundState(Enum):
    PLAYING = "playing"
    LEVEL_CLEAR = "level_clear"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self in (RoundState.WON, RoundState.LOST)
