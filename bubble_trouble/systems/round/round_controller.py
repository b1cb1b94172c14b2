"""
round_controller.py
-------------------
Runs one game session: owns the bubbles and bullets, advances the
simulation each tick, resolves collisions, and drives level transitions.

Per-tick order
--------------
1. Bullets vs bubbles (current positions)
2. Shooter vs bubbles (current positions)
3. Move bubbles
4. Move bullets, dropping those that left the play area
5. Loss check (health or time exhausted)
6. Level clear -> next level or win
7. Count down the level timer

Collaborators
-------------
display: HUDManager-like sink with ``label(name)`` returning an object
         that supports set_message / set_color / show / hide.
clock:   object with ``wait(seconds)`` used for announcement pauses.
"""

from bubble_trouble.core.debug.debug_logger import DebugLogger
from bubble_trouble.core.runtime.game_settings import (
    Physics, Palette, Rules, ShooterDefaults, shooter_start, ticks_per_second
)
from bubble_trouble.core.runtime.round_state import RoundState
from bubble_trouble.core.runtime.session_stats import SessionStats
from bubble_trouble.entities.shooter import Shooter
from bubble_trouble.systems.collision.collision_manager import CollisionManager
from bubble_trouble.systems.level.level_definitions import create_bubbles, time_limit_for


class Action:
    """Character codes accepted from the input source."""
    MOVE_LEFT = "a"
    MOVE_RIGHT = "d"
    FIRE = "w"
    QUIT = "q"


class RoundController:
    """Level/session state machine for one game."""

    def __init__(self, display, clock, shooter: Shooter = None, stats: SessionStats = None):
        self.display = display
        self.clock = clock
        self.shooter = shooter or Shooter(*shooter_start(), ShooterDefaults.SPEED)
        self.collisions = CollisionManager(self.shooter)
        self.stats = stats or SessionStats()

        self.level = 1
        self.health = Rules.MAX_HEALTH
        self.time_limit = time_limit_for(self.level)
        self.time_left = self.time_limit * ticks_per_second()
        self.state = RoundState.PLAYING
        self.quit_requested = False

        self.bubbles = create_bubbles(self.level)
        self.bullets = []

        DebugLogger.init_entry("RoundController Initialized")

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def score(self) -> int:
        return self.stats.score

    @property
    def is_over(self) -> bool:
        return self.state.is_terminal

    @property
    def seconds_left(self) -> int:
        return self.time_left // ticks_per_second()

    # ===========================================================
    # Session Start
    # ===========================================================

    def start(self):
        """Announce level 1 and initialize every HUD label."""
        DebugLogger.section("Bubble Trouble")
        self.display.label("command").set_message("Cmd: _")
        self._announce(f"Level {self.level}!")
        self._refresh_labels()
        DebugLogger.state(f"Level {self.level} started", category="round")

    # ===========================================================
    # Input
    # ===========================================================

    def handle_input(self, char) -> bool:
        """
        Apply one input event.

        Args:
            char: Single-character key code, or None when no event was polled

        Returns:
            bool: True if the character mapped to an action
        """
        if not char or self.is_over:
            return False

        self.display.label("command").set_message(f"Cmd: {char}")

        if char == Action.MOVE_LEFT:
            self.shooter.move(Physics.STEP_TIME, True)
        elif char == Action.MOVE_RIGHT:
            self.shooter.move(Physics.STEP_TIME, False)
        elif char == Action.FIRE:
            self.bullets.append(self.shooter.shoot())
            self.stats.add_shot()
        elif char == Action.QUIT:
            self.quit_requested = True
            DebugLogger.action("Quit requested", category="input")
        else:
            DebugLogger.trace(f"Ignoring key '{char}'", category="input")
            return False
        return True

    # ===========================================================
    # Tick
    # ===========================================================

    def tick(self) -> RoundState:
        """Run one fixed step of the simulation and return the resulting state."""
        if self.is_over:
            return self.state

        dt = Physics.STEP_TIME

        # 1. Bullets vs bubbles
        hits = self.collisions.resolve_bullet_hits(self.bullets, self.bubbles, self.level)
        if hits:
            self.stats.add_score(hits)
            for _ in range(hits):
                self.stats.add_pop()
            self.display.label("score").set_message(f"Score : {self.score}")

        # 2. Shooter vs bubbles
        damage = self.collisions.resolve_shooter_contact(self.bubbles)
        if damage:
            self.health = max(0, self.health - damage)
            self.stats.add_damage(damage)
            self.display.label("health").set_message(f"Health : {self.health}/{Rules.MAX_HEALTH}")

        # 3-4. Motion
        for bubble in self.bubbles:
            bubble.next_step(dt)
        self.bullets[:] = [b for b in self.bullets if b.next_step(dt)]

        # 5. Loss
        if self.health <= 0 or self.time_left <= 0:
            return self._finish(RoundState.LOST)

        # 6. Level clear
        if not self.bubbles:
            self._clear_level()
            if self.is_over:
                return self.state

        # 7. Timer
        self.time_left -= 1
        self.stats.add_tick()
        self.display.label("time").set_message(f"Time : {self.seconds_left}/{self.time_limit}")
        return self.state

    # ===========================================================
    # Transitions
    # ===========================================================

    def _clear_level(self):
        """Handle an emptied bubble collection: next level or win."""
        self.bullets.clear()
        self.state = RoundState.LEVEL_CLEAR
        DebugLogger.state(f"Level {self.level} cleared (score {self.score})", category="round")

        if self.level >= Rules.MAX_LEVEL:
            self._finish(RoundState.WON)
            return

        self.level += 1
        self.stats.set_level(self.level)
        self.health = Rules.MAX_HEALTH
        self.time_limit = time_limit_for(self.level)
        self.time_left = self.time_limit * ticks_per_second()

        self._announce(f"Level {self.level}!")
        self._refresh_labels()

        self.bubbles = create_bubbles(self.level)
        self.state = RoundState.PLAYING
        DebugLogger.state(f"Level {self.level} started ({self.time_limit}s)", category="round")

    def _finish(self, outcome: RoundState) -> RoundState:
        """Enter a terminal state and show the outcome message."""
        status = self.display.label("status")
        if outcome == RoundState.WON:
            status.set_color(Palette.STATUS_WIN)
            status.set_message("Congratulations! You Win!")
        else:
            status.set_color(Palette.STATUS_LOSE)
            status.set_message("Game Over!")
        status.show()

        self.state = outcome
        DebugLogger.state(f"Session ended: {outcome.name}", category="round")
        DebugLogger.system(self.stats.summary(), category="round")
        return self.state

    def _announce(self, message: str):
        """Show a transient status message for the announcement pause."""
        status = self.display.label("status")
        status.set_color(Palette.STATUS_INFO)
        status.set_message(message)
        status.show()
        self.clock.wait(Rules.ANNOUNCE_SECONDS)
        status.hide()

    def _refresh_labels(self):
        self.display.label("level").set_message(f"Level : {self.level}/{Rules.MAX_LEVEL}")
        self.display.label("score").set_message(f"Score : {self.score}")
        self.display.label("health").set_message(f"Health : {self.health}/{Rules.MAX_HEALTH}")
        self.display.label("time").set_message(f"Time : {self.seconds_left}/{self.time_limit}")
