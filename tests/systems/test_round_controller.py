"""
test_round_controller.py
------------------------
Tests for the level/session state machine.

Covers:
- Level 1 setup and HUD initialization
- Input handling (move, fire, quit, unknown keys)
- Scoring, edge-triggered damage and timer countdown
- Level transitions, win and loss conditions
"""

import pytest

from bubble_trouble.core.runtime.game_settings import BubbleDefaults, Palette, Rules, ticks_per_second
from bubble_trouble.core.runtime.round_state import RoundState
from bubble_trouble.entities.bullet import Bullet
from bubble_trouble.systems.round.round_controller import RoundController


@pytest.fixture
def controller(hud, mock_clock):
    return RoundController(hud, mock_clock)


def put_on_shooter(controller, bubble):
    shooter = controller.shooter
    bubble.pos.update(shooter.get_head_center_x(), shooter.get_head_center_y())


def single_target(controller, bubble_factory, radius=BubbleDefaults.DEFAULT_RADIUS):
    """Replace the field with one bubble and a bullet already inside it."""
    bubble = bubble_factory(x=100, y=100, radius=radius)
    controller.bubbles = [bubble]
    controller.bullets.append(Bullet(100, 100))
    return bubble


# ===========================================================
# Setup
# ===========================================================

class TestInitialState:

    def test_level_one_layout(self, controller):
        assert controller.level == 1
        assert controller.health == Rules.MAX_HEALTH
        assert controller.score == 0
        assert controller.state == RoundState.PLAYING
        assert controller.bullets == []

        assert len(controller.bubbles) == 2
        for bubble in controller.bubbles:
            assert bubble.radius == BubbleDefaults.DEFAULT_RADIUS
            assert bubble.pos.y == BubbleDefaults.START_Y
            assert bubble.vel.y == 0
        vx = [b.vel.x for b in controller.bubbles]
        assert vx[0] == -vx[1]

    def test_timer_in_ticks(self, controller):
        assert controller.time_limit == Rules.INITIAL_TIME_LIMIT
        assert controller.time_left == Rules.INITIAL_TIME_LIMIT * ticks_per_second()

    def test_start_announces_and_fills_labels(self, controller, hud, mock_clock):
        controller.start()

        mock_clock.wait.assert_called_once_with(Rules.ANNOUNCE_SECONDS)
        assert hud.label("status").text == "Level 1!"
        assert not hud.label("status").visible
        assert hud.label("command").text == "Cmd: _"
        assert hud.label("level").text == "Level : 1/3"
        assert hud.label("score").text == "Score : 0"
        assert hud.label("health").text == "Health : 3/3"
        assert hud.label("time").text == "Time : 50/50"


# ===========================================================
# Input
# ===========================================================

class TestInput:

    def test_fire_adds_bullet(self, controller, hud):
        assert controller.handle_input("w")
        assert len(controller.bullets) == 1
        assert controller.stats.shots_fired == 1
        assert hud.label("command").text == "Cmd: w"

    def test_move(self, controller):
        start = controller.shooter.x
        controller.handle_input("a")
        assert controller.shooter.x < start
        controller.handle_input("d")
        assert controller.shooter.x == pytest.approx(start)

    def test_quit(self, controller):
        assert controller.handle_input("q")
        assert controller.quit_requested

    @pytest.mark.parametrize("char", ["x", "1", " "])
    def test_unknown_key_ignored(self, controller, char):
        x = controller.shooter.x
        assert not controller.handle_input(char)
        assert controller.bullets == []
        assert controller.shooter.x == x
        assert not controller.quit_requested

    def test_no_event(self, controller, hud):
        assert not controller.handle_input(None)
        assert hud.label("command").text == "Cmd: _"


# ===========================================================
# Tick
# ===========================================================

class TestTick:

    @pytest.mark.scenario
    def test_single_hit_on_base_bubble(self, controller, hud):
        controller.handle_input("w")
        bullet = controller.bullets[0]
        controller.bubbles[0].pos.update(bullet.pos)

        controller.tick()

        assert len(controller.bubbles) == 1
        assert controller.score == 1
        assert controller.bullets == []
        assert hud.label("score").text == "Score : 1"

    def test_timer_counts_down(self, controller, hud):
        controller.tick()
        assert controller.time_left == Rules.INITIAL_TIME_LIMIT * ticks_per_second() - 1
        assert hud.label("time").text == f"Time : {Rules.INITIAL_TIME_LIMIT - 1}/{Rules.INITIAL_TIME_LIMIT}"

    def test_bullets_leaving_screen_are_dropped(self, controller):
        controller.bullets.append(Bullet(400, 1))
        controller.tick()
        assert controller.bullets == []

    def test_damage_is_edge_triggered(self, controller, hud):
        put_on_shooter(controller, controller.bubbles[0])

        controller.tick()
        assert controller.health == 2
        assert hud.label("health").text == "Health : 2/3"
        assert controller.shooter.get_color() == Palette.SHOOTER_CONTACT

        controller.tick()
        assert controller.health == 2

    def test_score_never_decreases(self, controller, bubble_factory):
        scores = []
        for _ in range(3):
            single_target(controller, bubble_factory, radius=20)
            controller.bubbles.append(bubble_factory(x=400, y=100))
            controller.tick()
            scores.append(controller.score)
        assert scores == sorted(scores)
        assert scores[-1] == 3


# ===========================================================
# Outcomes
# ===========================================================

class TestLoss:

    @pytest.mark.scenario
    def test_health_exhausted(self, controller, hud):
        controller.health = 1
        put_on_shooter(controller, controller.bubbles[0])

        assert controller.tick() == RoundState.LOST
        assert controller.health == 0
        assert controller.bubbles
        assert controller.time_left > 0
        assert hud.label("status").text == "Game Over!"
        assert hud.label("status").color == Palette.STATUS_LOSE
        assert hud.label("status").visible

    @pytest.mark.scenario
    def test_time_exhausted(self, controller):
        controller.time_left = 1
        assert controller.tick() == RoundState.PLAYING
        assert controller.time_left == 0
        assert controller.tick() == RoundState.LOST
        assert controller.health > 0
        assert controller.bubbles

    def test_terminal_tick_is_noop(self, controller):
        controller.time_left = 0
        controller.tick()
        controller.tick()
        assert controller.state == RoundState.LOST
        assert controller.time_left == 0


class TestLevelTransition:

    def test_clearing_level_one_starts_level_two(self, controller, hud, mock_clock, bubble_factory):
        single_target(controller, bubble_factory)
        controller.bullets.append(Bullet(400, 300))
        controller.health = 1

        assert controller.tick() == RoundState.PLAYING

        assert controller.level == 2
        assert controller.health == Rules.MAX_HEALTH
        assert controller.bullets == []
        assert controller.time_limit < Rules.INITIAL_TIME_LIMIT
        assert controller.time_left == controller.time_limit * ticks_per_second() - 1
        assert len(controller.bubbles) == 3
        assert all(b.radius == 2 * BubbleDefaults.DEFAULT_RADIUS for b in controller.bubbles)
        assert controller.stats.max_level_reached == 2

        mock_clock.wait.assert_called_once_with(Rules.ANNOUNCE_SECONDS)
        assert hud.label("level").text == "Level : 2/3"
        assert hud.label("health").text == "Health : 3/3"
        assert not hud.label("status").visible

    def test_time_budget_strictly_decreases(self, controller, bubble_factory):
        limits = [controller.time_limit]
        for _ in range(2):
            single_target(controller, bubble_factory)
            controller.tick()
            limits.append(controller.time_limit)
        assert limits[0] > limits[1] > limits[2]

    @pytest.mark.scenario
    def test_clearing_level_three_wins(self, controller, hud, bubble_factory):
        controller.level = 3
        single_target(controller, bubble_factory)

        assert controller.tick() == RoundState.WON
        assert controller.level == 3
        assert controller.is_over
        assert hud.label("status").text == "Congratulations! You Win!"
        assert hud.label("status").color == Palette.STATUS_WIN

    def test_split_does_not_clear_level(self, controller, bubble_factory):
        single_target(controller, bubble_factory, radius=20)
        controller.tick()
        assert controller.level == 1
        assert len(controller.bubbles) == 2
