"""
test_session_stats.py
---------------------
Tests for per-session statistics.
"""

import pytest

from bubble_trouble.core.runtime.session_stats import SessionStats


def test_score_accumulates():
    stats = SessionStats()
    stats.add_score(1)
    stats.add_score(2)
    assert stats.score == 3


def test_score_cannot_decrease():
    stats = SessionStats()
    with pytest.raises(ValueError):
        stats.add_score(-1)


def test_accuracy():
    stats = SessionStats()
    assert stats.accuracy == 0.0
    for _ in range(4):
        stats.add_shot()
    stats.add_pop()
    assert stats.accuracy == pytest.approx(0.25)


def test_max_level_only_rises():
    stats = SessionStats()
    stats.set_level(3)
    stats.set_level(2)
    assert stats.max_level_reached == 3


def test_summary_reports_accuracy():
    stats = SessionStats()
    stats.add_score(5)
    stats.add_damage()
    stats.add_tick()
    stats.add_shot()
    stats.add_shot()
    stats.add_pop()

    summary = stats.summary()
    assert "score=5" in summary
    assert "damage=1" in summary
    assert "accuracy=50%" in summary
    assert "ticks=1" in summary
