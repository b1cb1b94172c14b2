"""
Round system exports.

Provides the controller that runs one game session.
"""

from bubble_trouble.systems.round.round_controller import RoundController, Action

__all__ = [
    'RoundController',
    'Action',
]
