"""
bubble_trouble
--------------
Arcade bubble shooter: pop bouncing, splitting bubbles before the level
timer runs out or the shooter's health reaches zero.
"""

__version__ = "1.0.0"
