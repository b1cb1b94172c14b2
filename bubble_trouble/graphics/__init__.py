"""Rendering exports."""

from bubble_trouble.graphics.renderer import Renderer

__all__ = ['Renderer']
