"""Styling module for the MovieQuiz application."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
