"""Color palette for MovieQuiz supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    # Text colors
    TEXT_PRIMARY = ThemeColors(
        light="#1A1B22",      # Near black
        dark="#FFFFFF"        # White
    )

    TEXT_SECONDARY = ThemeColors(
        light="#3B3B3B",      # Dark Gray
        dark="#AEAFB4"        # Light Gray
    )

    # Background colors
    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",      # White
        dark="#1A1B22"        # Near black
    )

    POSTER_PLACEHOLDER_BG = ThemeColors(
        light="#E8E8E8",      # Light Gray
        dark="#3B3B3B"        # Dark Gray
    )

    # Answer feedback colors
    SUCCESS = ThemeColors(
        light="#60C28E",      # Green
        dark="#60C28E"
    )

    ERROR = ThemeColors(
        light="#F56B6C",      # Red
        dark="#F56B6C"
    )

    # Button colors
    BUTTON_BG = ThemeColors(
        light="#1A1B22",      # Near black
        dark="#FFFFFF"        # White
    )

    BUTTON_TEXT = ThemeColors(
        light="#FFFFFF",      # White
        dark="#1A1B22"        # Near black
    )

    BUTTON_DISABLED_BG = ThemeColors(
        light="#AEAFB4",      # Gray
        dark="#AEAFB4"
    )
