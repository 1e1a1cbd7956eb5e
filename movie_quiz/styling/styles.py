"""Centralized styles and font definitions for the application."""

from movie_quiz.constants.ui_constants import POSTER_BORDER_WIDTH, POSTER_CORNER_RADIUS

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.DARK) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'YS Display', 'Roboto', sans-serif;
                font-size: 18px;
            }}
            QLabel {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_BG.get(theme)};
                color: {ColorPalette.BUTTON_TEXT.get(theme)};
                border: none;
                border-radius: 15px;
                padding: 18px 12px;
                font-size: 20px;
                font-weight: 500;
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.BUTTON_DISABLED_BG.get(theme)};
            }}
        """

    @staticmethod
    def get_poster_style(is_correct: bool | None = None, theme: Theme = Theme.DARK) -> str:
        """Poster frame; ``is_correct`` of None means no answer highlight."""
        if is_correct is None:
            border = "none"
        else:
            color = ColorPalette.SUCCESS if is_correct else ColorPalette.ERROR
            border = f"{POSTER_BORDER_WIDTH}px solid {color.get(theme)}"
        return (
            f"background-color: {ColorPalette.POSTER_PLACEHOLDER_BG.get(theme)};"
            f" border: {border};"
            f" border-radius: {POSTER_CORNER_RADIUS}px;"
        )

    @staticmethod
    def get_counter_label_style(theme: Theme = Theme.DARK) -> str:
        return f"font-size: 20px; font-weight: 500; color: {ColorPalette.TEXT_PRIMARY.get(theme)};"

    @staticmethod
    def get_secondary_label_style(theme: Theme = Theme.DARK) -> str:
        return f"font-size: 20px; font-weight: 500; color: {ColorPalette.TEXT_SECONDARY.get(theme)};"

    @staticmethod
    def get_question_label_style() -> str:
        return "font-size: 23px; font-weight: bold;"
