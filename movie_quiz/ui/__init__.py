"""Qt UI components for the movie quiz."""

from .alert_presenter import AlertPresenter
from .movie_quiz_window import MovieQuizWindow
from .qt_scheduling import QtMainThreadDispatcher, QtScheduledTask, QtScheduler

__all__ = [
    "AlertPresenter",
    "MovieQuizWindow",
    "QtMainThreadDispatcher",
    "QtScheduledTask",
    "QtScheduler",
]
