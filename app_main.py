"""Application entry point for MovieQuiz."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from movie_quiz.constants.about import APP_NAME, APP_VERSION
from movie_quiz.constants.network_constants import API_KEY
from movie_quiz.constants.storage_constants import STATISTICS_PATH
from movie_quiz.constants.ui_constants import ALERT_FONT_POINT_SIZE
from movie_quiz.core.movies_loader import MoviesLoader
from movie_quiz.core.question_factory import QuestionFactory
from movie_quiz.core.quiz_presenter import MovieQuizPresenter
from movie_quiz.core.services.statistics_store import StatisticsPersistenceError, StatisticsStore
from movie_quiz.ui import AlertPresenter, MovieQuizWindow, QtMainThreadDispatcher, QtScheduler
from movie_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, wire the presenter to the Qt window and start the event loop."""
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)
    if not API_KEY:
        logger.warning("MOVIE_QUIZ_API_KEY is not set; loading movies will likely fail")

    app = QApplication(sys.argv)

    try:
        statistics = StatisticsStore(STATISTICS_PATH)
    except StatisticsPersistenceError:
        logger.exception("Cannot open statistics history")
        raise

    window = MovieQuizWindow()
    movies_loader = MoviesLoader()
    question_factory = QuestionFactory(movies_loader)
    presenter = MovieQuizPresenter(
        view=window,
        question_supplier=question_factory,
        statistics=statistics,
        alert_presenter=AlertPresenter(window, font_point_size=ALERT_FONT_POINT_SIZE),
        scheduler=QtScheduler(window),
        dispatcher=QtMainThreadDispatcher(window),
    )
    question_factory.delegate = presenter
    window.set_presenter(presenter)

    window.show()
    presenter.start()
    exit_code = app.exec()
    movies_loader.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
