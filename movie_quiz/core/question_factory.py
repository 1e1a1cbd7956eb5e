"""Builds rating questions from the loaded movie list on background workers."""

from __future__ import annotations

from collections.abc import Callable
import logging
import random
from threading import Lock, Thread
from typing import Protocol

import httpx

from movie_quiz.constants.quiz_constants import QUESTION_TEXT_TEMPLATE, RATING_THRESHOLD
from movie_quiz.core.models import QuizQuestion
from movie_quiz.core.movies_loader import MostPopularMovie, MoviesLoader, MoviesLoadError

logger = logging.getLogger(__name__)


class QuestionFactoryDelegate(Protocol):
    """Receiver of question supply events. Called from worker threads."""

    def did_load_data_from_server(self) -> None: ...

    def did_fail_to_load_data(self, error: Exception) -> None: ...

    def did_receive_next_question(self, question: QuizQuestion | None) -> None: ...


def _start_daemon_thread(target: Callable[[], None]) -> None:
    Thread(target=target, daemon=True).start()


class QuestionFactory:
    """Supplies quiz questions built from randomly picked movies."""

    def __init__(
        self,
        movies_loader: MoviesLoader,
        delegate: QuestionFactoryDelegate | None = None,
        *,
        rating_threshold: float = RATING_THRESHOLD,
        rng: random.Random | None = None,
        run_in_background: Callable[[Callable[[], None]], None] = _start_daemon_thread,
    ) -> None:
        self._movies_loader = movies_loader
        self.delegate = delegate
        self._rating_threshold = rating_threshold
        self._rng = rng or random.Random()
        self._run_in_background = run_in_background
        self._lock = Lock()
        self._movies: list[MostPopularMovie] = []

    def has_movies(self) -> bool:
        with self._lock:
            return bool(self._movies)

    def load_data(self) -> None:
        self._run_in_background(self._load_movies)

    def request_next_question(self) -> None:
        self._run_in_background(self._deliver_next_question)

    def _load_movies(self) -> None:
        delegate = self._require_delegate()
        try:
            movies = self._movies_loader.load_movies()
        except MoviesLoadError as exc:
            logger.warning("Loading movies failed: %s", exc)
            delegate.did_fail_to_load_data(exc)
            return
        except Exception as exc:
            logger.exception("Unexpected error while loading movies")
            delegate.did_fail_to_load_data(MoviesLoadError(f"Could not load movies: {exc}"))
            return

        with self._lock:
            self._movies = list(movies)
        delegate.did_load_data_from_server()

    def _deliver_next_question(self) -> None:
        delegate = self._require_delegate()
        delegate.did_receive_next_question(self._build_question())

    def _build_question(self) -> QuizQuestion | None:
        with self._lock:
            if not self._movies:
                logger.warning("Question requested before any movies were loaded")
                return None
            movie = self._rng.choice(self._movies)

        try:
            image = self._movies_loader.load_image(movie.resized_image_url)
        except httpx.HTTPError as exc:
            logger.warning("Failed to load poster for %s: %s", movie.title, exc)
            image = b""
        except Exception:
            logger.exception("Unexpected error while loading poster for %s", movie.title)
            image = b""

        return QuizQuestion(
            image=image,
            text=QUESTION_TEXT_TEMPLATE.format(threshold=self._rating_threshold),
            correct_answer=movie.rating_value > self._rating_threshold,
        )

    def _require_delegate(self) -> QuestionFactoryDelegate:
        if self.delegate is None:
            raise RuntimeError("QuestionFactory has no delegate to notify.")
        return self.delegate
