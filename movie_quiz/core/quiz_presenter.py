"""Presenter mediating between question supply, quiz engine, statistics and view."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Protocol
import weakref

from movie_quiz.constants.quiz_constants import ANSWER_FEEDBACK_DELAY_MS, RECORD_DATE_FORMAT
from movie_quiz.constants.ui_constants import (
    DEFAULT_NETWORK_ERROR_MESSAGE,
    NETWORK_ERROR_TITLE,
    PLAY_AGAIN_BUTTON,
    ROUND_OVER_TITLE,
    ROUND_SUMMARY_TEMPLATE,
    STATISTICS_ERROR_MESSAGE,
    STATISTICS_ERROR_TITLE,
    TRY_AGAIN_BUTTON,
)
from movie_quiz.core.models import AlertModel, QuizQuestion, QuizStepViewModel, RoundComplete
from movie_quiz.core.quiz_engine import QuizEngine
from movie_quiz.core.services.statistics_store import StatisticsPersistenceError, StatisticsStore

logger = logging.getLogger(__name__)


class MovieQuizView(Protocol):
    def show_question(self, step: QuizStepViewModel) -> None: ...

    def set_loading_indicator(self, visible: bool) -> None: ...

    def change_button_state(self, is_enabled: bool) -> None: ...

    def highlight_image_border(self, is_correct_answer: bool) -> None: ...

    def hide_image_border(self) -> None: ...


class AlertPresenting(Protocol):
    def show_alert(self, model: AlertModel) -> None: ...


class QuestionSupplier(Protocol):
    def load_data(self) -> None: ...

    def request_next_question(self) -> None: ...


class ScheduledTask(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask: ...


class Dispatcher(Protocol):
    """Runs callables on the single UI-update context."""

    def post(self, callback: Callable[[], None]) -> None: ...


class MovieQuizPresenter:
    """Drives a quiz round in response to supply events and user input.

    The presenter keeps only a weak reference to the view: once the view is
    gone, renders and pending callbacks silently do nothing.
    """

    def __init__(
        self,
        view: MovieQuizView,
        question_supplier: QuestionSupplier,
        statistics: StatisticsStore,
        alert_presenter: AlertPresenting,
        scheduler: Scheduler,
        dispatcher: Dispatcher,
        engine: QuizEngine | None = None,
    ) -> None:
        self._view_ref = weakref.ref(view)
        self.question_supplier = question_supplier
        self.statistics = statistics
        self.alert_presenter = alert_presenter
        self._scheduler = scheduler
        self._dispatcher = dispatcher
        self.engine = engine or QuizEngine()
        self._pending_continuation: ScheduledTask | None = None

    @property
    def view(self) -> MovieQuizView | None:
        return self._view_ref()

    def start(self) -> None:
        view = self.view
        if view is not None:
            view.set_loading_indicator(True)
        self.question_supplier.load_data()

    # --- Question supply events (may arrive on worker threads) ---

    def did_load_data_from_server(self) -> None:
        self._dispatcher.post(self._handle_data_loaded)

    def did_fail_to_load_data(self, error: Exception) -> None:
        self._dispatcher.post(lambda: self._show_network_error(error))

    def did_receive_next_question(self, question: QuizQuestion | None) -> None:
        if question is None:
            return
        self._dispatcher.post(lambda: self._show_question(question))

    # --- User input ---

    def yes_button_clicked(self) -> None:
        self._did_answer(is_yes=True)

    def no_button_clicked(self) -> None:
        self._did_answer(is_yes=False)

    def restart_game(self) -> None:
        """Start a new round from the first question."""
        logger.debug("Restarting round")
        self._cancel_pending_continuation()
        self.engine.restart()
        self.question_supplier.request_next_question()

    def shutdown(self) -> None:
        self._cancel_pending_continuation()

    # --- Internals ---

    def _handle_data_loaded(self) -> None:
        view = self.view
        if view is None:
            return
        view.set_loading_indicator(False)
        self.question_supplier.request_next_question()

    def _show_network_error(self, error: Exception) -> None:
        logger.warning("Movie data could not be loaded: %s", error)
        view = self.view
        if view is None:
            return
        view.set_loading_indicator(False)
        model = AlertModel(
            title=NETWORK_ERROR_TITLE,
            message=str(error) or DEFAULT_NETWORK_ERROR_MESSAGE,
            button_text=TRY_AGAIN_BUTTON,
            completion=self._retry_loading,
        )
        self.alert_presenter.show_alert(model)

    def _retry_loading(self) -> None:
        self._cancel_pending_continuation()
        self.engine.restart()
        self.start()

    def _show_question(self, question: QuizQuestion) -> None:
        view = self.view
        if view is None:
            return
        step = self.engine.accept_question(question)
        if step is not None:
            view.show_question(step)

    def _did_answer(self, is_yes: bool) -> None:
        view = self.view
        if view is None:
            return
        outcome = self.engine.submit_answer(is_yes)
        if outcome is None:
            return
        view.change_button_state(False)
        view.highlight_image_border(outcome.is_correct)
        self._pending_continuation = self._scheduler.schedule(
            ANSWER_FEEDBACK_DELAY_MS, self._show_next_question_or_results
        )

    def _show_next_question_or_results(self) -> None:
        self._pending_continuation = None
        view = self.view
        if view is None:
            return
        view.hide_image_border()
        view.change_button_state(True)

        step = self.engine.advance_or_finish()
        if isinstance(step, RoundComplete):
            self._show_results(step)
        else:
            self.question_supplier.request_next_question()

    def _show_results(self, result: RoundComplete) -> None:
        try:
            self.statistics.store(correct=result.correct, total=result.total)
        except StatisticsPersistenceError as exc:
            logger.exception("Could not record round %d/%d", result.correct, result.total)
            self.alert_presenter.show_alert(
                AlertModel(
                    title=STATISTICS_ERROR_TITLE,
                    message=STATISTICS_ERROR_MESSAGE.format(
                        correct=result.correct, total=result.total, error=exc
                    ),
                    button_text=PLAY_AGAIN_BUTTON,
                    completion=self.restart_game,
                )
            )
            return
        model = AlertModel(
            title=ROUND_OVER_TITLE,
            message=self._round_summary(result),
            button_text=PLAY_AGAIN_BUTTON,
            completion=self.restart_game,
        )
        self.alert_presenter.show_alert(model)

    def _round_summary(self, result: RoundComplete) -> str:
        best_game = self.statistics.best_game
        return ROUND_SUMMARY_TEMPLATE.format(
            correct=result.correct,
            total=result.total,
            games_count=self.statistics.games_count,
            best_correct=best_game.correct,
            best_total=best_game.total,
            best_date=best_game.date.strftime(RECORD_DATE_FORMAT),
            accuracy=self.statistics.total_accuracy,
        )

    def _cancel_pending_continuation(self) -> None:
        if self._pending_continuation is not None:
            self._pending_continuation.cancel()
            self._pending_continuation = None
