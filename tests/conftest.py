"""Shared fixtures and test doubles for the movie quiz test suite."""

import os
from collections.abc import Callable
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from movie_quiz.core.models import AlertModel, QuizQuestion, QuizStepViewModel  # noqa: E402
from movie_quiz.core.quiz_engine import QuizEngine  # noqa: E402
from movie_quiz.core.services.statistics_store import StatisticsStore  # noqa: E402

PLACEHOLDER_IMAGE = "placeholder"


def fake_decoder(image_bytes: bytes) -> object:
    return image_bytes or PLACEHOLDER_IMAGE


class FakeView:
    """Records every render call made by the presenter."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []
        self.shown_steps: list[QuizStepViewModel] = []
        self.buttons_enabled: bool | None = None
        self.loading_visible: bool | None = None
        self.highlight: bool | None = None

    def show_question(self, step: QuizStepViewModel) -> None:
        self.calls.append(("show_question", step))
        self.shown_steps.append(step)

    def set_loading_indicator(self, visible: bool) -> None:
        self.calls.append(("set_loading_indicator", visible))
        self.loading_visible = visible

    def change_button_state(self, is_enabled: bool) -> None:
        self.calls.append(("change_button_state", is_enabled))
        self.buttons_enabled = is_enabled

    def highlight_image_border(self, is_correct_answer: bool) -> None:
        self.calls.append(("highlight_image_border", is_correct_answer))
        self.highlight = is_correct_answer

    def hide_image_border(self) -> None:
        self.calls.append(("hide_image_border", None))
        self.highlight = None


class FakeAlertPresenter:
    def __init__(self) -> None:
        self.alerts: list[AlertModel] = []

    def show_alert(self, model: AlertModel) -> None:
        self.alerts.append(model)


class FakeQuestionSupplier:
    def __init__(self) -> None:
        self.load_calls = 0
        self.next_question_requests = 0

    def load_data(self) -> None:
        self.load_calls += 1

    def request_next_question(self) -> None:
        self.next_question_requests += 1


class FakeTask:
    def __init__(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.delay_ms = delay_ms
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Collects scheduled callbacks so tests decide when time elapses."""

    def __init__(self) -> None:
        self.tasks: list[FakeTask] = []

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> FakeTask:
        task = FakeTask(delay_ms, callback)
        self.tasks.append(task)
        return task

    def pending(self) -> list[FakeTask]:
        return [task for task in self.tasks if not task.cancelled and not task.fired]

    def run_pending(self) -> None:
        for task in self.pending():
            task.fired = True
            task.callback()


class ImmediateDispatcher:
    def __init__(self) -> None:
        self.posted = 0

    def post(self, callback: Callable[[], None]) -> None:
        self.posted += 1
        callback()


@pytest.fixture
def engine() -> QuizEngine:
    return QuizEngine(image_decoder=fake_decoder)


@pytest.fixture
def statistics(tmp_path: Path) -> StatisticsStore:
    return StatisticsStore(tmp_path / "statistics.json")


@pytest.fixture
def question_yes() -> QuizQuestion:
    return QuizQuestion(image=b"", text="Question Text", correct_answer=True)


@pytest.fixture
def question_no() -> QuizQuestion:
    return QuizQuestion(image=b"poster", text="Question Text", correct_answer=False)


@pytest.fixture
def qt_app():
    """Qt application instance for tests touching timers, signals or images."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
