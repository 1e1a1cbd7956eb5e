"""Tests for the Qt window implementing the quiz view."""

import pytest
from PySide6.QtGui import QColor, QImage

from movie_quiz.core.models import QuizStepViewModel
from movie_quiz.styling.color_palette import ColorPalette, Theme


@pytest.fixture
def window(qt_app):
    from movie_quiz.ui.movie_quiz_window import MovieQuizWindow

    widget = MovieQuizWindow()
    yield widget
    widget.close()


class RecordingPresenter:
    def __init__(self):
        self.answers: list[bool] = []
        self.shutdowns = 0

    def yes_button_clicked(self):
        self.answers.append(True)

    def no_button_clicked(self):
        self.answers.append(False)

    def shutdown(self):
        self.shutdowns += 1


class TestMovieQuizWindow:
    def test_buttons_start_disabled(self, window):
        assert not window.yes_button.isEnabled()
        assert not window.no_button.isEnabled()

    def test_show_question_updates_labels(self, window):
        image = QImage(10, 10, QImage.Format_RGB32)
        image.fill(QColor("blue"))

        window.show_question(QuizStepViewModel(image=image, question="Question Text", question_number="3/10"))

        assert window.text_label.text() == "Question Text"
        assert window.counter_label.text() == "3/10"
        assert window.yes_button.isEnabled()
        assert not window.image_label.pixmap().isNull()

    def test_placeholder_image_clears_poster(self, window):
        window.show_question(QuizStepViewModel(image=QImage(), question="Q", question_number="1/10"))

        assert window.image_label.pixmap().isNull()

    def test_highlight_uses_feedback_colors(self, window):
        window.highlight_image_border(True)
        assert ColorPalette.SUCCESS.get(Theme.DARK) in window.image_label.styleSheet()

        window.highlight_image_border(False)
        assert ColorPalette.ERROR.get(Theme.DARK) in window.image_label.styleSheet()

        window.hide_image_border()
        assert "border: none" in window.image_label.styleSheet()

    def test_loading_indicator_visibility(self, window):
        window.set_loading_indicator(True)
        assert not window.loading_indicator.isHidden()

        window.set_loading_indicator(False)
        assert window.loading_indicator.isHidden()

    def test_buttons_forward_to_presenter(self, window):
        presenter = RecordingPresenter()
        window.set_presenter(presenter)
        window.change_button_state(True)

        window.yes_button.click()
        window.no_button.click()

        assert presenter.answers == [True, False]

    def test_close_shuts_presenter_down(self, qt_app):
        from movie_quiz.ui.movie_quiz_window import MovieQuizWindow

        widget = MovieQuizWindow()
        presenter = RecordingPresenter()
        widget.set_presenter(presenter)
        widget.show()

        widget.close()

        assert presenter.shutdowns == 1
