"""Qt main window rendering quiz questions and answer feedback."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QImage, QPixmap
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QProgressBar,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from movie_quiz.constants.ui_constants import (
    NO_BUTTON_TEXT,
    QUESTION_LABEL_TITLE,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
    YES_BUTTON_TEXT,
)
from movie_quiz.core.models import QuizStepViewModel
from movie_quiz.core.quiz_presenter import MovieQuizPresenter
from movie_quiz.styling.styles import Styles


class MovieQuizWindow(QMainWindow):
    """Single-screen quiz: counter, poster, question and Yes/No buttons."""

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)
        self._presenter: MovieQuizPresenter | None = None
        self._current_image = QImage()

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())
        self.change_button_state(False)

    def set_presenter(self, presenter: MovieQuizPresenter) -> None:
        self._presenter = presenter

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        root_layout.setContentsMargins(20, 10, 20, 20)
        root_layout.setSpacing(20)
        central_widget.setLayout(root_layout)

        header_row = QHBoxLayout()
        self.question_title_label = QLabel(QUESTION_LABEL_TITLE, self)
        self.question_title_label.setStyleSheet(Styles.get_secondary_label_style())
        header_row.addWidget(self.question_title_label)
        header_row.addStretch()
        self.counter_label = QLabel("", self)
        self.counter_label.setStyleSheet(Styles.get_counter_label_style())
        header_row.addWidget(self.counter_label)
        root_layout.addLayout(header_row)

        self.image_label = QLabel(self)
        self.image_label.setAlignment(Qt.AlignCenter)
        self.image_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.image_label.setStyleSheet(Styles.get_poster_style())
        root_layout.addWidget(self.image_label, stretch=1)

        self.loading_indicator = QProgressBar(self)
        self.loading_indicator.setRange(0, 0)
        self.loading_indicator.setTextVisible(False)
        self.loading_indicator.setVisible(False)
        root_layout.addWidget(self.loading_indicator)

        self.text_label = QLabel("", self)
        self.text_label.setAlignment(Qt.AlignCenter)
        self.text_label.setWordWrap(True)
        self.text_label.setStyleSheet(Styles.get_question_label_style())
        root_layout.addWidget(self.text_label)

        button_row = QHBoxLayout()
        button_row.setSpacing(20)
        self.no_button = QPushButton(NO_BUTTON_TEXT, self)
        self.no_button.clicked.connect(self._handle_no_clicked)
        button_row.addWidget(self.no_button)

        self.yes_button = QPushButton(YES_BUTTON_TEXT, self)
        self.yes_button.clicked.connect(self._handle_yes_clicked)
        button_row.addWidget(self.yes_button)
        root_layout.addLayout(button_row)

    def _handle_yes_clicked(self) -> None:
        if self._presenter is not None:
            self._presenter.yes_button_clicked()

    def _handle_no_clicked(self) -> None:
        if self._presenter is not None:
            self._presenter.no_button_clicked()

    # --- MovieQuizView ---

    def show_question(self, step: QuizStepViewModel) -> None:
        self._current_image = step.image if isinstance(step.image, QImage) else QImage()
        self._refresh_poster()
        self.text_label.setText(step.question)
        self.counter_label.setText(step.question_number)
        self.change_button_state(True)

    def set_loading_indicator(self, visible: bool) -> None:
        self.loading_indicator.setVisible(visible)

    def change_button_state(self, is_enabled: bool) -> None:
        self.no_button.setEnabled(is_enabled)
        self.yes_button.setEnabled(is_enabled)

    def highlight_image_border(self, is_correct_answer: bool) -> None:
        self.image_label.setStyleSheet(Styles.get_poster_style(is_correct_answer))

    def hide_image_border(self) -> None:
        self.image_label.setStyleSheet(Styles.get_poster_style())

    # --- Qt events ---

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._refresh_poster()

    def closeEvent(self, event: QCloseEvent) -> None:
        if self._presenter is not None:
            self._presenter.shutdown()
        super().closeEvent(event)

    def _refresh_poster(self) -> None:
        if self._current_image.isNull():
            self.image_label.clear()
            return
        pixmap = QPixmap.fromImage(self._current_image)
        self.image_label.setPixmap(
            pixmap.scaled(self.image_label.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation)
        )
