"""Modal alerts for round results and loading errors."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from movie_quiz.constants.ui_constants import ALERT_FONT_POINT_SIZE
from movie_quiz.core.models import AlertModel


class AlertPresenter:
    """Shows an ``AlertModel`` as a message box and runs its completion."""

    def __init__(self, parent: QWidget, *, font_point_size: int = ALERT_FONT_POINT_SIZE) -> None:
        self._parent = parent
        self._font_point_size = font_point_size

    def build_message_box(self, model: AlertModel) -> QMessageBox:
        msg_box = QMessageBox(self._parent)
        msg_box.setWindowTitle(model.title)
        msg_box.setText(model.title)
        msg_box.setInformativeText(model.message)
        msg_box.addButton(model.button_text, QMessageBox.AcceptRole)
        if self._font_point_size > 0:
            font = msg_box.font()
            font.setPointSize(self._font_point_size)
            msg_box.setFont(font)
        return msg_box

    def show_alert(self, model: AlertModel) -> None:
        """Show the alert modally; the completion runs once the button is pressed.

        Args:
            model: Title, message, button text and completion callback
        """
        self.build_message_box(model).exec()
        model.completion()
