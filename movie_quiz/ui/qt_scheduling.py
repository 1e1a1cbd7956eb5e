"""Qt-backed scheduler and main-thread dispatcher used by the presenter."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, Qt, QTimer, Signal


class QtScheduledTask:
    """Handle to a pending single-shot timer."""

    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None

    def is_pending(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def _finish(self) -> None:
        if self._timer is not None:
            self._timer.deleteLater()
            self._timer = None


class QtScheduler:
    """Runs callbacks on the GUI thread after a delay."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> QtScheduledTask:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(delay_ms)
        task = QtScheduledTask(timer)

        def fire() -> None:
            task._finish()
            callback()

        timer.timeout.connect(fire)
        timer.start()
        return task


class QtMainThreadDispatcher(QObject):
    """Posts callables from any thread onto the thread owning this object."""

    _invoke = Signal(object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._invoke.connect(self._run, Qt.QueuedConnection)

    def post(self, callback: Callable[[], None]) -> None:
        self._invoke.emit(callback)

    def _run(self, callback: Callable[[], None]) -> None:
        callback()
