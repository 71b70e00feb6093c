"""QTimer-backed scheduler used by the scroll anchor controller."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QTimer


class _QtTimerHandle:
    def __init__(self, timer: QTimer) -> None:
        self._timer = timer

    def cancel(self) -> None:
        """Stop the timer if it has not fired yet."""
        try:
            self._timer.stop()
            self._timer.deleteLater()
        except RuntimeError:  # already deleted with its parent
            pass


class QtScheduler:
    """Runs single-shot callbacks on the Qt event loop."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> _QtTimerHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)

        def _fire() -> None:
            timer.deleteLater()
            callback()

        timer.timeout.connect(_fire)
        timer.start(max(0, int(delay_ms)))
        return _QtTimerHandle(timer)
