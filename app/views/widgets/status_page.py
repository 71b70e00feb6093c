"""Centered status page for the loading, empty and failed states."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from app.views.constants import EMPTY_TEXT, FAILED_TEXT, LOADING_TEXT, MUTED, RETRY_TEXT
from core.errors import PortfolioLoadError
from core.models import ViewState


class StatusPage(QWidget):
    """Shows a single message; the failed state adds the error detail and Retry."""

    def __init__(self, on_retry, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        v = QVBoxLayout(self)
        v.addStretch(1)
        self.message = QLabel(LOADING_TEXT)
        self.message.setAlignment(Qt.AlignCenter)
        self.message.setStyleSheet("font-family: monospace; font-size: 14px; letter-spacing: 2px;")
        v.addWidget(self.message)
        self.detail = QLabel()
        self.detail.setAlignment(Qt.AlignCenter)
        self.detail.setStyleSheet(f"font-family: monospace; font-size: 12px; color: {MUTED};")
        v.addWidget(self.detail)
        self.retry_button = QPushButton(RETRY_TEXT)
        self.retry_button.clicked.connect(on_retry)
        v.addWidget(self.retry_button, 0, Qt.AlignHCenter)
        v.addStretch(1)
        self.show_state(ViewState.LOADING)

    def show_state(self, state: ViewState, error: PortfolioLoadError | None = None) -> None:
        failed = state is ViewState.FAILED
        if failed:
            self.message.setText(FAILED_TEXT)
        elif state is ViewState.EMPTY:
            self.message.setText(EMPTY_TEXT)
        else:
            self.message.setText(LOADING_TEXT)
        self.detail.setText(str(error) if failed and error is not None else "")
        self.detail.setVisible(failed)
        self.retry_button.setVisible(failed)
