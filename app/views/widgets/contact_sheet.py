"""Contact sheet: thumbnail grid layered above the detail overlay."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from app.views.anchors import set_pointer_cursor
from app.views.constants import CLOSE_TEXT, CONTACT_SHEET_COLUMNS, CONTACT_SHEET_SPACING, MUTED
from app.views.image_binder import ImageBinder
from core.models import Project
from core.services.normalizer import format_index


class _Tile(QWidget):
    def __init__(self, index: int, on_click, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.index = index
        self._on_click = on_click
        set_pointer_cursor(self)

    def mousePressEvent(self, event) -> None:  # noqa: N802 - Qt override
        if event.button() == Qt.LeftButton:
            self._on_click(self.index)
        super().mousePressEvent(event)


class ContactSheet(QWidget):
    """Grid of every image in the open project; a click jumps to that image."""

    def __init__(self, vm, binder: ImageBinder, thumb_side: int, parent: QWidget | None = None):
        super().__init__(parent)
        self._vm = vm
        self._binder = binder
        self._thumb_side = thumb_side
        self._labels: list[QLabel] = []
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setStyleSheet("ContactSheet { background-color: rgba(0,0,0,0.85); }")

        root = QVBoxLayout(self)
        root.setContentsMargins(30, 30, 30, 30)
        bar = QHBoxLayout()
        self._title = QLabel()
        self._title.setStyleSheet("font-size: 12px; letter-spacing: 2px;")
        bar.addWidget(self._title)
        bar.addStretch(1)
        close = QPushButton(CLOSE_TEXT)
        close.clicked.connect(self._vm.close_contact_sheet)
        bar.addWidget(close)
        root.addLayout(bar)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        root.addWidget(self.scroll, 1)

    def show_project(self, project: Project) -> None:
        """Build the thumbnail grid for `project`."""
        self._binder.forget(self._labels)
        self._labels.clear()
        self._title.setText(f"{project.title.upper()}  ·  {len(project.images)}")

        grid_host = QWidget()
        grid = QGridLayout(grid_host)
        grid.setSpacing(CONTACT_SHEET_SPACING)
        for index, ref in enumerate(project.images):
            tile = _Tile(index, self._vm.select_image_in_contact_sheet)
            v = QVBoxLayout(tile)
            v.setContentsMargins(0, 0, 0, 0)
            thumb = QLabel()
            thumb.setFixedSize(self._thumb_side, self._thumb_side)
            thumb.setProperty("fit_box", True)
            thumb.setAlignment(Qt.AlignCenter)
            if self._binder.bind(thumb, ref, self._thumb_side):
                self._labels.append(thumb)
            v.addWidget(thumb)
            caption = QLabel(format_index(index + 1))
            caption.setStyleSheet(f"font-family: monospace; font-size: 11px; color: {MUTED};")
            v.addWidget(caption)
            r, c = divmod(index, CONTACT_SHEET_COLUMNS)
            grid.addWidget(tile, r, c)
        self.scroll.setWidget(grid_host)
