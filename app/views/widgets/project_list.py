"""Project list: one clickable row per project, registered as scroll anchors."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from app.views.anchors import ScrollAreaViewport, WidgetAnchor, set_pointer_cursor
from app.views.constants import DIVIDER, LIST_MAX_WIDTH, MUTED, ROW_PREVIEW_COUNT, ROW_PREVIEW_SIDE
from app.views.image_binder import ImageBinder
from app.viewmodels.scroll_anchors import ScrollAnchorController
from core.models import Project
from core.services.normalizer import format_index


class ProjectRow(QFrame):
    """Row showing the display index, title, place/year and preview thumbnails."""

    def __init__(
        self,
        project: Project,
        binder: ImageBinder,
        on_click: Callable[[Project], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.project = project
        self._on_click = on_click
        self.thumb_labels: list[QLabel] = []
        set_pointer_cursor(self)
        self.setObjectName("projectRow")
        self.setStyleSheet(
            f"#projectRow {{ border-top: 1px solid {DIVIDER}; }}"
            f'#projectRow[emphasised="true"] {{ border-top: 1px solid white; }}'
        )

        h = QHBoxLayout(self)
        h.setContentsMargins(0, 40, 0, 40)
        h.setSpacing(40)

        idx = QLabel(format_index(project.display_id))
        idx.setStyleSheet(f"font-size: 14px; font-family: monospace; color: {MUTED};")
        h.addWidget(idx, 0, Qt.AlignTop)

        text = QVBoxLayout()
        title = QLabel(project.title)
        title.setStyleSheet("font-size: 60px; font-weight: 300;")
        title.setWordWrap(True)
        text.addWidget(title)
        meta = " · ".join(str(v) for v in (project.location, project.year) if v)
        if meta:
            sub = QLabel(meta.upper())
            sub.setStyleSheet(f"font-size: 12px; letter-spacing: 2px; color: {MUTED};")
            text.addWidget(sub)
        h.addLayout(text, 1)

        thumbs = QHBoxLayout()
        thumbs.setSpacing(4)
        for ref in project.preview_images[:ROW_PREVIEW_COUNT]:
            lbl = QLabel()
            lbl.setFixedSize(ROW_PREVIEW_SIDE, ROW_PREVIEW_SIDE)
            lbl.setProperty("fit_box", True)
            lbl.setAlignment(Qt.AlignCenter)
            if binder.bind(lbl, ref, ROW_PREVIEW_SIDE * 2):
                thumbs.addWidget(lbl)
                self.thumb_labels.append(lbl)
            else:
                lbl.deleteLater()
        h.addLayout(thumbs)

    def mousePressEvent(self, event) -> None:  # noqa: N802 - Qt override
        if event.button() == Qt.LeftButton:
            self._on_click(self.project)
        super().mousePressEvent(event)


class ProjectList(QWidget):
    """Vertical list of `ProjectRow`s centred at a maximum width."""

    def __init__(
        self,
        binder: ImageBinder,
        anchors: ScrollAnchorController,
        viewport: ScrollAreaViewport,
        on_open: Callable[[Project], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._binder = binder
        self._anchors = anchors
        self._viewport = viewport
        self._on_open = on_open
        self._rows: list[ProjectRow] = []

        outer = QHBoxLayout(self)
        outer.setContentsMargins(20, 100, 20, 100)
        self._column = QWidget()
        self._column.setMaximumWidth(LIST_MAX_WIDTH)
        self._layout = QVBoxLayout(self._column)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(0)
        outer.addWidget(self._column)

    def set_projects(self, projects: Sequence[Project]) -> None:
        """Rebuild rows for `projects` and register their scroll anchors."""
        self.clear()
        for project in projects:
            row = ProjectRow(project, self._binder, self._on_open, self._column)
            self._layout.addWidget(row)
            self._rows.append(row)
            self._anchors.register_project_anchor(project.id, WidgetAnchor(row, self._viewport))
        self._layout.addStretch(1)

    def clear(self) -> None:
        for row in self._rows:
            self._anchors.unregister_project_anchor(row.project.id)
            self._binder.forget(row.thumb_labels)
            row.deleteLater()
        self._rows.clear()
        while self._layout.count():
            self._layout.takeAt(0)
