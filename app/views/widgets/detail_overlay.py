"""Full-window overlay presenting every image of the selected project."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGraphicsOpacityEffect,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from app.views.anchors import ScrollAreaViewport, WidgetAnchor
from app.views.constants import (
    CLOSE_TEXT,
    CONTACT_SHEET_TEXT,
    DETAIL_IMAGE_MAX_WIDTH,
    DETAIL_IMAGE_SPACING,
    DETAIL_IMAGE_WIDTH_RATIO,
    END_OF_PROJECT_TEXT,
    MUTED,
)
from app.views.image_binder import ImageBinder
from app.viewmodels.scroll_anchors import ScrollAnchorController
from core.models import Project
from core.services.normalizer import format_index


class DetailOverlay(QWidget):
    """Overlay with a header, close/contact-sheet buttons and the image column.

    Image containers are registered with the anchor controller by index so the
    contact sheet can deep-link into the column.
    """

    def __init__(
        self,
        vm,
        binder: ImageBinder,
        anchors: ScrollAnchorController,
        smooth_duration_ms: int = 600,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._vm = vm
        self._binder = binder
        self._anchors = anchors
        self._image_labels: list[QLabel] = []
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setStyleSheet("DetailOverlay { background-color: rgba(10,10,10,0.97); }")

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        bar = QHBoxLayout()
        bar.setContentsMargins(30, 30, 30, 0)
        bar.addStretch(1)
        self.contact_button = QPushButton(CONTACT_SHEET_TEXT)
        self.contact_button.clicked.connect(self._vm.open_contact_sheet)
        self.contact_button.setVisible(vm.features.contact_sheet)
        bar.addWidget(self.contact_button)
        close = QPushButton(CLOSE_TEXT)
        close.clicked.connect(self._vm.close_detail)
        bar.addWidget(close)
        root.addLayout(bar)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self._viewport = ScrollAreaViewport(self.scroll, smooth_duration_ms)
        root.addWidget(self.scroll, 1)

        self._content: QWidget | None = None

    def show_project(self, project: Project) -> None:
        """Render `project`'s header and image column."""
        self.clear()
        content = QWidget()
        v = QVBoxLayout(content)
        v.setContentsMargins(40, 90, 40, 100)
        v.setSpacing(DETAIL_IMAGE_SPACING)

        header = QWidget()
        hv = QVBoxLayout(header)
        title = QLabel(project.title)
        title.setAlignment(Qt.AlignCenter)
        title.setWordWrap(True)
        title.setStyleSheet("font-size: 80px; font-weight: 300;")
        hv.addWidget(title)
        if project.location:
            place = QLabel(project.location.upper())
            place.setAlignment(Qt.AlignCenter)
            place.setStyleSheet("font-size: 14px; letter-spacing: 2px;")
            hv.addWidget(place)
        v.addWidget(header)

        width = self._image_width()
        for index, ref in enumerate(project.images):
            container = QWidget()
            cv = QVBoxLayout(container)
            cv.setContentsMargins(0, 0, 0, 0)
            caption = QLabel(format_index(index + 1))
            caption.setStyleSheet(f"font-family: monospace; font-size: 12px; color: {MUTED};")
            cv.addWidget(caption)
            img = QLabel()
            img.setFixedWidth(width)
            img.setAlignment(Qt.AlignCenter)
            if self._binder.bind(img, ref):
                self._image_labels.append(img)
            cv.addWidget(img)
            v.addWidget(container, 0, Qt.AlignHCenter)
            self._anchors.register_image_anchor(index, WidgetAnchor(container, self._viewport))

        footer = QLabel(END_OF_PROJECT_TEXT)
        footer.setAlignment(Qt.AlignCenter)
        footer.setStyleSheet("font-size: 12px; letter-spacing: 2px;")
        v.addWidget(footer)

        self._content = content
        self.scroll.setWidget(content)
        self.scroll.verticalScrollBar().setValue(0)

    def clear(self) -> None:
        self._binder.forget(self._image_labels)
        self._image_labels.clear()
        if self._content is not None:
            self.scroll.takeWidget()
            self._content.deleteLater()
            self._content = None

    def set_dimmed(self, dimmed: bool) -> None:
        """De-emphasise the overlay while the contact sheet is above it."""
        self.scroll.setEnabled(not dimmed)
        if dimmed:
            effect = QGraphicsOpacityEffect(self.scroll)
            effect.setOpacity(0.3)
            self.scroll.setGraphicsEffect(effect)
        else:
            self.scroll.setGraphicsEffect(None)

    def _image_width(self) -> int:
        avail = max(1, self.width() or DETAIL_IMAGE_MAX_WIDTH)
        return min(DETAIL_IMAGE_MAX_WIDTH, int(avail * DETAIL_IMAGE_WIDTH_RATIO))
