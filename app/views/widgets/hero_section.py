"""Hero section: featured cover image with portfolio counters."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from app.views.constants import (
    BRAND_TEXT,
    HERO_MIN_HEIGHT,
    INDEX_TEXT,
    PARALLAX_FACTOR,
    SCROLL_HINT_TEXT,
)
from app.views.image_binder import ImageBinder
from core.models import PortfolioStats, Project


class _StatItem(QWidget):
    def __init__(self, label: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        v = QVBoxLayout(self)
        v.setContentsMargins(0, 0, 0, 0)
        self.number = QLabel("0")
        self.number.setStyleSheet("font-size: 64px; font-weight: 300; background: transparent;")
        caption = QLabel(label)
        caption.setStyleSheet("font-size: 12px; letter-spacing: 1px; background: transparent;")
        v.addWidget(self.number)
        v.addWidget(caption)


class HeroSection(QWidget):
    """Full-width hero with a background cover and stats footer.

    When parallax is enabled the cover drifts with the page scroll position
    through `on_page_scrolled`.
    """

    def __init__(self, binder: ImageBinder, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._binder = binder
        self.setMinimumHeight(HERO_MIN_HEIGHT)

        self._cover = QLabel(self)
        self._cover.setAlignment(Qt.AlignCenter)
        self._cover.setStyleSheet("background: transparent;")
        self._cover.lower()

        root = QVBoxLayout(self)
        root.setContentsMargins(30, 30, 30, 60)

        header = QHBoxLayout()
        brand = QLabel(BRAND_TEXT)
        brand.setStyleSheet(
            "font-size: 12px; font-weight: bold; letter-spacing: 2px; background: transparent;"
        )
        self.index_button = QPushButton(INDEX_TEXT)
        self.index_button.setCursor(Qt.PointingHandCursor)
        header.addWidget(brand)
        header.addStretch(1)
        header.addWidget(self.index_button)
        root.addLayout(header)
        root.addStretch(1)

        footer = QHBoxLayout()
        footer.setSpacing(60)
        self._photos = _StatItem("PHOTOS")
        self._locations = _StatItem("LOCATIONS")
        self._projects = _StatItem("PROJECTS")
        for item in (self._photos, self._locations, self._projects):
            footer.addWidget(item, 0, Qt.AlignBottom)
        footer.addStretch(1)
        hint = QLabel(SCROLL_HINT_TEXT)
        hint.setStyleSheet("font-size: 12px; background: transparent;")
        footer.addWidget(hint, 0, Qt.AlignBottom)
        root.addLayout(footer)

        self._parallax_offset = 0

    def set_content(self, hero: Project | None, stats: PortfolioStats) -> None:
        """Show `hero`'s cover (if any) and the portfolio counters."""
        self._photos.number.setText(str(stats.total_photos))
        self._locations.number.setText(str(stats.unique_locations))
        self._projects.number.setText(str(stats.total_projects))
        if hero is None or not self._binder.bind(self._cover, hero.cover):
            self._cover.clear()

    @property
    def parallax_offset(self) -> int:
        return self._parallax_offset

    def on_page_scrolled(self, value: int) -> None:
        """Shift the cover at a fraction of the page scroll speed."""
        self._parallax_offset = int(value * PARALLAX_FACTOR)
        self._layout_cover()

    def resizeEvent(self, event) -> None:  # noqa: N802 - Qt override
        super().resizeEvent(event)
        self._layout_cover()

    def _layout_cover(self) -> None:
        self._cover.setGeometry(0, self._parallax_offset, self.width(), self.height())
