"""LayoutManager: Manages main window layout and overlay stacking."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QScrollArea,
    QStackedLayout,
    QVBoxLayout,
    QWidget,
)

from app.views.constants import NAV_MENU_WIDTH, WINDOW_SIZE_RATIO


class LayoutManager:
    """Manages main window layout and overlay geometry.

    This class encapsulates all layout-related functionality including:
    - The scrollable page holding the hero and the project list
    - Switching between the status page and the page
    - Keeping the nav menu, detail overlay and contact sheet fitted on resize
    - Window sizing and positioning
    """

    def __init__(self, main_window: QMainWindow) -> None:
        """Initialize with main window reference.

        Args:
            main_window: The QMainWindow to manage layout for
        """
        self.window = main_window
        self.central: QWidget | None = None
        self.stack: QStackedLayout | None = None
        self._overlays: list[QWidget] = []
        self._side_panel: QWidget | None = None

    def create_page(self, *sections: QWidget) -> QScrollArea:
        """Create the vertically scrolling page containing `sections`.

        Returns:
            Scroll area with the sections stacked top to bottom
        """
        area = QScrollArea()
        area.setWidgetResizable(True)
        content = QWidget()
        v = QVBoxLayout(content)
        v.setContentsMargins(0, 0, 0, 0)
        v.setSpacing(0)
        for section in sections:
            v.addWidget(section)
        area.setWidget(content)
        return area

    def setup_main_layout(self, status_page: QWidget, page: QWidget) -> QWidget:
        """Create the central widget switching between status page and page.

        Args:
            status_page: Widget shown while loading, empty or failed
            page: Scrollable browsing page

        Returns:
            Central widget configured with the layout
        """
        central = QWidget(self.window)
        self.stack = QStackedLayout(central)
        self.stack.addWidget(status_page)
        self.stack.addWidget(page)
        self.central = central
        return central

    def show_page(self, browsing: bool) -> None:
        if self.stack is not None:
            self.stack.setCurrentIndex(1 if browsing else 0)

    def add_overlay(self, overlay: QWidget) -> None:
        """Register a full-size overlay; later overlays stack above earlier ones."""
        overlay.setParent(self.central)
        overlay.hide()
        self._overlays.append(overlay)

    def set_side_panel(self, panel: QWidget) -> None:
        """Register a right-aligned panel (the nav menu)."""
        panel.setParent(self.central)
        panel.hide()
        self._side_panel = panel

    def fit_overlays(self) -> None:
        """Resize overlays to cover the central widget."""
        if self.central is None:
            return
        rect = self.central.rect()
        for overlay in self._overlays:
            overlay.setGeometry(rect)
        if self._side_panel is not None:
            width = min(NAV_MENU_WIDTH, rect.width())
            self._side_panel.setGeometry(rect.width() - width, 0, width, rect.height())

    def setup_initial_window_size(self) -> None:
        """Setup initial window size based on screen dimensions."""
        screen = QApplication.primaryScreen()
        if screen is not None:
            rect = screen.availableGeometry()
            width = int(rect.width() * WINDOW_SIZE_RATIO)
            height = int(rect.height() * WINDOW_SIZE_RATIO)
            self.window.resize(width, height)
