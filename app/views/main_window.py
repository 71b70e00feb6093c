"""MainWindow composing the portfolio page, overlays and menus.

The window is a passive renderer: it reads `PortfolioVM` state, forwards user
actions to its transition methods and reacts to its signals.
"""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QEvent
from PySide6.QtWidgets import QMainWindow
from loguru import logger

from app.views.anchors import ScrollAreaViewport
from app.views.components.menu_controller import MenuController
from app.views.constants import BASE_STYLESHEET, WINDOW_TITLE
from app.views.image_binder import ImageBinder
from app.views.layout.layout_manager import LayoutManager
from app.views.widgets.contact_sheet import ContactSheet
from app.views.widgets.detail_overlay import DetailOverlay
from app.views.widgets.hero_section import HeroSection
from app.views.widgets.nav_menu import NavMenu
from app.views.widgets.project_list import ProjectList
from app.views.widgets.status_page import StatusPage
from app.viewmodels.portfolio_vm import PortfolioVM
from app.viewmodels.scroll_anchors import ScrollAnchorController
from core.models import FilterType, Project, ViewState
from infrastructure.logging import open_latest_log, open_log_directory
from infrastructure.settings import ViewerConfig


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        vm: PortfolioVM,
        binder: ImageBinder,
        anchors: ScrollAnchorController,
        config: ViewerConfig | None = None,
    ) -> None:
        """Initialize MainWindow with the view-model and shared services.

        Args:
            vm: View-model owning all view state
            binder: Image binder used by every image-bearing widget
            anchors: Scroll anchor controller shared with the view-model
            config: Viewer configuration (scroll timings, thumbnail size)
        """
        super().__init__()
        self._vm = vm
        self._binder = binder
        self._anchors = anchors
        self._config = config or ViewerConfig()
        self._parallax_connected = False

        self._setup_components()
        self._setup_ui()
        self._connect_signals()
        self._on_state_changed(self._vm.state)

    @property
    def page_viewport(self) -> ScrollAreaViewport:
        """Viewport of the main page (also the scroll-lock host)."""
        return self._page_viewport

    def _setup_components(self) -> None:
        """Create all child widgets and controllers."""
        self.menu_controller = MenuController(self)
        self.layout_manager = LayoutManager(self)

        self.status_page = StatusPage(on_retry=self._vm.retry)
        self.hero = HeroSection(self._binder)

        # Page is created before the list so rows can anchor into it
        self.page = self.layout_manager.create_page(self.hero)
        self._page_viewport = ScrollAreaViewport(self.page, self._config.smooth_duration_ms)
        self.project_list = ProjectList(
            self._binder, self._anchors, self._page_viewport, on_open=self._vm.open_detail
        )
        self.page.widget().layout().addWidget(self.project_list)

        self.nav_menu = NavMenu(self._vm)
        self.detail = DetailOverlay(
            self._vm, self._binder, self._anchors, self._config.smooth_duration_ms
        )
        self.contact_sheet = ContactSheet(self._vm, self._binder, self._config.thumb_side)

    def _setup_ui(self) -> None:
        """Setup the main UI components and layout."""
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet(BASE_STYLESHEET)

        central = self.layout_manager.setup_main_layout(self.status_page, self.page)
        self.setCentralWidget(central)
        self.layout_manager.add_overlay(self.detail)
        self.layout_manager.add_overlay(self.contact_sheet)
        self.layout_manager.set_side_panel(self.nav_menu)
        central.installEventFilter(self)

        self.menu_controller.setup_menus(self._vm.features.location_grouping)
        self.layout_manager.setup_initial_window_size()

    def _connect_signals(self) -> None:
        """Connect all signal/slot relationships."""
        handlers = {
            "retry": self._vm.retry,
            "exit": self.close,
            "toggle_index": self._vm.toggle_nav_menu,
            "filter_all": lambda: self._vm.set_filter_type(FilterType.ALL),
            "filter_location": lambda: self._vm.set_filter_type(FilterType.LOCATION),
            "open_latest_log": open_latest_log,
            "open_log_directory": open_log_directory,
        }
        self.menu_controller.connect_actions(handlers)
        self.hero.index_button.clicked.connect(self._vm.toggle_nav_menu)

        self._vm.stateChanged.connect(self._on_state_changed)
        self._vm.selectionChanged.connect(self._on_selection_changed)
        self._vm.contactSheetChanged.connect(self._on_contact_sheet_changed)
        self._vm.navMenuChanged.connect(self._on_nav_menu_changed)
        self._vm.filterTypeChanged.connect(self._on_filter_type_changed)

        if self._vm.features.parallax_hero:
            self.page.verticalScrollBar().valueChanged.connect(self.hero.on_page_scrolled)
            self._parallax_connected = True

    # View-model slots

    def _on_state_changed(self, state: ViewState) -> None:
        browsing = state is ViewState.BROWSING
        self.menu_controller.set_browsing_enabled(browsing)
        self.menu_controller.enable_action("retry", state is ViewState.FAILED)
        if browsing:
            self.hero.set_content(self._vm.hero_project, self._vm.stats)
            self.project_list.set_projects(self._vm.projects)
            self.nav_menu.refresh()
            self.statusBar().showMessage(f"{len(self._vm.projects)} projects", 3000)
        else:
            self.status_page.show_state(state, self._vm.last_error)
        self.layout_manager.show_page(browsing)

    def _on_selection_changed(self, project: Project | None) -> None:
        if project is None:
            self.detail.hide()
            self.detail.clear()
            return
        self.detail.show_project(project)
        self.detail.show()
        self.detail.raise_()

    def _on_contact_sheet_changed(self, visible: bool) -> None:
        project = self._vm.selected_project
        if visible and project is not None:
            self.contact_sheet.show_project(project)
            self.contact_sheet.show()
            self.contact_sheet.raise_()
        else:
            self.contact_sheet.hide()
        self.detail.set_dimmed(visible)

    def _on_nav_menu_changed(self, visible: bool) -> None:
        if visible:
            self.nav_menu.refresh()
            self.nav_menu.show()
            self.nav_menu.raise_()
        else:
            self.nav_menu.hide()

    def _on_filter_type_changed(self, filter_type: FilterType) -> None:
        name = "filter_location" if filter_type is FilterType.LOCATION else "filter_all"
        action = self.menu_controller.get_action(name)
        if action is not None:
            action.setChecked(True)

    # Qt overrides

    def eventFilter(self, obj, event) -> bool:  # noqa: N802 - Qt override
        if obj is self.centralWidget() and event.type() == QEvent.Resize:
            self.layout_manager.fit_overlays()
        return super().eventFilter(obj, event)

    def closeEvent(self, event: Any) -> None:  # noqa: N802 - Qt override
        """Detach scroll observers and cancel pending work before closing."""
        if self._parallax_connected:
            try:
                self.page.verticalScrollBar().valueChanged.disconnect(self.hero.on_page_scrolled)
            except (RuntimeError, TypeError) as ex:
                logger.debug("Parallax observer already detached: {}", ex)
            self._parallax_connected = False
        self._vm.teardown()
        logger.info("Main window closed")
        event.accept()
