"""ViewModel orchestrating portfolio loading, selection and overlays."""

from __future__ import annotations

import random
from typing import Any
import uuid

from PySide6.QtCore import QObject, Signal
from loguru import logger

from app.viewmodels.scroll_anchors import ScrollAnchorController
from app.viewmodels.scroll_lock import ScrollLock
from core.errors import NetworkFailure, ParseFailure, PortfolioLoadError
from core.models import FilterType, PortfolioStats, Project, ViewerFeatures, ViewState
from core.services.hero import pick_hero
from core.services.interfaces import CollectionsLoader
from core.services.location_index import build_location_index
from core.services.normalizer import normalize_collections
from core.services.stats_service import StatsCache


class PortfolioVM(QObject):
    """Main application view-model.

    Owns the load status, the normalized project set, the selected project and
    the overlay flags. Views only read these properties and call the
    transition methods; every change is announced through a Qt signal.

    The navigation menu and the detail overlay are mutually exclusive: opening
    one closes the other. The contact sheet only exists on top of an open
    detail overlay.
    """

    stateChanged = Signal(object)  # ViewState
    selectionChanged = Signal(object)  # Project | None
    navMenuChanged = Signal(bool)
    filterTypeChanged = Signal(object)  # FilterType
    contactSheetChanged = Signal(bool)

    def __init__(
        self,
        loader: CollectionsLoader,
        anchors: ScrollAnchorController | None = None,
        scroll_lock: ScrollLock | None = None,
        features: ViewerFeatures | None = None,
        rng: random.Random | None = None,
        parent: QObject | None = None,
    ) -> None:
        """Create a PortfolioVM.

        Args:
            loader: Starts the collections fetch; results come back through
                `on_collections_loaded` / `on_collections_failed`.
            anchors: Scroll anchor controller used for deep links.
            scroll_lock: Page scroll lock held while detail is open.
            features: Optional feature flags (defaults enable everything).
            rng: Randomness source for the hero pick.
            parent: Optional Qt parent.
        """
        super().__init__(parent)
        self._loader = loader
        self._anchors = anchors
        self._scroll_lock = scroll_lock or ScrollLock()
        self._features = features or ViewerFeatures()
        self._rng = rng or random.Random()

        self._state = ViewState.LOADING
        self._projects: tuple[Project, ...] = ()
        self._location_index: dict[str, list[Project]] = {}
        self._hero: Project | None = None
        self._stats_cache = StatsCache()
        self._last_error: PortfolioLoadError | None = None
        self._pending_token: str | None = None
        self._torn_down = False

        self._selected: Project | None = None
        self._show_nav_menu = False
        self._filter_type = FilterType.ALL
        self._show_contact_sheet = False

        if self._anchors is not None:
            self._anchors.attach(self)

    # Read-only state
    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def projects(self) -> tuple[Project, ...]:
        return self._projects

    @property
    def selected_project(self) -> Project | None:
        return self._selected

    @property
    def show_nav_menu(self) -> bool:
        return self._show_nav_menu

    @property
    def filter_type(self) -> FilterType:
        return self._filter_type

    @property
    def show_contact_sheet(self) -> bool:
        return self._show_contact_sheet

    @property
    def features(self) -> ViewerFeatures:
        return self._features

    @property
    def stats(self) -> PortfolioStats:
        """Portfolio counters, recomputed only when the project set changes."""
        return self._stats_cache.get(self._projects)

    @property
    def location_index(self) -> dict[str, list[Project]]:
        return self._location_index

    @property
    def hero_project(self) -> Project | None:
        """Featured project for the hero section; None when nothing loaded."""
        return self._hero

    @property
    def last_error(self) -> PortfolioLoadError | None:
        return self._last_error

    @property
    def is_loading(self) -> bool:
        return self._pending_token is not None

    @property
    def scroll_locked(self) -> bool:
        return self._scroll_lock.held

    def project_by_id(self, project_id: Any) -> Project | None:
        for project in self._projects:
            if project.id == project_id:
                return project
        return None

    def nav_sections(self) -> list[tuple[str | None, list[Project]]]:
        """Sections for the navigation menu under the current filter type."""
        if self._filter_type is FilterType.LOCATION:
            return [(key, list(group)) for key, group in self._location_index.items()]
        return [(None, list(self._projects))]

    # Loading
    def start_load(self) -> bool:
        """Issue the collections request. Returns False if nothing was started."""
        if self._torn_down:
            logger.debug("start_load ignored after teardown")
            return False
        if self._pending_token is not None:
            logger.debug("start_load ignored: a request is already in flight")
            return False
        if self._state is not ViewState.LOADING:
            logger.debug("start_load ignored in state {}", self._state.value)
            return False

        token = uuid.uuid4().hex
        self._pending_token = token
        logger.info("Loading collections (token={})", token)
        self._loader.request(token)
        return True

    def retry(self) -> bool:
        """Re-attempt the load after a failure."""
        if self._state is not ViewState.FAILED:
            logger.debug("retry ignored in state {}", self._state.value)
            return False
        self._last_error = None
        self._set_state(ViewState.LOADING)
        return self.start_load()

    def on_collections_loaded(self, token: str, payload: Any) -> None:
        """Apply a successful fetch result identified by `token`."""
        if not self._accept_result(token):
            return
        if not isinstance(payload, list):
            self._fail(ParseFailure(f"Expected a JSON array, got {type(payload).__name__}"))
            return

        projects = normalize_collections(payload)
        self._projects = projects
        self._location_index = build_location_index(projects)
        self._hero = pick_hero(projects, self._rng)
        self._last_error = None
        logger.info("Loaded {} projects", len(projects))
        self._set_state(ViewState.BROWSING if projects else ViewState.EMPTY)

    def on_collections_failed(self, token: str, error: Any) -> None:
        """Record a failed fetch identified by `token`."""
        if not self._accept_result(token):
            return
        if not isinstance(error, PortfolioLoadError):
            error = NetworkFailure(str(error))
        self._fail(error)

    def _accept_result(self, token: str) -> bool:
        if self._pending_token is None or token != self._pending_token:
            logger.info("Ignoring stale collections result (token={})", token)
            return False
        self._pending_token = None
        return True

    def _fail(self, error: PortfolioLoadError) -> None:
        logger.error("Collections load failed ({}): {}", error.kind, error)
        self._last_error = error
        self._set_state(ViewState.FAILED)

    # Transitions
    def open_detail(self, project: Project) -> None:
        """Show the detail overlay for `project` and lock page scrolling."""
        if not self._interactive("open_detail"):
            return
        if project not in self._projects:
            logger.warning("open_detail ignored: project {!r} is not loaded", project.id)
            return

        changed = self._selected is not project
        self._selected = project
        self._set_nav_menu(False)
        if changed:
            self._set_contact_sheet(False)
            if self._anchors is not None:
                self._anchors.cancel_pending()
                self._anchors.clear_image_anchors()
            self.selectionChanged.emit(project)
        self._reconcile()

    def close_detail(self) -> None:
        """Hide the detail overlay (and the contact sheet above it)."""
        self._set_contact_sheet(False)
        if self._selected is not None:
            self._selected = None
            if self._anchors is not None:
                self._anchors.cancel_pending()
                self._anchors.clear_image_anchors()
            self.selectionChanged.emit(None)
        self._reconcile()

    def toggle_nav_menu(self) -> None:
        self.set_nav_menu_visible(not self._show_nav_menu)

    def set_nav_menu_visible(self, visible: bool) -> None:
        """Show or hide the navigation menu; showing it closes the detail overlay."""
        if visible:
            if not self._interactive("show_nav_menu"):
                return
            if self._selected is not None:
                self.close_detail()
        self._set_nav_menu(visible)
        self._reconcile()

    def set_filter_type(self, filter_type: FilterType | str) -> None:
        """Switch the navigation menu between all projects and by-location."""
        if not self._interactive("set_filter_type"):
            return
        try:
            value = FilterType(filter_type)
        except ValueError:
            logger.warning("Unknown filter type: {!r}", filter_type)
            return
        if value is FilterType.LOCATION and not self._features.location_grouping:
            logger.debug("Location grouping disabled; keeping filter {}", self._filter_type.value)
            return
        if value is not self._filter_type:
            self._filter_type = value
            self.filterTypeChanged.emit(value)

    def open_contact_sheet(self) -> None:
        """Layer the contact sheet above the open detail overlay."""
        if not self._interactive("open_contact_sheet"):
            return
        if not self._features.contact_sheet:
            logger.debug("Contact sheet disabled")
            return
        if self._selected is None:
            logger.debug("open_contact_sheet ignored: no project open")
            return
        self._set_contact_sheet(True)
        self._reconcile()

    def close_contact_sheet(self) -> None:
        self._set_contact_sheet(False)
        self._reconcile()

    def select_image_in_contact_sheet(self, index: int) -> bool:
        """Close the contact sheet and scroll the detail overlay to image `index`."""
        if self._selected is None:
            return False
        self.close_contact_sheet()
        if self._anchors is None:
            return False
        return self._anchors.scroll_to_image(index)

    def navigate_to_project(self, project_id: Any) -> bool:
        """Scroll the project list to `project_id` (deep link from the nav menu)."""
        if not self._interactive("navigate_to_project") or self._anchors is None:
            return False
        return self._anchors.scroll_to_project(project_id)

    def teardown(self) -> None:
        """Cancel the in-flight load, pending timers and release the scroll lock."""
        self._torn_down = True
        if self._pending_token is not None:
            logger.info("Cancelling in-flight collections request")
            self._pending_token = None
        if self._anchors is not None:
            self._anchors.cancel_pending()
        self._selected = None
        self._show_contact_sheet = False
        self._scroll_lock.release()

    # Internal helpers
    def _interactive(self, action: str) -> bool:
        if self._state is not ViewState.BROWSING or self._torn_down:
            logger.debug("{} ignored in state {}", action, self._state.value)
            return False
        return True

    def _set_state(self, state: ViewState) -> None:
        if state is self._state:
            return
        logger.info("View state {} -> {}", self._state.value, state.value)
        self._state = state
        self.stateChanged.emit(state)

    def _set_nav_menu(self, visible: bool) -> None:
        if visible != self._show_nav_menu:
            self._show_nav_menu = visible
            self.navMenuChanged.emit(visible)

    def _set_contact_sheet(self, visible: bool) -> None:
        if visible != self._show_contact_sheet:
            self._show_contact_sheet = visible
            self.contactSheetChanged.emit(visible)

    def _reconcile(self) -> None:
        if self._selected is None and self._show_contact_sheet:
            self._set_contact_sheet(False)
        self._scroll_lock.reconcile(self._selected is not None)

