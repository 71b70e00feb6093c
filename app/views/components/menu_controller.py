"""MenuController: Manages menu creation and action connections."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtGui import QAction, QActionGroup
from PySide6.QtWidgets import QMainWindow, QMenuBar


class MenuController:
    """Manages main window menu creation and action connections.

    This class encapsulates all menu-related functionality including:
    - Menu structure creation
    - Action-to-handler connection management
    - Enabling browsing-only actions once projects are loaded
    """

    # Actions that only make sense while browsing a loaded portfolio
    BROWSING_ACTIONS = ("toggle_index", "filter_all", "filter_location")

    def __init__(self, main_window: QMainWindow) -> None:
        """Initialize with main window reference.

        Args:
            main_window: The QMainWindow to create menus for
        """
        self.window = main_window
        self.actions: dict[str, QAction] = {}

    def setup_menus(self, location_grouping: bool = True) -> dict[str, QAction]:
        """Create all menus and return action references.

        Args:
            location_grouping: Whether to offer the by-location filter

        Returns:
            Dictionary mapping action names to QAction instances
        """
        menubar = QMenuBar(self.window)

        # File Menu
        file_menu = menubar.addMenu("File")
        self.actions["retry"] = file_menu.addAction("Retry Loading")
        file_menu.addSeparator()
        self.actions["exit"] = file_menu.addAction("Exit")

        # View Menu
        view_menu = menubar.addMenu("View")
        self.actions["toggle_index"] = view_menu.addAction("Index")
        self.actions["toggle_index"].setShortcut("Ctrl+I")
        view_menu.addSeparator()
        filters = QActionGroup(self.window)
        self.actions["filter_all"] = view_menu.addAction("All Projects")
        self.actions["filter_location"] = view_menu.addAction("By Location")
        for name in ("filter_all", "filter_location"):
            self.actions[name].setCheckable(True)
            filters.addAction(self.actions[name])
        self.actions["filter_all"].setChecked(True)
        self.actions["filter_location"].setVisible(location_grouping)

        # Log Menu
        log_menu = menubar.addMenu("Log")
        self.actions["open_latest_log"] = log_menu.addAction("Open Latest Log")
        log_menu.addSeparator()
        self.actions["open_log_directory"] = log_menu.addAction("Open Log Directory")

        self.window.setMenuBar(menubar)
        return self.actions

    def connect_actions(self, handlers: dict[str, Callable]) -> None:
        """Connect menu actions to their handler methods.

        Args:
            handlers: Dictionary mapping action names to handler callables
        """
        for name, action in self.actions.items():
            if name in handlers:
                action.triggered.connect(handlers[name])

        if "exit" not in handlers:
            # Default exit behavior
            self.actions["exit"].triggered.connect(self.window.close)

    def get_action(self, name: str) -> QAction | None:
        """Get a specific action by name."""
        return self.actions.get(name)

    def enable_action(self, name: str, enabled: bool = True) -> None:
        """Enable or disable a specific action.

        Args:
            name: Action name
            enabled: Whether to enable the action
        """
        action = self.actions.get(name)
        if action:
            action.setEnabled(enabled)

    def set_browsing_enabled(self, enabled: bool) -> None:
        """Enable browsing-only actions (disabled while loading or on failure)."""
        for name in self.BROWSING_ACTIONS:
            self.enable_action(name, enabled)
