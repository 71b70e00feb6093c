"""Navigation menu listing projects, flat or grouped by location."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup,
    QFrame,
    QHBoxLayout,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from app.views.constants import ALL_FILTER_TEXT, CLOSE_TEXT, LOCATION_FILTER_TEXT, NAV_MENU_WIDTH
from core.models import FilterType
from core.services.normalizer import format_index

PROJECT_ID_ROLE: int = Qt.UserRole


class NavMenu(QFrame):
    """Side panel driven by `PortfolioVM`; clicking an entry deep-links to its row."""

    def __init__(self, vm, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._vm = vm
        self.setFixedWidth(NAV_MENU_WIDTH)
        self.setObjectName("navMenu")
        self.setStyleSheet("#navMenu { border-left: 1px solid rgba(255,255,255,0.15); }")

        root = QVBoxLayout(self)
        root.setContentsMargins(20, 30, 20, 30)

        top = QHBoxLayout()
        self.all_button = QPushButton(ALL_FILTER_TEXT)
        self.location_button = QPushButton(LOCATION_FILTER_TEXT)
        self._filters = QButtonGroup(self)
        for button in (self.all_button, self.location_button):
            button.setCheckable(True)
            self._filters.addButton(button)
            top.addWidget(button)
        self.location_button.setVisible(vm.features.location_grouping)
        top.addStretch(1)
        close = QPushButton(CLOSE_TEXT)
        close.clicked.connect(lambda: self._vm.set_nav_menu_visible(False))
        top.addWidget(close)
        root.addLayout(top)

        self.list = QListWidget()
        self.list.setFrameShape(QFrame.NoFrame)
        self.list.itemClicked.connect(self._on_item_clicked)
        root.addWidget(self.list, 1)

        self.all_button.clicked.connect(lambda: self._vm.set_filter_type(FilterType.ALL))
        self.location_button.clicked.connect(lambda: self._vm.set_filter_type(FilterType.LOCATION))
        vm.filterTypeChanged.connect(lambda *_: self.refresh())

    def refresh(self) -> None:
        """Rebuild entries from the view-model's current sections."""
        self.all_button.setChecked(self._vm.filter_type is FilterType.ALL)
        self.location_button.setChecked(self._vm.filter_type is FilterType.LOCATION)
        self.list.clear()
        for heading, projects in self._vm.nav_sections():
            if heading is not None:
                header = QListWidgetItem(f"{heading.upper()}  ({len(projects)})")
                header.setFlags(Qt.NoItemFlags)
                self.list.addItem(header)
            for project in projects:
                item = QListWidgetItem(f"{format_index(project.display_id)}  {project.title}")
                item.setData(PROJECT_ID_ROLE, project.id)
                self.list.addItem(item)

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        project_id = item.data(PROJECT_ID_ROLE)
        if project_id is not None:
            self._vm.navigate_to_project(project_id)
