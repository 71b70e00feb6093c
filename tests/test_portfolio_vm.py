from __future__ import annotations

from conftest import FakeAnchor
import pytest

from core.errors import NetworkFailure, ParseFailure
from core.models import FilterType, PortfolioStats, ViewerFeatures, ViewState


class TestLoading:
    def test_initial_state_is_loading_with_one_request(self, make_vm, loader):
        vm = make_vm()
        assert vm.state is ViewState.LOADING
        assert vm.start_load() is True
        assert vm.start_load() is False
        assert len(loader.tokens) == 1

    def test_success_moves_to_browsing(self, make_vm, loader, sample_payload):
        vm = make_vm()
        states = []
        vm.stateChanged.connect(states.append)
        vm.start_load()
        vm.on_collections_loaded(loader.last_token, sample_payload)

        assert states == [ViewState.BROWSING]
        assert [p.display_id for p in vm.projects] == [1, 2, 3, 4]
        assert vm.hero_project in vm.projects
        assert list(vm.location_index) == ["Tokyo", "Paris", "Unknown"]
        assert vm.start_load() is False

    def test_empty_payload_moves_to_empty_without_hero(self, make_vm, loader):
        vm = make_vm()
        vm.start_load()
        vm.on_collections_loaded(loader.last_token, [])
        assert vm.state is ViewState.EMPTY
        assert vm.stats == PortfolioStats(0, 0, 0)
        assert vm.hero_project is None

    def test_failure_is_distinct_from_empty(self, make_vm, loader):
        vm = make_vm()
        vm.start_load()
        vm.on_collections_failed(loader.last_token, NetworkFailure("HTTP error 500", 500))
        assert vm.state is ViewState.FAILED
        assert isinstance(vm.last_error, NetworkFailure)
        assert vm.projects == ()

    def test_non_array_payload_is_parse_failure(self, make_vm, loader):
        vm = make_vm()
        vm.start_load()
        vm.on_collections_loaded(loader.last_token, {"not": "a list"})
        assert vm.state is ViewState.FAILED
        assert isinstance(vm.last_error, ParseFailure)

    def test_unknown_error_wrapped_as_network_failure(self, make_vm, loader):
        vm = make_vm()
        vm.start_load()
        vm.on_collections_failed(loader.last_token, RuntimeError("boom"))
        assert isinstance(vm.last_error, NetworkFailure)

    def test_retry_only_from_failed(self, make_vm, loader, sample_payload):
        vm = make_vm()
        assert vm.retry() is False
        vm.start_load()
        vm.on_collections_failed(loader.last_token, NetworkFailure("down"))

        assert vm.retry() is True
        assert vm.state is ViewState.LOADING
        assert vm.last_error is None
        assert len(loader.tokens) == 2

        vm.on_collections_loaded(loader.last_token, sample_payload)
        assert vm.state is ViewState.BROWSING

    def test_stale_result_is_ignored(self, make_vm, loader, sample_payload):
        vm = make_vm()
        vm.start_load()
        vm.on_collections_loaded("some-other-token", sample_payload)
        assert vm.state is ViewState.LOADING
        assert vm.is_loading

    def test_teardown_during_loading_discards_result(self, make_vm, loader, sample_payload):
        vm = make_vm()
        vm.start_load()
        token = loader.last_token
        vm.teardown()
        vm.on_collections_loaded(token, sample_payload)
        assert vm.state is ViewState.LOADING
        assert vm.projects == ()
        assert vm.start_load() is False

    def test_transitions_ignored_while_loading(self, make_vm, loader):
        vm = make_vm()
        vm.start_load()
        vm.toggle_nav_menu()
        vm.set_filter_type(FilterType.LOCATION)
        assert vm.show_nav_menu is False
        assert vm.filter_type is FilterType.ALL

    def test_hero_pick_is_deterministic_for_seed(self, make_vm, loader, sample_payload):
        picks = []
        for _ in range(2):
            vm = make_vm(seed=11)
            vm.start_load()
            vm.on_collections_loaded(loader.last_token, sample_payload)
            picks.append(vm.hero_project.id)
        assert picks[0] == picks[1]


class TestDetailAndOverlays:
    def test_open_detail_locks_scroll_and_closes_nav(self, browsing_vm, scroll_host):
        browsing_vm.set_nav_menu_visible(True)
        project = browsing_vm.projects[1]
        browsing_vm.open_detail(project)
        assert browsing_vm.selected_project is project
        assert browsing_vm.show_nav_menu is False
        assert browsing_vm.scroll_locked
        assert scroll_host.calls == [True]

    def test_opening_nav_menu_closes_detail(self, browsing_vm, scroll_host):
        browsing_vm.open_detail(browsing_vm.projects[0])
        browsing_vm.open_contact_sheet()
        browsing_vm.toggle_nav_menu()
        assert browsing_vm.show_nav_menu is True
        assert browsing_vm.selected_project is None
        assert browsing_vm.show_contact_sheet is False
        assert not browsing_vm.scroll_locked
        assert scroll_host.calls == [True, False]

    def test_close_detail_twice_releases_once(self, browsing_vm, scroll_host):
        browsing_vm.open_detail(browsing_vm.projects[0])
        browsing_vm.close_detail()
        browsing_vm.close_detail()
        assert not browsing_vm.scroll_locked
        assert scroll_host.acquires == 1
        assert scroll_host.releases == 1

    def test_repeated_open_does_not_accumulate_lock(self, browsing_vm, scroll_host):
        project = browsing_vm.projects[0]
        for _ in range(3):
            browsing_vm.open_detail(project)
        browsing_vm.open_detail(browsing_vm.projects[1])
        browsing_vm.close_detail()
        assert scroll_host.calls == [True, False]

    def test_open_detail_rejects_foreign_project(self, browsing_vm):
        from core.services.normalizer import normalize_entry

        browsing_vm.open_detail(normalize_entry({"id": "elsewhere"}, 99))
        assert browsing_vm.selected_project is None

    def test_contact_sheet_requires_detail(self, browsing_vm):
        browsing_vm.open_contact_sheet()
        assert browsing_vm.show_contact_sheet is False

    def test_contact_sheet_layers_over_detail(self, browsing_vm):
        project = browsing_vm.projects[0]
        browsing_vm.open_detail(project)
        browsing_vm.open_contact_sheet()
        assert browsing_vm.show_contact_sheet is True
        assert browsing_vm.selected_project is project

        browsing_vm.close_detail()
        assert browsing_vm.show_contact_sheet is False

    def test_contact_sheet_feature_flag(self, make_vm, loader, sample_payload):
        vm = make_vm(ViewerFeatures(contact_sheet=False))
        vm.start_load()
        vm.on_collections_loaded(loader.last_token, sample_payload)
        vm.open_detail(vm.projects[0])
        vm.open_contact_sheet()
        assert vm.show_contact_sheet is False

    def test_select_image_in_contact_sheet(self, browsing_vm, anchors, scheduler):
        project = browsing_vm.projects[0]
        browsing_vm.open_detail(project)
        browsing_vm.open_contact_sheet()
        anchor = FakeAnchor()
        anchors.register_image_anchor(2, anchor)

        assert browsing_vm.select_image_in_contact_sheet(2) is True
        assert browsing_vm.show_contact_sheet is False
        assert browsing_vm.selected_project is project

        scheduler.run_all()
        assert anchor.scrolled == 1
        assert anchor.emphasis == [True, False]

    def test_select_unregistered_image_is_recorded_noop(self, browsing_vm, scheduler):
        browsing_vm.open_detail(browsing_vm.projects[0])
        browsing_vm.open_contact_sheet()
        assert browsing_vm.select_image_in_contact_sheet(2) is True
        scheduler.run_all()
        assert browsing_vm.show_contact_sheet is False

    def test_signals_announce_changes(self, browsing_vm):
        seen = []
        browsing_vm.selectionChanged.connect(lambda p: seen.append(("sel", p)))
        browsing_vm.contactSheetChanged.connect(lambda v: seen.append(("sheet", v)))
        project = browsing_vm.projects[0]
        browsing_vm.open_detail(project)
        browsing_vm.open_contact_sheet()
        browsing_vm.close_detail()
        assert seen == [("sel", project), ("sheet", True), ("sheet", False), ("sel", None)]

    def test_teardown_releases_lock(self, browsing_vm, scroll_host):
        browsing_vm.open_detail(browsing_vm.projects[0])
        browsing_vm.teardown()
        assert not browsing_vm.scroll_locked
        assert scroll_host.calls == [True, False]


class TestNavigation:
    def test_filter_type_switch_and_sections(self, browsing_vm):
        changes = []
        browsing_vm.filterTypeChanged.connect(changes.append)
        assert browsing_vm.nav_sections()[0][0] is None

        browsing_vm.set_filter_type("location")
        assert browsing_vm.filter_type is FilterType.LOCATION
        assert [heading for heading, _ in browsing_vm.nav_sections()] == [
            "Tokyo",
            "Paris",
            "Unknown",
        ]
        browsing_vm.set_filter_type(FilterType.LOCATION)
        assert changes == [FilterType.LOCATION]

    def test_unknown_filter_type_ignored(self, browsing_vm):
        browsing_vm.set_filter_type("by-year")
        assert browsing_vm.filter_type is FilterType.ALL

    def test_location_grouping_flag(self, make_vm, loader, sample_payload):
        vm = make_vm(ViewerFeatures(location_grouping=False))
        vm.start_load()
        vm.on_collections_loaded(loader.last_token, sample_payload)
        vm.set_filter_type(FilterType.LOCATION)
        assert vm.filter_type is FilterType.ALL

    def test_filter_is_orthogonal_to_selection(self, browsing_vm):
        project = browsing_vm.projects[0]
        browsing_vm.open_detail(project)
        browsing_vm.set_filter_type(FilterType.LOCATION)
        assert browsing_vm.selected_project is project

    @pytest.mark.parametrize("project_id", ["tokyo-nights", "studio"])
    def test_project_by_id(self, browsing_vm, project_id):
        assert browsing_vm.project_by_id(project_id).id == project_id
        assert browsing_vm.project_by_id("nope") is None
