from __future__ import annotations

from conftest import FakeAnchor


def test_scroll_to_project_applies_header_clearance(browsing_vm, anchors, viewport):
    anchors.register_project_anchor("paris-rain", FakeAnchor(top=900))
    browsing_vm.set_nav_menu_visible(True)

    assert browsing_vm.navigate_to_project("paris-rain") is True
    assert viewport.offsets == [800]
    assert browsing_vm.show_nav_menu is False


def test_scroll_to_project_clamps_at_top(browsing_vm, anchors, viewport):
    anchors.register_project_anchor("tokyo-nights", FakeAnchor(top=40))
    browsing_vm.navigate_to_project("tokyo-nights")
    assert viewport.offsets == [0]


def test_unregistered_project_is_a_silent_noop(browsing_vm, viewport):
    browsing_vm.set_nav_menu_visible(True)
    assert browsing_vm.navigate_to_project("not-rendered") is False
    assert viewport.offsets == []
    # Nothing scrolled, so the menu stays open
    assert browsing_vm.show_nav_menu is True


def test_scroll_to_image_waits_then_emphasises(browsing_vm, anchors, scheduler):
    project = browsing_vm.projects[0]
    browsing_vm.open_detail(project)
    anchor = FakeAnchor()
    anchors.register_image_anchor(1, anchor)

    assert anchors.scroll_to_image(1) is True
    assert scheduler.delays == [400]
    assert anchor.scrolled == 0

    assert scheduler.run_next() == 400
    assert anchor.scrolled == 1
    assert anchor.emphasis == [True]
    assert scheduler.delays == [1200]

    scheduler.run_next()
    assert anchor.emphasis == [True, False]


def test_scroll_to_image_out_of_range_or_closed_is_noop(browsing_vm, anchors, scheduler):
    assert anchors.scroll_to_image(0) is False  # no detail open
    browsing_vm.open_detail(browsing_vm.projects[0])
    assert anchors.scroll_to_image(-1) is False
    assert anchors.scroll_to_image(len(browsing_vm.projects[0].images)) is False
    assert scheduler.pending == []


def test_missing_image_anchor_is_noop_after_delay(browsing_vm, anchors, scheduler):
    browsing_vm.open_detail(browsing_vm.projects[0])
    assert anchors.scroll_to_image(2) is True
    scheduler.run_all()
    assert scheduler.pending == []


def test_detail_closed_during_settle_skips_scroll(browsing_vm, anchors, scheduler):
    browsing_vm.open_detail(browsing_vm.projects[0])
    anchor = FakeAnchor()
    anchors.register_image_anchor(0, anchor)
    anchors.scroll_to_image(0)
    browsing_vm.close_detail()
    scheduler.run_all()
    assert anchor.scrolled == 0
    assert anchor.emphasis == []


def test_cancel_pending_stops_highlight_revert(browsing_vm, anchors, scheduler):
    browsing_vm.open_detail(browsing_vm.projects[0])
    anchor = FakeAnchor()
    anchors.register_image_anchor(0, anchor)
    anchors.scroll_to_image(0)
    scheduler.run_next()
    anchors.cancel_pending()
    scheduler.run_all()
    assert anchor.emphasis == [True]


def test_zero_delay_scheduler_running_inline(browsing_vm, viewport):
    from app.viewmodels.scroll_anchors import ScrollAnchorController

    class InlineScheduler:
        def schedule(self, delay_ms, callback):
            callback()
            return None

    inline = ScrollAnchorController(viewport, InlineScheduler(), settle_delay_ms=0)
    inline.attach(browsing_vm)
    browsing_vm.open_detail(browsing_vm.projects[0])
    anchor = FakeAnchor()
    inline.register_image_anchor(0, anchor)
    assert inline.scroll_to_image(0) is True
    assert anchor.emphasis == [True, False]
    inline.cancel_pending()


def test_unhashable_project_id_is_a_silent_noop(browsing_vm, anchors, viewport):
    anchors.register_project_anchor(["a", 1], FakeAnchor(top=300))
    assert anchors.scroll_to_project({"k": 1}) is False
    assert viewport.offsets == []
