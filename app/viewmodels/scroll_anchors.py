"""ScrollAnchorController: programmatic scroll-to and transient highlight.

Anchors are registered by the views as rows and images are rendered. The
controller never raises for an unknown anchor; scrolling to something that is
not (yet) on screen is a no-op.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from loguru import logger

from core.services.interfaces import ScrollAnchor, ScrollViewport, Scheduler, TimerHandle

DEFAULT_HEADER_CLEARANCE = 100
DEFAULT_SETTLE_DELAY_MS = 400
DEFAULT_HIGHLIGHT_MS = 1200


class ScrollAnchorController:
    """Maps project ids and image indexes to rendered positions.

    The controller only reads view state and requests transitions through the
    attached view-model (`close_contact_sheet`, `set_nav_menu_visible`).
    """

    def __init__(
        self,
        viewport: ScrollViewport | None,
        scheduler: Scheduler,
        header_clearance: int = DEFAULT_HEADER_CLEARANCE,
        settle_delay_ms: int = DEFAULT_SETTLE_DELAY_MS,
        highlight_ms: int = DEFAULT_HIGHLIGHT_MS,
    ) -> None:
        self._viewport = viewport
        self._scheduler = scheduler
        self.header_clearance = header_clearance
        self.settle_delay_ms = settle_delay_ms
        self.highlight_ms = highlight_ms
        self._vm: Any = None
        self._project_anchors: dict[Any, ScrollAnchor] = {}
        self._image_anchors: dict[int, ScrollAnchor] = {}
        self._pending: list[TimerHandle] = []

    # Wiring
    def attach(self, vm: Any) -> None:
        """Bind the view-model whose state gates image scrolling."""
        self._vm = vm

    def set_viewport(self, viewport: ScrollViewport) -> None:
        self._viewport = viewport

    # Registration
    def register_project_anchor(self, project_id: Any, anchor: ScrollAnchor) -> None:
        try:
            self._project_anchors[project_id] = anchor
        except TypeError:
            logger.warning("Cannot anchor project with unhashable id {!r}", project_id)

    def unregister_project_anchor(self, project_id: Any) -> None:
        self._project_anchors.pop(project_id, None)

    def clear_project_anchors(self) -> None:
        self._project_anchors.clear()

    def register_image_anchor(self, index: int, anchor: ScrollAnchor) -> None:
        self._image_anchors[index] = anchor

    def clear_image_anchors(self) -> None:
        """Forget all image anchors (detail overlay closed or replaced)."""
        self._image_anchors.clear()

    def has_project_anchor(self, project_id: Any) -> bool:
        return project_id in self._project_anchors

    def has_image_anchor(self, index: int) -> bool:
        return index in self._image_anchors

    # Operations
    def scroll_to_project(self, project_id: Any) -> bool:
        """Scroll the page to the row of `project_id` and close the nav menu.

        Returns:
            True if a scroll was performed, False if the anchor is unknown.
        """
        try:
            anchor = self._project_anchors.get(project_id)
        except TypeError:
            anchor = None
        if anchor is None or self._viewport is None:
            logger.debug("No anchor registered for project {}", project_id)
            return False
        target = max(0, int(anchor.top()) - int(self.header_clearance))
        self._viewport.smooth_scroll_to(target)
        if self._vm is not None:
            self._vm.set_nav_menu_visible(False)
        return True

    def scroll_to_image(self, index: int) -> bool:
        """Close the contact sheet, wait for it to settle, then show image `index`.

        Returns:
            True if the scroll was scheduled, False when detail is closed or
            `index` is out of range.
        """
        project = getattr(self._vm, "selected_project", None)
        if project is None:
            logger.debug("scroll_to_image({}) ignored: no project open", index)
            return False
        if not 0 <= index < len(project.images):
            logger.debug("scroll_to_image({}) ignored: out of range", index)
            return False

        if getattr(self._vm, "show_contact_sheet", False):
            self._vm.close_contact_sheet()

        project_id = project.id

        def _after_settle() -> None:
            current = getattr(self._vm, "selected_project", None)
            if current is None or current.id != project_id:
                logger.debug("Detail changed before image {} settled; skipping", index)
                return
            anchor = self._image_anchors.get(index)
            if anchor is None:
                logger.debug("No anchor registered for image {}", index)
                return
            anchor.scroll_into_view()
            anchor.set_emphasis(True)
            self._schedule(self.highlight_ms, lambda: anchor.set_emphasis(False))

        self._schedule(self.settle_delay_ms, _after_settle)
        return True

    def cancel_pending(self) -> None:
        """Cancel scheduled settle/highlight callbacks."""
        for handle in self._pending:
            handle.cancel()
        self._pending.clear()

    def _schedule(self, delay_ms: int, callback: Callable[[], None]) -> None:
        state: dict[str, Any] = {"fired": False, "handle": None}

        def _run() -> None:
            state["fired"] = True
            if state["handle"] in self._pending:
                self._pending.remove(state["handle"])
            callback()

        handle = self._scheduler.schedule(delay_ms, _run)
        # Schedulers may run the callback synchronously (e.g. zero delay in tests)
        if not state["fired"]:
            state["handle"] = handle
            self._pending.append(handle)
