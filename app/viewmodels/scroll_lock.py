"""Scoped page-scroll lock held while the detail overlay is open."""

from __future__ import annotations

from loguru import logger

from core.services.interfaces import ScrollLockHost


class ScrollLock:
    """Reconciles the host's scroll-locked flag with a desired state.

    The host is only touched when the desired state differs from the current
    one, so any number of repeated opens or closes results in at most one
    acquire or release.
    """

    def __init__(self, host: ScrollLockHost | None = None) -> None:
        self._host = host
        self._held = False

    @property
    def held(self) -> bool:
        """True while the host's page scrolling is suspended by this lock."""
        return self._held

    def attach(self, host: ScrollLockHost) -> None:
        """Bind to `host`, applying the current state to it."""
        self._host = host
        if self._held:
            host.set_scroll_locked(True)

    def reconcile(self, should_hold: bool) -> None:
        """Acquire or release so that `held == should_hold`."""
        if should_hold == self._held:
            return
        self._held = should_hold
        logger.debug("Scroll lock {}", "acquired" if should_hold else "released")
        if self._host is not None:
            self._host.set_scroll_locked(should_hold)

    def release(self) -> None:
        self.reconcile(False)
