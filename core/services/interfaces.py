"""Core service interfaces shared by the view-models and the views.

These protocols keep the view-models free of Qt types so that they can be
driven by fakes in tests and by widget adapters in the application.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class CollectionsLoader(Protocol):
    """Starts the one-shot collections fetch.

    The result must be delivered back to the view-model through
    `on_collections_loaded(token, payload)` or `on_collections_failed(token, error)`.
    """

    def request(self, token: str) -> None:
        """Begin fetching; `token` identifies this request."""
        raise NotImplementedError


class ScrollLockHost(Protocol):
    """Host view whose page scrolling can be suspended."""

    def set_scroll_locked(self, locked: bool) -> None:
        """Disable (True) or re-enable (False) scrolling of the main page."""
        raise NotImplementedError


class ScrollAnchor(Protocol):
    """A rendered element that can be scrolled to and highlighted."""

    def top(self) -> int:
        """Vertical position of the element within the scrolled content."""
        raise NotImplementedError

    def scroll_into_view(self) -> None:
        """Smoothly bring the element into view inside its own container."""
        raise NotImplementedError

    def set_emphasis(self, on: bool) -> None:
        """Apply or remove the transient highlight."""
        raise NotImplementedError


class ScrollViewport(Protocol):
    """The main scrollable page."""

    def smooth_scroll_to(self, offset: int) -> None:
        """Animate the vertical scroll position to `offset`."""
        raise NotImplementedError


class TimerHandle(Protocol):
    """Handle returned by a scheduler for a pending callback."""

    def cancel(self) -> None:
        """Prevent the callback from firing if it has not fired yet."""
        raise NotImplementedError


class Scheduler(Protocol):
    """Runs callbacks after a delay on the UI event loop."""

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        """Call `callback` once after `delay_ms` milliseconds."""
        raise NotImplementedError
