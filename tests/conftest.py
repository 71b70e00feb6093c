"""Shared fixtures and fakes for the view-model and core tests."""

from __future__ import annotations

from collections.abc import Callable
import os
import random

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from app.viewmodels.portfolio_vm import PortfolioVM  # noqa: E402
from app.viewmodels.scroll_anchors import ScrollAnchorController  # noqa: E402
from app.viewmodels.scroll_lock import ScrollLock  # noqa: E402
from core.models import ViewerFeatures  # noqa: E402


class FakeLoader:
    def __init__(self) -> None:
        self.tokens: list[str] = []

    def request(self, token: str) -> None:
        self.tokens.append(token)

    @property
    def last_token(self) -> str:
        return self.tokens[-1]


class FakeScrollHost:
    def __init__(self) -> None:
        self.calls: list[bool] = []

    def set_scroll_locked(self, locked: bool) -> None:
        self.calls.append(locked)

    @property
    def acquires(self) -> int:
        return self.calls.count(True)

    @property
    def releases(self) -> int:
        return self.calls.count(False)


class FakeViewport:
    def __init__(self) -> None:
        self.offsets: list[int] = []

    def smooth_scroll_to(self, offset: int) -> None:
        self.offsets.append(offset)


class FakeAnchor:
    def __init__(self, top: int = 0) -> None:
        self._top = top
        self.scrolled = 0
        self.emphasis: list[bool] = []

    def top(self) -> int:
        return self._top

    def scroll_into_view(self) -> None:
        self.scrolled += 1

    def set_emphasis(self, on: bool) -> None:
        self.emphasis.append(on)


class _Handle:
    def __init__(self) -> None:
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Collects scheduled callbacks; tests fire them explicitly."""

    def __init__(self) -> None:
        self.pending: list[tuple[int, Callable[[], None], _Handle]] = []

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> _Handle:
        handle = _Handle()
        self.pending.append((delay_ms, callback, handle))
        return handle

    @property
    def delays(self) -> list[int]:
        return [d for d, _, h in self.pending if not h.cancelled]

    def run_next(self) -> int:
        """Fire the oldest live callback and return its delay."""
        while self.pending:
            delay, callback, handle = self.pending.pop(0)
            if not handle.cancelled:
                callback()
                return delay
        raise AssertionError("nothing scheduled")

    def run_all(self) -> None:
        while any(not h.cancelled for _, _, h in self.pending):
            self.run_next()


@pytest.fixture(autouse=True)
def _qt_app(qapp):
    """Signals on the view-model need a Qt application instance."""
    return qapp


@pytest.fixture
def loader() -> FakeLoader:
    return FakeLoader()


@pytest.fixture
def scroll_host() -> FakeScrollHost:
    return FakeScrollHost()


@pytest.fixture
def viewport() -> FakeViewport:
    return FakeViewport()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def anchors(viewport, scheduler) -> ScrollAnchorController:
    return ScrollAnchorController(
        viewport=viewport,
        scheduler=scheduler,
        header_clearance=100,
        settle_delay_ms=400,
        highlight_ms=1200,
    )


@pytest.fixture
def make_vm(loader, anchors, scroll_host):
    """Factory building a `PortfolioVM` wired to the fakes."""

    def _make(features: ViewerFeatures | None = None, seed: int = 7) -> PortfolioVM:
        return PortfolioVM(
            loader,
            anchors=anchors,
            scroll_lock=ScrollLock(scroll_host),
            features=features,
            rng=random.Random(seed),
        )

    return _make


@pytest.fixture
def sample_payload() -> list[dict]:
    return [
        {
            "id": "tokyo-nights",
            "title": "Tokyo Nights",
            "location": "Tokyo",
            "year": 2023,
            "cover": "/covers/tokyo.jpg",
            "count": 12,
            "images": ["/img/t1.jpg", {"url": "/img/t2.jpg"}, "https://cdn.example.com/t3.jpg"],
        },
        {
            "id": "paris-rain",
            "title": "Paris in Rain",
            "location": "Paris",
            "cover": "/covers/paris.jpg",
            "previewImages": ["/img/p1.jpg", "/img/p2.jpg"],
        },
        {
            "id": "studio",
            "title": "Studio Portraits",
            "location": "",
            "cover": "/covers/studio.jpg",
            "images": [],
        },
        {
            "id": "kyoto",
            "title": "Kyoto Mornings",
            "location": "Tokyo",
            "cover": "/covers/kyoto.jpg",
            "count": 0,
            "images": ["/img/k1.jpg"],
        },
    ]


@pytest.fixture
def browsing_vm(make_vm, loader, sample_payload) -> PortfolioVM:
    vm = make_vm()
    vm.start_load()
    vm.on_collections_loaded(loader.last_token, sample_payload)
    return vm
