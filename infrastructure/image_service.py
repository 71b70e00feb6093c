"""Remote image loading, scaling, and in-memory caching.

Images are downloaded with requests and decoded by Qt. Decoded images are kept
in a small LRU cache keyed by URL and requested side so that list rows, the
detail overlay and the contact sheet can share downloads.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
import threading

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QImage
from loguru import logger
import requests

PLACEHOLDER_SIDE = 64


@dataclass
class _MemCacheItem:
    key: str
    image: QImage


class _LRUCache:
    def __init__(self, capacity: int) -> None:
        self._cap = max(1, int(capacity or 1))
        self._data: OrderedDict[str, _MemCacheItem] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> QImage | None:
        """Return cached QImage for key, moving it to the MRU position."""
        with self._lock:
            item = self._data.get(key)
            if not item:
                return None
            self._data.move_to_end(key)
            return item.image

    def put(self, key: str, image: QImage) -> None:
        """Insert or update `key` with `image`, evicting LRU when over capacity."""
        with self._lock:
            self._data[key] = _MemCacheItem(key, image)
            self._data.move_to_end(key)
            while len(self._data) > self._cap:
                self._data.popitem(last=False)

    def __len__(self) -> int:
        return len(self._data)


def _make_placeholder() -> QImage:
    img = QImage(PLACEHOLDER_SIDE, PLACEHOLDER_SIDE, QImage.Format_ARGB32)
    img.fill(QColor(30, 30, 30))
    return img


class ImageService:
    """Download and cache images referenced by resolved URLs."""

    def __init__(
        self,
        mem_cache: int = 256,
        timeout: float = 20.0,
        session: requests.Session | None = None,
    ) -> None:
        self._mem_cache = _LRUCache(mem_cache)
        self._timeout = timeout
        # Sessions are not shared across pool threads; an injected one is used as-is
        self._shared_session = session
        self._local = threading.local()

    def _session(self) -> requests.Session:
        if self._shared_session is not None:
            return self._shared_session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
        return session

    def get_thumbnail(self, url: str, size: int) -> QImage:
        """Return image for `url` scaled to fit a `size` square."""
        return self._get_image(url, size)

    def get_preview(self, url: str, max_side: int = 0) -> QImage:
        """Return image for `url`, bounded by `max_side` when positive."""
        return self._get_image(url, max_side)

    def _get_image(self, url: str, requested_side: int) -> QImage:
        key = f"{url}|{int(requested_side)}"
        img = self._mem_cache.get(key)
        if img is not None and not img.isNull():
            return img

        img = self._download(url)
        if img is None or img.isNull():
            # Placeholder keeps the layout stable; not cached so a later retry can succeed
            return _make_placeholder()

        if requested_side and requested_side > 0:
            img = img.scaled(
                requested_side, requested_side, Qt.KeepAspectRatio, Qt.SmoothTransformation
            )
        self._mem_cache.put(key, img)
        return img

    def _download(self, url: str) -> QImage | None:
        if not url:
            return None
        try:
            response = self._session().get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as ex:
            logger.warning("Image download failed for {}: {}", url, ex)
            return None
        img = QImage.fromData(response.content)
        if img.isNull():
            logger.warning("Image decode failed for {}", url)
            return None
        return img
