"""Binds labels to asynchronously downloaded images."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QObject, QRunnable, Qt, QThreadPool, Signal
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QLabel
from loguru import logger

from core.image_urls import ImageUrlResolver
from core.models import ImageRef


class _Download(QRunnable):
    """Fetch one image on the pool and hand it back through `binder.imageLoaded`."""

    def __init__(self, binder: ImageBinder, token: str, url: str, side: int) -> None:
        super().__init__()
        self._binder = binder
        self._token = token
        self._url = url
        self._side = side

    def run(self) -> None:  # type: ignore[override]
        image = self._binder.fetch(self._url, self._side)
        try:
            self._binder.imageLoaded.emit(self._token, self._url, image)
        except RuntimeError:  # binder destroyed with its window
            logger.debug("Dropping image for {}: receiver gone", self._url)


class ImageBinder(QObject):
    """Resolves image paths, downloads them off the UI thread and fills labels.

    Labels asking for the same URL at the same side share one download,
    keyed by a `"{side}|{url}"` token. Results for labels that were forgotten
    or destroyed in the meantime are dropped.
    """

    imageLoaded = Signal(str, str, object)  # token, url, QImage | None

    def __init__(self, service: Any, resolver: ImageUrlResolver, parent: QObject | None = None):
        super().__init__(parent)
        self._service = service
        self._resolver = resolver
        self._pool = QThreadPool.globalInstance()
        self._waiting: dict[str, list[QLabel]] = {}
        self.imageLoaded.connect(self._on_image_loaded)

    @property
    def resolver(self) -> ImageUrlResolver:
        return self._resolver

    def bind(self, label: QLabel, path: str | ImageRef | None, side: int = 0) -> bool:
        """Request the image for `path` into `label`.

        Returns False (and leaves the label empty) when `path` resolves to an
        empty URL, so no request is made for it.
        """
        url = self._resolver.resolve(path)
        if not url:
            label.clear()
            return False
        if self._service is None:
            return True
        token = f"{max(0, int(side))}|{url}"
        waiting = self._waiting.setdefault(token, [])
        waiting.append(label)
        if len(waiting) == 1:
            self._pool.start(_Download(self, token, url, max(0, int(side))))
        return True

    def fetch(self, url: str, side: int) -> Any:
        """Blocking download used by pool tasks; None when the service fails."""
        try:
            if side > 0:
                return self._service.get_thumbnail(url, side)
            return self._service.get_preview(url)
        except Exception as ex:  # pylint: disable=broad-exception-caught
            logger.error("Image fetch failed for {}: {}", url, ex)
            return None

    def forget(self, labels: list[QLabel]) -> None:
        """Stop delivering results to `labels`."""
        doomed = {id(lbl) for lbl in labels}
        for token in list(self._waiting):
            kept = [lbl for lbl in self._waiting[token] if id(lbl) not in doomed]
            if kept:
                self._waiting[token] = kept
            else:
                del self._waiting[token]

    def _on_image_loaded(self, token: str, _url: str, image: Any) -> None:
        labels = self._waiting.pop(token, [])
        if image is None or image.isNull():
            return
        pixmap = QPixmap.fromImage(image)
        for label in labels:
            try:
                if label.property("fit_box"):
                    scaled = pixmap.scaled(label.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation)
                else:
                    width = label.width() if label.width() > 1 else pixmap.width()
                    scaled = pixmap.scaledToWidth(width, Qt.SmoothTransformation)
                label.setPixmap(scaled)
            except RuntimeError:  # label deleted before the download finished
                continue
