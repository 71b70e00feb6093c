from __future__ import annotations

from typing import Any

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal
from loguru import logger

from core.errors import NetworkFailure, PortfolioLoadError


class _LoadTask(QRunnable):
    """QRunnable performing the collections fetch off the UI thread.

    Emits `runner.collectionsLoaded(token, payload)` or
    `runner.collectionsFailed(token, error)` when done.
    """

    def __init__(self, *, client: Any, runner: LoadTaskRunner, token: str) -> None:
        super().__init__()
        self._client = client
        self._runner = runner
        self._token = token

    def run(self) -> None:  # type: ignore[override]
        try:
            payload = self._client.fetch()
        except PortfolioLoadError as ex:
            logger.error("Collections load failed: {}", ex)
            self._runner.collectionsFailed.emit(self._token, ex)
            return
        except Exception as ex:  # pylint: disable=broad-exception-caught
            logger.exception("Unexpected error while loading collections")
            self._runner.collectionsFailed.emit(self._token, NetworkFailure(str(ex)))
            return
        self._runner.collectionsLoaded.emit(self._token, payload)


class LoadTaskRunner(QObject):
    """Dispatches the collections fetch to the global thread pool.

    Results are delivered through queued signals on the UI thread, tagged with
    the token passed to `request` so the receiver can ignore stale ones.
    """

    collectionsLoaded = Signal(str, object)  # token, raw payload list
    collectionsFailed = Signal(str, object)  # token, PortfolioLoadError

    def __init__(self, client: Any, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._client = client
        self._pool = QThreadPool.globalInstance()

    def request(self, token: str) -> None:
        """Start a fetch identified by `token`."""
        self._pool.start(_LoadTask(client=self._client, runner=self, token=token))

    def connect_to(self, vm: Any) -> None:
        """Route results to `vm.on_collections_loaded` / `vm.on_collections_failed`."""
        self.collectionsLoaded.connect(vm.on_collections_loaded)
        self.collectionsFailed.connect(vm.on_collections_failed)
