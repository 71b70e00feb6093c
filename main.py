from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication
from loguru import logger

from app.views.image_binder import ImageBinder
from app.views.load_tasks import LoadTaskRunner
from app.views.main_window import MainWindow
from app.views.qt_scheduler import QtScheduler
from app.viewmodels.portfolio_vm import PortfolioVM
from app.viewmodels.scroll_anchors import ScrollAnchorController
from app.viewmodels.scroll_lock import ScrollLock
from core.image_urls import ImageUrlResolver
from infrastructure.collections_client import CollectionsClient
from infrastructure.image_service import ImageService
from infrastructure.logging import init_logging
from infrastructure.settings import JsonSettings, ViewerConfig

BASE_DIR = Path(__file__).parent


def _load_config() -> ViewerConfig:
    try:
        settings = JsonSettings(BASE_DIR / "settings.json")
    except FileNotFoundError as ex:
        logger.warning("{}; using built-in defaults", ex)
        settings = None
    return ViewerConfig.from_settings(settings)


def main() -> int:
    init_logging()
    config = _load_config()
    logger.info("Starting viewer against {}", config.collections_url)

    app = QApplication(sys.argv)

    client = CollectionsClient(config.collections_url, timeout=config.timeout_s)
    loader = LoadTaskRunner(client)
    scheduler = QtScheduler(app)
    anchors = ScrollAnchorController(
        viewport=None,
        scheduler=scheduler,
        header_clearance=config.header_clearance_px,
        settle_delay_ms=config.settle_delay_ms,
        highlight_ms=config.highlight_ms,
    )
    scroll_lock = ScrollLock()
    vm = PortfolioVM(loader, anchors=anchors, scroll_lock=scroll_lock, features=config.features)
    loader.connect_to(vm)

    images = ImageService(mem_cache=config.image_mem_cache)
    binder = ImageBinder(images, ImageUrlResolver(config.base_origin))

    win = MainWindow(vm=vm, binder=binder, anchors=anchors, config=config)
    anchors.set_viewport(win.page_viewport)
    scroll_lock.attach(win.page_viewport)
    win.show()

    vm.start_load()
    try:
        return app.exec()
    finally:
        client.close()


if __name__ == "__main__":
    raise SystemExit(main())
