"""Logging initialization utilities using loguru."""

from __future__ import annotations

import os
from pathlib import Path
import subprocess

from loguru import logger

LOG_DIR_ENV = "PORTFOLIO_LOG_DIR"


def get_log_directory() -> str:
    """Get the main log directory path."""
    override = os.environ.get(LOG_DIR_ENV)
    if override:
        return override
    if os.name == "nt":
        return os.path.join(os.path.expandvars("%LOCALAPPDATA%"), "PortfolioViewer", "logs")
    return str(Path.home() / ".local" / "state" / "portfolio-viewer" / "logs")


def init_logging(log_dir: str | None = None) -> None:
    """Initialize rotating file logging under the given directory."""
    if log_dir is None:
        log_dir = get_log_directory()
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(
        str(log_path / "app_{time:YYYYMMDD}.log"),
        rotation="10 MB",
        retention="10 days",
        compression="zip",
        enqueue=True,
        backtrace=False,
        diagnose=False,
        level="INFO",
    )


def find_latest_log_file(log_dir: str | None = None) -> Path | None:
    """Find the latest log file in the specified directory."""
    if log_dir is None:
        log_dir = get_log_directory()

    try:
        log_path = Path(log_dir)
        if not log_path.exists():
            return None

        log_files = list(log_path.glob("app_*.log"))
        if not log_files:
            return None

        return max(log_files, key=lambda p: p.stat().st_mtime)
    except (OSError, ValueError):
        return None


def _open_path(path: str) -> bool:
    try:
        if os.name == "nt":  # Windows
            os.startfile(path)  # pylint: disable=no-member
        else:  # macOS/Linux
            opener = "open" if os.uname().sysname == "Darwin" else "xdg-open"
            subprocess.run([opener, path], check=True)
        return True
    except (OSError, subprocess.CalledProcessError):
        return False


def open_latest_log() -> bool:
    """Open the latest log file in the default application."""
    log_file = find_latest_log_file()
    if log_file:
        return _open_path(str(log_file))
    return False


def open_log_directory() -> bool:
    """Open the log directory in the file explorer."""
    return _open_path(get_log_directory())
