"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import os
from pathlib import Path
from typing import Any

from loguru import logger

from core.models import ViewerFeatures

DEFAULT_BASE_ORIGIN = "https://api.minzhangphoto.com"
DEFAULT_COLLECTIONS_PATH = "/api/collections"
BASE_ORIGIN_ENV = "PORTFOLIO_BASE_ORIGIN"


class JsonSettings:
    """Lightweight JSON settings reader with dotted-key access."""

    def __init__(self, settings_path: str | Path) -> None:
        self._path = Path(settings_path)
        if not self._path.exists():
            raise FileNotFoundError(f"settings.json not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            self._data = json.load(f)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> JsonSettings:
        """Build settings from an in-memory mapping (no file involved)."""
        inst = cls.__new__(cls)
        inst._path = Path("<memory>")
        inst._data = data
        return inst

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node


def _get_int(settings: JsonSettings, key: str, default: int) -> int:
    try:
        value = int(settings.get(key, default))
    except (ValueError, TypeError):
        logger.warning("Invalid integer for {}; using {}", key, default)
        return default
    if value < 0:
        logger.warning("Negative value for {}; using {}", key, default)
        return default
    return value


def _get_float(settings: JsonSettings, key: str, default: float) -> float:
    try:
        value = float(settings.get(key, default))
    except (ValueError, TypeError):
        logger.warning("Invalid number for {}; using {}", key, default)
        return default
    return value if value > 0 else default


def _get_bool(settings: JsonSettings, key: str, default: bool) -> bool:
    value = settings.get(key, default)
    if isinstance(value, bool):
        return value
    logger.warning("Invalid boolean for {}; using {}", key, default)
    return default


@dataclass(frozen=True)
class ViewerConfig:
    """Resolved runtime configuration for the viewer."""

    base_origin: str = DEFAULT_BASE_ORIGIN
    collections_path: str = DEFAULT_COLLECTIONS_PATH
    timeout_s: float = 15.0
    header_clearance_px: int = 100
    settle_delay_ms: int = 400
    highlight_ms: int = 1200
    smooth_duration_ms: int = 600
    image_mem_cache: int = 256
    thumb_side: int = 320
    features: ViewerFeatures = field(default_factory=ViewerFeatures)

    @property
    def collections_url(self) -> str:
        """Absolute URL of the collections endpoint."""
        return f"{self.base_origin.rstrip('/')}{self.collections_path}"

    @classmethod
    def from_settings(cls, settings: JsonSettings | None) -> ViewerConfig:
        """Build config from `settings`, falling back to defaults per key."""
        defaults = cls()
        if settings is None:
            settings = JsonSettings.from_dict({})

        base_origin = os.environ.get(BASE_ORIGIN_ENV) or settings.get(
            "api.base_origin", defaults.base_origin
        )
        if not isinstance(base_origin, str) or not base_origin:
            logger.warning("Invalid api.base_origin; using {}", defaults.base_origin)
            base_origin = defaults.base_origin

        # Empty path means the origin itself serves the collections array
        collections_path = settings.get("api.collections_path", defaults.collections_path)
        if not isinstance(collections_path, str):
            collections_path = defaults.collections_path

        features = ViewerFeatures(
            parallax_hero=_get_bool(settings, "features.parallax_hero", True),
            contact_sheet=_get_bool(settings, "features.contact_sheet", True),
            location_grouping=_get_bool(settings, "features.location_grouping", True),
        )

        return cls(
            base_origin=base_origin,
            collections_path=collections_path,
            timeout_s=_get_float(settings, "api.timeout_s", defaults.timeout_s),
            header_clearance_px=_get_int(
                settings, "scroll.header_clearance_px", defaults.header_clearance_px
            ),
            settle_delay_ms=_get_int(settings, "scroll.settle_delay_ms", defaults.settle_delay_ms),
            highlight_ms=_get_int(settings, "scroll.highlight_ms", defaults.highlight_ms),
            smooth_duration_ms=_get_int(
                settings, "scroll.smooth_duration_ms", defaults.smooth_duration_ms
            ),
            image_mem_cache=_get_int(settings, "images.mem_cache", defaults.image_mem_cache),
            thumb_side=_get_int(settings, "images.thumb_side", defaults.thumb_side),
            features=features,
        )
