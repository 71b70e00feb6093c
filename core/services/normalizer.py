"""Normalization of raw collection records into `Project` models.

Raw records come straight from the remote JSON payload, so every field is
treated as optional. Missing or malformed values degrade to falsy defaults;
nothing in this module raises on a bad entry.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from loguru import logger

from core.models import ImageRef, Project


def _to_image_ref(raw: Any) -> ImageRef | None:
    """Convert a bare string or `{"url": ...}` mapping to `ImageRef`."""
    if isinstance(raw, str):
        return ImageRef(raw)
    if isinstance(raw, Mapping):
        url = raw.get("url")
        if isinstance(url, str):
            return ImageRef(url)
    logger.warning("Dropping unsupported image reference: {!r}", raw)
    return None


def _to_image_refs(raw: Any) -> tuple[ImageRef, ...]:
    if not isinstance(raw, list):
        return ()
    refs: list[ImageRef] = []
    for item in raw:
        ref = _to_image_ref(item)
        if ref is not None:
            refs.append(ref)
    return tuple(refs)


def _parse_count(value: Any) -> int | None:
    """Parse the declared photo count; None when absent or unusable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (ValueError, TypeError):
        logger.debug("Ignoring non-numeric count: {!r}", value)
        return None


def _parse_location(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    return value or None


def _parse_id(value: Any, display_id: int) -> Any:
    """Project id used as an anchor key; falls back to `display_id`."""
    if value is None or value == "":
        return display_id
    if not isinstance(value, (str, int, float)):
        logger.warning("Collection entry #{} has an unusable id: {!r}", display_id, value)
        return display_id
    return value


def _cover_path(value: Any) -> str:
    if isinstance(value, Mapping):
        value = value.get("url")
    return value if isinstance(value, str) else ""


def normalize_entry(entry: Any, display_id: int) -> Project:
    """Build one `Project` from a raw record at 1-based position `display_id`."""
    if not isinstance(entry, Mapping):
        logger.warning("Collection entry #{} is not an object: {!r}", display_id, entry)
        entry = {}

    images = _to_image_refs(entry.get("images"))
    previews = _to_image_refs(entry.get("previewImages"))
    title = entry.get("title")

    return Project(
        id=_parse_id(entry.get("id"), display_id),
        display_id=display_id,
        title=str(title) if title is not None else "",
        location=_parse_location(entry.get("location")),
        year=entry.get("year") or None,
        cover=_cover_path(entry.get("cover")),
        count=_parse_count(entry.get("count")),
        # Detail views fall back to the preview set when no full images exist
        images=images if images else previews,
        preview_images=previews,
    )


def normalize_collections(entries: Iterable[Any] | None) -> tuple[Project, ...]:
    """Normalize `entries` in order, assigning display ids 1..N."""
    if entries is None:
        return ()
    return tuple(normalize_entry(entry, i + 1) for i, entry in enumerate(entries))


def format_index(number: int) -> str:
    """Two-digit zero-padded label used for list rows and image captions."""
    return str(number).zfill(2)
