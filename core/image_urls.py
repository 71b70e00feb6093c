"""Resolution of possibly-relative image paths to displayable URLs."""

from __future__ import annotations

from core.models import ImageRef

# Anything carrying one of these prefixes is already displayable as-is
ABSOLUTE_PREFIXES: tuple[str, ...] = ("http://", "https://", "//", "data:", "blob:")


def is_absolute_url(path: str) -> bool:
    """True if `path` starts with a recognizable scheme prefix."""
    return path.lower().startswith(ABSOLUTE_PREFIXES)


def resolve_image_url(path: str | ImageRef | None, base_origin: str) -> str:
    """Return a displayable URL for `path`; never raises.

    Empty input yields an empty string so callers can skip the image entirely.
    Relative paths are concatenated onto `base_origin` without further checks.
    """
    if isinstance(path, ImageRef):
        path = path.url
    if not path or not isinstance(path, str):
        return ""
    if is_absolute_url(path):
        return path
    base = base_origin or ""
    if base.endswith("/") and path.startswith("/"):
        base = base[:-1]
    return f"{base}{path}"


class ImageUrlResolver:
    """Resolver bound to one configured base origin."""

    def __init__(self, base_origin: str) -> None:
        self._base = base_origin or ""

    @property
    def base_origin(self) -> str:
        return self._base

    def resolve(self, path: str | ImageRef | None) -> str:
        """Resolve `path` against the configured base origin."""
        return resolve_image_url(path, self._base)
