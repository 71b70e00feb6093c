"""Core domain models for portfolio projects and their images."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

UNKNOWN_LOCATION = "Unknown"


@dataclass(frozen=True)
class ImageRef:
    """A single image reference (relative path or absolute URL)."""

    url: str


@dataclass(frozen=True)
class Project:
    """A normalized photo collection as displayed by the viewer."""

    id: Any
    display_id: int
    title: str = ""
    location: str | None = None
    year: int | str | None = None
    cover: str = ""
    # Declared photo count from the source; may be missing or unreliable
    count: int | None = None
    images: tuple[ImageRef, ...] = field(default_factory=tuple)
    preview_images: tuple[ImageRef, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PortfolioStats:
    """Portfolio-wide counters shown in the hero footer."""

    total_projects: int = 0
    total_photos: int = 0
    unique_locations: int = 0


class ViewState(str, Enum):
    """Load status of the portfolio view."""

    LOADING = "loading"
    EMPTY = "empty"
    BROWSING = "browsing"
    FAILED = "failed"


class FilterType(str, Enum):
    """Grouping used by the navigation menu."""

    ALL = "all"
    LOCATION = "location"


@dataclass(frozen=True)
class ViewerFeatures:
    """Optional presentation features toggled from settings."""

    parallax_hero: bool = True
    contact_sheet: bool = True
    location_grouping: bool = True
