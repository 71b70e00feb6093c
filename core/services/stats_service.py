"""Portfolio-wide counters derived from the normalized project set."""

from __future__ import annotations

from collections.abc import Sequence

from core.models import PortfolioStats, Project


def project_photo_count(project: Project) -> int:
    """Declared count when truthy, otherwise the number of images."""
    return project.count or len(project.images)


def compute_stats(projects: Sequence[Project]) -> PortfolioStats:
    """Compute totals for `projects`; pure and deterministic."""
    if not projects:
        return PortfolioStats()
    total_photos = sum(project_photo_count(p) for p in projects)
    unique_locations = len({p.location for p in projects if p.location})
    return PortfolioStats(
        total_projects=len(projects),
        total_photos=total_photos,
        unique_locations=unique_locations,
    )


class StatsCache:
    """Memoizes `compute_stats` on the identity of the project sequence."""

    def __init__(self) -> None:
        self._source: Sequence[Project] | None = None
        self._stats = PortfolioStats()

    def get(self, projects: Sequence[Project]) -> PortfolioStats:
        if projects is not self._source:
            self._stats = compute_stats(projects)
            self._source = projects
        return self._stats
