"""Grouping of projects by location for the "by location" navigation view."""

from __future__ import annotations

from collections.abc import Iterable

from core.models import UNKNOWN_LOCATION, Project


def location_key(project: Project) -> str:
    """Grouping key for `project`; missing locations share one bucket."""
    return project.location or UNKNOWN_LOCATION


def build_location_index(projects: Iterable[Project]) -> dict[str, list[Project]]:
    """Group `projects` by location, preserving encounter order.

    Both the key order and the order inside each group follow the input order.
    """
    index: dict[str, list[Project]] = {}
    for project in projects:
        index.setdefault(location_key(project), []).append(project)
    return index
