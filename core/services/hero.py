"""Featured (hero) project selection."""

from __future__ import annotations

from collections.abc import Sequence
import random

from core.models import Project


def pick_hero_index(count: int, rng: random.Random | None = None) -> int | None:
    """Return a pseudo-random index in ``[0, count)``, or None when empty."""
    if count <= 0:
        return None
    return (rng or random.Random()).randrange(count)


def pick_hero(projects: Sequence[Project], rng: random.Random | None = None) -> Project | None:
    """Pick the featured project using `rng`; None for an empty set."""
    index = pick_hero_index(len(projects), rng)
    return None if index is None else projects[index]
