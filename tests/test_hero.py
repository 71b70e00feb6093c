from __future__ import annotations

import random

from core.services.hero import pick_hero, pick_hero_index
from core.services.normalizer import normalize_collections


def test_empty_set_has_no_hero():
    assert pick_hero_index(0, random.Random(1)) is None
    assert pick_hero((), random.Random(1)) is None


def test_seeded_rng_pins_the_pick():
    projects = normalize_collections([{"id": i} for i in range(10)])
    expected = random.Random(42).randrange(10)
    assert pick_hero(projects, random.Random(42)) is projects[expected]


def test_index_always_in_range():
    rng = random.Random(3)
    assert all(0 <= pick_hero_index(4, rng) < 4 for _ in range(50))
