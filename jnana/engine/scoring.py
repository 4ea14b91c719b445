"""Questionnaire scoring.

All functions are *pure*.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from jnana.question_bank import RIASEC_QUESTIONNAIRE, all_items
from jnana.riasec_types import (
    DIMENSIONS,
    PROFILE_CODE_DELIMITER,
    Dimension,
    ScoreVector,
    TestSection,
)


def calculate_score(
    selected_item_ids: Iterable[str],
    bank: Iterable[TestSection] = RIASEC_QUESTIONNAIRE,
) -> ScoreVector:
    """Count +1 per tagged dimension for every selected item.

    Unknown ids are ignored; an item tagged with two dimensions adds one
    point to each.
    """
    lookup = all_items(bank)
    counts: Counter[str] = Counter()
    for item_id in set(selected_item_ids):
        item = lookup.get(item_id)
        if item is None:
            continue
        for dim in item.impact_dimensions:
            counts[dim] += 1
    return ScoreVector(**{dim: counts[dim] for dim in DIMENSIONS})


def rank_dimensions(vector: ScoreVector) -> list[tuple[Dimension, int]]:
    """(dimension, score) pairs, highest first; ties keep R,I,A,S,E,C order."""
    return sorted(vector.items(), key=lambda pair: pair[1], reverse=True)


def top_dimensions(vector: ScoreVector, n: int = 3) -> list[Dimension]:
    return [dim for dim, _ in rank_dimensions(vector)[:n]]


def calculate_profile_code(vector: ScoreVector) -> str:
    """Top three dimensions joined by ``-``, e.g. ``"R-I-C"``."""
    return PROFILE_CODE_DELIMITER.join(top_dimensions(vector))
