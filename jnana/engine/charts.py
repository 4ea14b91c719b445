"""Radar chart data for result pages.

All functions are *pure*.
"""

from __future__ import annotations

from pydantic import BaseModel

from jnana.engine.scoring import rank_dimensions
from jnana.riasec_content import RIASEC_DESCRIPTIONS
from jnana.riasec_types import DIMENSION_LABELS, DIMENSIONS, ScoreVector


MAIN_RADAR_FULL_MARK = 30
ADJECTIVE_FULL_MARK = 5
ADJECTIVES_PER_DIMENSION = 4


class RadarPoint(BaseModel):
    """One spoke of a radar chart."""

    subject: str
    value: float
    benchmark: float | None = None
    full_mark: int
    dimension: str


def adjective_intensity(raw_score: int) -> int:
    """Map a raw dimension score onto a 1..5 intensity."""
    if raw_score >= 26:
        return 5
    if raw_score >= 22:
        return 4
    if raw_score >= 18:
        return 3
    if raw_score >= 14:
        return 2
    return 1


def main_radar_data(vector: ScoreVector, benchmark: ScoreVector | None = None) -> list[RadarPoint]:
    """Six spokes in R,I,A,S,E,C order, optionally overlaid with a benchmark."""
    return [
        RadarPoint(
            subject=DIMENSION_LABELS[dim],
            value=vector.get(dim),
            benchmark=benchmark.get(dim) if benchmark is not None else None,
            full_mark=MAIN_RADAR_FULL_MARK,
            dimension=dim,
        )
        for dim in DIMENSIONS
    ]


def adjective_radar_data(vector: ScoreVector) -> list[RadarPoint]:
    """Up to four adjectives per top-3 dimension, at that dimension's intensity."""
    points: list[RadarPoint] = []
    for dim, score in rank_dimensions(vector)[:3]:
        intensity = adjective_intensity(score)
        for adjective in RIASEC_DESCRIPTIONS[dim].adjectives()[:ADJECTIVES_PER_DIMENSION]:
            points.append(RadarPoint(
                subject=adjective,
                value=intensity,
                full_mark=ADJECTIVE_FULL_MARK,
                dimension=dim,
            ))
    return points
