"""Rounding shared by the percentage-style scores."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round halves up (12.5 → 13), unlike the built-in banker's ``round``."""
    return math.floor(value + 0.5)
