"""Pairwise compatibility between two people.

Trait overlap (max 60) from the profile codes plus value overlap (max 40)
from interview-derived primary values. Without value data on both sides the
trait score is rescaled to 0-100. The value component is evaluated from the
first person's values, so ``compatibility(a, b)`` and ``compatibility(b, a)``
can differ. All functions are *pure*.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from jnana.engine.rounding import round_half_up
from jnana.org_models import Person
from jnana.riasec_types import parse_profile_code


TRAIT_MAX = 60
VALUE_MAX = 40
_VALUE_MULTIPLIER = 60

# shared trait count -> points
_TRAIT_POINTS: dict[int, int] = {3: 60, 2: 45, 1: 20, 0: 5}

INSUFFICIENT_DATA = "insufficient data"


class CompatibilityResult(BaseModel):
    score: int = Field(ge=0, le=100)
    reasons: list[str] = Field(default_factory=list)


def shared_traits(code_a: str, code_b: str) -> list[str]:
    """Letters of *code_a* also present in *code_b*, in *code_a* order."""
    letters_b = set(parse_profile_code(code_b))
    return [letter for letter in parse_profile_code(code_a) if letter in letters_b]


def trait_overlap_points(shared_count: int) -> int:
    return _TRAIT_POINTS.get(min(shared_count, 3), 5)


def matched_values(values_a: list[str], values_b: list[str]) -> list[str]:
    """Values of A that contain, or are contained in, some value of B (case-insensitive)."""
    lower_b = [v.lower() for v in values_b]
    return [
        v for v in values_a
        if any(v.lower() in other or other in v.lower() for other in lower_b)
    ]


def compatibility(a: Person, b: Person) -> CompatibilityResult:
    """Score how well *a* fits *b* (0-100) with human-readable reasons."""
    if not a.profile_code or not b.profile_code:
        return CompatibilityResult(score=0, reasons=[INSUFFICIENT_DATA])

    reasons: list[str] = []
    shared = shared_traits(a.profile_code, b.profile_code)
    score: float = trait_overlap_points(len(shared))
    reasons.append(_trait_reason(shared))

    values_a = a.karma_data.primary_values if a.karma_data else []
    values_b = b.karma_data.primary_values if b.karma_data else []
    # an empty value list counts as missing data
    if values_a and values_b:
        matched = matched_values(values_a, values_b)
        ratio = len(matched) / len(values_a)
        score += min(ratio * _VALUE_MULTIPLIER, VALUE_MAX)
        if matched:
            display = ", ".join(v.strip().capitalize() for v in matched)
            reasons.append(f"Deep value alignment: you share values such as {display}.")
        else:
            reasons.append("Value mismatch: the guiding values that emerged look different.")
    else:
        score = score / TRAIT_MAX * 100
        reasons.append("Partial analysis: interview value data is missing for at least one person.")

    return CompatibilityResult(score=round_half_up(min(score, 100)), reasons=reasons)


def _trait_reason(shared: list[str]) -> str:
    if len(shared) >= 3:
        return f"Excellent character fit: you share all three motivational drivers ({', '.join(shared)})."
    if len(shared) == 2:
        return f"Strong operational alignment: you share two dominant traits ({' and '.join(shared)})."
    if len(shared) == 1:
        return f'Specific point of contact: the only shared trait is "{shared[0]}".'
    return "Cognitive diversity: your profiles are opposite."
