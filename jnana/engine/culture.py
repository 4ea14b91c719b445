"""Declared vs. lived culture.

Infers "effective" values and hidden risks from the interview data of people
sitting in cultural-driver units, then compares them with the values the
company declares. All functions are *pure*.
"""

from __future__ import annotations

from collections import Counter

from pydantic import BaseModel, Field

from jnana.engine.org_tree import walk_org
from jnana.engine.rounding import round_half_up
from jnana.org_models import OrgNode, Person


MAX_EFFECTIVE_VALUES = 8
MAX_HIDDEN_RISKS = 5


class CultureAnalysis(BaseModel):
    match_score: int = Field(ge=0, le=100)
    aligned_values: list[str] = Field(default_factory=list)
    gap_values: list[str] = Field(default_factory=list)
    effective_values: list[str] = Field(default_factory=list)
    hidden_risks: list[str] = Field(default_factory=list)
    driver_count: int = Field(default=0, ge=0)


def normalize_label(value: str) -> str:
    """Trim, upper-case the first letter, lower-case the rest."""
    cleaned = value.strip()
    return cleaned[:1].upper() + cleaned[1:].lower()


def cultural_driver_ids(org: OrgNode) -> set[str]:
    ids: set[str] = set()

    def _visit(node: OrgNode, _parent: OrgNode | None) -> None:
        if node.is_cultural_driver:
            ids.add(node.id)

    walk_org(org, _visit)
    return ids


def analyze_culture(org: OrgNode, people: list[Person], declared_values: list[str]) -> CultureAnalysis:
    """Compare *declared_values* with values observed among cultural drivers.

    Frequency ties keep first-seen order of the people list.
    """
    driver_ids = cultural_driver_ids(org)
    drivers = [
        p for p in people
        if p.department_id in driver_ids and p.karma_data is not None
    ]

    value_counts: Counter[str] = Counter()
    risk_counts: Counter[str] = Counter()
    for person in drivers:
        for value in person.karma_data.primary_values:
            label = normalize_label(value)
            if label:
                value_counts[label] += 1
        for risk in person.karma_data.risk_factors:
            label = normalize_label(risk)
            if label:
                risk_counts[label] += 1

    effective = [v for v, _ in value_counts.most_common(MAX_EFFECTIVE_VALUES)]
    risks = [r for r, _ in risk_counts.most_common(MAX_HIDDEN_RISKS)]

    declared_lower = {d.lower() for d in declared_values}
    effective_lower = {e.lower() for e in effective}
    aligned = [e for e in effective if e.lower() in declared_lower]
    gaps = [d for d in declared_values if d.lower() not in effective_lower]

    match = round_half_up(100 * len(aligned) / len(declared_values)) if declared_values else 0

    return CultureAnalysis(
        match_score=min(match, 100),
        aligned_values=aligned,
        gap_values=gaps,
        effective_values=effective,
        hidden_risks=risks,
        driver_count=len(drivers),
    )
