"""Leadership alignment across reporting lines.

Every occupant of a unit is compared with the manager of the *parent* unit;
the results roll up into a global alignment index, a friction rate and a
per-team ranking (worst aligned first). All functions are *pure*.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from jnana.engine.compatibility import compatibility
from jnana.engine.org_tree import iter_org, occupants
from jnana.engine.rounding import round_half_up
from jnana.org_models import OrgNode, Person


MANAGER_KEYWORDS: tuple[str, ...] = ("manager", "head", "lead", "director", "ceo", "ad")

LOW_FIT_THRESHOLD = 40
HIGH_FIT_THRESHOLD = 70


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class FitDistribution(BaseModel):
    high: int = Field(default=0, ge=0)
    medium: int = Field(default=0, ge=0)
    low: int = Field(default=0, ge=0)


class TeamAlignment(BaseModel):
    node_id: str
    team_name: str
    manager_name: str
    average_fit: float = Field(ge=0.0, le=100.0)
    status: Literal["High", "Low"]


class LeadershipAnalytics(BaseModel):
    global_alignment_index: int = Field(default=0, ge=0, le=100)
    friction_rate: int = Field(default=0, ge=0, le=100)  # percent of pairs below 40
    total_pairs_analyzed: int = Field(default=0, ge=0)
    team_alignment: list[TeamAlignment] = Field(default_factory=list)
    distribution: FitDistribution = Field(default_factory=FitDistribution)


# ---------------------------------------------------------------------------
# Manager selection
# ---------------------------------------------------------------------------
def has_manager_title(person: Person) -> bool:
    title = (person.job_title or "").lower()
    return any(keyword in title for keyword in MANAGER_KEYWORDS)


def select_manager(node: OrgNode, node_people: list[Person]) -> Person | None:
    """Pick the manager among the direct occupants of *node*.

    Cultural-driver units: the first occupant. Otherwise the first occupant
    with a leadership job title, falling back to the first occupant.
    """
    if not node_people:
        return None
    if node.is_cultural_driver:
        return node_people[0]
    return next((p for p in node_people if has_manager_title(p)), node_people[0])


def manager_display_name(person: Person) -> str:
    return person.name or person.id


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def analyze_leadership(org: OrgNode, people: list[Person]) -> LeadershipAnalytics:
    """Aggregate compatibility of every unit's people with their superior."""
    managers: dict[str, Person | None] = {}
    scores: list[int] = []
    distribution = FitDistribution()
    teams: list[TeamAlignment] = []

    for node, parent in iter_org(org):
        node_people = occupants(node, people)
        managers[node.id] = select_manager(node, node_people)
        if parent is None:
            continue

        superior = managers.get(parent.id)
        if superior is None or not superior.profile_code:
            continue

        team_scores: list[int] = []
        for person in node_people:
            if person.id == superior.id or not person.profile_code:
                continue
            score = compatibility(person, superior).score
            team_scores.append(score)
            if score >= HIGH_FIT_THRESHOLD:
                distribution.high += 1
            elif score >= LOW_FIT_THRESHOLD:
                distribution.medium += 1
            else:
                distribution.low += 1

        if team_scores:
            scores.extend(team_scores)
            average = sum(team_scores) / len(team_scores)
            teams.append(TeamAlignment(
                node_id=node.id,
                team_name=node.name,
                manager_name=manager_display_name(superior),
                average_fit=average,
                status="High" if average >= HIGH_FIT_THRESHOLD else "Low",
            ))

    if not scores:
        return LeadershipAnalytics(team_alignment=teams, distribution=distribution)

    return LeadershipAnalytics(
        global_alignment_index=round_half_up(sum(scores) / len(scores)),
        friction_rate=round_half_up(100 * distribution.low / len(scores)),
        total_pairs_analyzed=len(scores),
        team_alignment=sorted(teams, key=lambda t: t.average_fit),
        distribution=distribution,
    )
