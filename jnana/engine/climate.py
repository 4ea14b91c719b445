"""Climate survey aggregates, company-wide and per organisational unit.

All functions are *pure*.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from jnana.engine.org_tree import iter_org
from jnana.org_models import OrgNode, OrgNodeType, Person


class SectionAverage(BaseModel):
    name: str
    value: float


class ClimateAnalytics(BaseModel):
    global_averages: list[SectionAverage] = Field(default_factory=list)
    overall_average: float
    respondent_count: int = Field(ge=1)


class UnitClimateStat(BaseModel):
    node_id: str
    node_name: str
    type: OrgNodeType
    score: float | None = None
    respondent_count: int = Field(default=0, ge=0)


def analyze_climate_global(people: list[Person]) -> ClimateAnalytics | None:
    """Company-wide climate; ``None`` when nobody answered the survey.

    Section averages divide by the number of respondents who reported that
    section. The overall figure is the mean of each respondent's own overall
    average.
    """
    respondents = [p for p in people if p.climate_data is not None]
    if not respondents:
        return None

    section_sums: dict[str, float] = {}
    section_counts: dict[str, int] = {}
    overall_sum = 0.0
    for person in respondents:
        data = person.climate_data
        overall_sum += data.overall_average
        for name, value in data.section_averages.items():
            section_sums[name] = section_sums.get(name, 0.0) + value
            section_counts[name] = section_counts.get(name, 0) + 1

    return ClimateAnalytics(
        global_averages=[
            SectionAverage(name=name, value=section_sums[name] / section_counts[name])
            for name in section_sums
        ],
        overall_average=overall_sum / len(respondents),
        respondent_count=len(respondents),
    )


def analyze_climate_by_unit(org: OrgNode, people: list[Person]) -> list[UnitClimateStat]:
    """One entry per node in pre-order, counting only direct occupants."""
    stats: list[UnitClimateStat] = []
    for node, _parent in iter_org(org):
        respondents = [
            p for p in people
            if p.department_id == node.id and p.climate_data is not None
        ]
        score = (
            sum(p.climate_data.overall_average for p in respondents) / len(respondents)
            if respondents
            else None
        )
        stats.append(UnitClimateStat(
            node_id=node.id,
            node_name=node.name,
            type=node.type,
            score=score,
            respondent_count=len(respondents),
        ))
    return stats
