"""Organisation, person and interview/climate snapshot models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from jnana.riasec_types import ScoreVector


SeniorityLevel = Literal["Junior", "Mid", "Senior", "Lead", "C-Level"]
OrgNodeType = Literal["root", "department", "team"]


# ---------------------------------------------------------------------------
# Per-person snapshots
# ---------------------------------------------------------------------------
class KarmaData(BaseModel):
    """Interview-derived behavioural data, already normalised at the boundary."""

    summary: str | None = None
    soft_skills: list[str] = Field(default_factory=list)
    primary_values: list[str] = Field(default_factory=list)
    risk_factors: list[str] = Field(default_factory=list)
    seniority_assessment: SeniorityLevel | None = None


class ClimateData(BaseModel):
    """One respondent's climate survey result."""

    raw_scores: dict[str, int] = Field(default_factory=dict)  # question id -> 1..5
    section_averages: dict[str, float] = Field(default_factory=dict)  # section title -> mean
    overall_average: float = Field(ge=0.0, le=5.0)
    submission_date: datetime | None = None


class Person(BaseModel):
    """An employee or candidate with their latest assessment snapshot."""

    id: str = Field(..., min_length=1)
    name: str | None = None
    profile_code: str | None = None
    score_vector: ScoreVector | None = None
    department_id: str | None = None
    job_title: str | None = None
    karma_data: KarmaData | None = None
    climate_data: ClimateData | None = None


# ---------------------------------------------------------------------------
# Organisation tree
# ---------------------------------------------------------------------------
class OrgNode(BaseModel):
    """A unit in the organisation chart.

    ``persisted`` is False for nodes created in an editor session that have not
    been stored yet; their ``id`` is a temporary key.
    """

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    type: OrgNodeType = "team"
    is_cultural_driver: bool = False
    persisted: bool = True
    children: list[OrgNode] = Field(default_factory=list)


class CompanyProfile(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    industry: str = ""
    size_range: str = ""
    culture_values: list[str] = Field(default_factory=list)
    structure: OrgNode
