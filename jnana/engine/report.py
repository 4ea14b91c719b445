"""Detailed result report composer.

Builds, in order: dominant traits, pairwise dynamics, career suggestions and
(when interview data exists) a behavioural analysis section. Missing content
degrades to placeholder text. All functions are *pure*.
"""

from __future__ import annotations

from itertools import combinations
from typing import Literal

from pydantic import BaseModel

from jnana.engine.job_matcher import suggest_jobs
from jnana.engine.scoring import rank_dimensions
from jnana.job_database import JobDatabase
from jnana.org_models import KarmaData, Person
from jnana.riasec_content import RIASEC_DESCRIPTIONS, RIASEC_PAIRS, PoleContent, pair_key
from jnana.riasec_types import DIMENSION_LABELS, PROFILE_CODE_DELIMITER, ScoreVector


SectionType = Literal["poles", "dynamics", "jobs", "karma"]

PAIR_NOT_FOUND = "Combination not found."
POLE_NOT_FOUND = "No description available for this dimension."


class ReportSection(BaseModel):
    """A titled markdown block of the report."""

    title: str
    content: str
    type: SectionType


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def compose_report(
    vector: ScoreVector,
    job_db: JobDatabase,
    person: Person | None = None,
    poles: dict[str, PoleContent] = RIASEC_DESCRIPTIONS,
    pairs: dict[str, str] = RIASEC_PAIRS,
) -> list[ReportSection]:
    """Return the report sections for *vector* (and *person*, if given)."""
    top3 = rank_dimensions(vector)[:3]

    sections = [
        _poles_section(top3, poles),
        _dynamics_section([dim for dim, _ in top3], pairs),
        _jobs_section([dim for dim, _ in top3], job_db),
    ]
    if person is not None and person.karma_data is not None:
        karma = _karma_section(person.karma_data)
        if karma is not None:
            sections.append(karma)
    return sections


# ---------------------------------------------------------------------------
# Section builders
# ---------------------------------------------------------------------------
def _poles_section(top3: list[tuple[str, int]], poles: dict[str, PoleContent]) -> ReportSection:
    blocks: list[str] = []
    for rank, (dim, score) in enumerate(top3, start=1):
        pole = poles.get(dim)
        if pole is None:
            blocks.append(f"### {rank}. {DIMENSION_LABELS.get(dim, dim)} (Score: {score})\n{POLE_NOT_FOUND}")
            continue
        lines = [
            f"### {rank}. {pole.title} (Score: {score})",
            pole.description,
            "",
            "**Distinctive traits:** " + ", ".join(pole.adjectives()),
            "",
            "**In their own words:**",
            *(f'"{quote}"' for quote in pole.quotes),
        ]
        blocks.append("\n".join(lines))
    return ReportSection(
        title="1. DOMINANT RIASEC TRAITS",
        content="\n\n".join(blocks),
        type="poles",
    )


def _dynamics_section(top3: list[str], pairs: dict[str, str]) -> ReportSection:
    blocks: list[str] = []
    for first, second in combinations(top3, 2):
        narrative = pairs.get(pair_key(first, second), PAIR_NOT_FOUND)
        heading = (
            f"### Dynamic: {first} and {second} "
            f"({DIMENSION_LABELS.get(first, first)} - {DIMENSION_LABELS.get(second, second)})"
        )
        blocks.append(f"{heading}\n{narrative}")
    return ReportSection(
        title="2. RELATIONAL DYNAMICS",
        content="\n\n".join(blocks),
        type="dynamics",
    )


def _jobs_section(top3: list[str], job_db: JobDatabase) -> ReportSection:
    ranked_code = PROFILE_CODE_DELIMITER.join(top3)
    sorted_key = "".join(sorted(top3))
    dominant_pair = (top3[0], top3[1]) if len(top3) >= 2 else None
    jobs = suggest_jobs(sorted_key, job_db, dominant_pair=dominant_pair)

    lines = [
        "### Recommended career paths",
        "",
        f"Based on your RIASEC code (**{ranked_code}**), these roles suit your profile:",
        "",
        *(f"* **{job.title}** — {job.sector}" for job in jobs),
    ]
    return ReportSection(
        title="3. RECOMMENDED CAREER OUTLETS",
        content="\n".join(lines),
        type="jobs",
    )


def _karma_section(karma: KarmaData) -> ReportSection | None:
    blocks: list[str] = []
    if karma.summary:
        blocks.append(f"### Profile summary\n{karma.summary}")
    if karma.seniority_assessment:
        blocks.append(f"**Detected seniority level:** {karma.seniority_assessment}")
    if karma.soft_skills:
        blocks.append(_bullets("Distinctive soft skills", karma.soft_skills))
    if karma.primary_values:
        blocks.append(_bullets("Values and cultural fit", karma.primary_values))
    if karma.risk_factors:
        blocks.append(_bullets("Areas of attention (risks & entropy)", karma.risk_factors))
    if not blocks:
        return None
    return ReportSection(
        title="4. BEHAVIOURAL ANALYSIS",
        content="\n\n".join(blocks),
        type="karma",
    )


def _bullets(heading: str, values: list[str]) -> str:
    return "\n".join([f"### {heading}", *(f"* {v}" for v in values)])
