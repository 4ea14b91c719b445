"""Climate survey catalogue and per-respondent scoring."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from jnana.org_models import ClimateData


CRITICAL_THRESHOLD = 3.0
STRONG_THRESHOLD = 4.0


class ClimateQuestion(BaseModel):
    id: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)


class ClimateSection(BaseModel):
    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    questions: list[ClimateQuestion] = Field(..., min_length=1)


class ClimateAreas(BaseModel):
    critical: list[str] = Field(default_factory=list)
    strong: list[str] = Field(default_factory=list)


def _section(section_id: str, title: str, questions: list[tuple[str, str]]) -> ClimateSection:
    return ClimateSection(
        id=section_id,
        title=title,
        questions=[ClimateQuestion(id=qid, text=text) for qid, text in questions],
    )


CLIMATE_SURVEY: list[ClimateSection] = [
    _section("sec_belonging", "Sense of Belonging", [
        ("bel_1", "I am proud when I say I work at my company."),
        ("bel_2", "I recommend my company as a good place to work."),
        ("bel_3", "My company motivates me to do my best in my job."),
    ]),
    _section("sec_org_change", "Organisation and Change", [
        ("org_1", "Overall I trust the choices made by senior management."),
        ("org_2", "Change processes are managed well."),
        ("org_3", "It is easy to get the information I need in the company."),
        ("org_4", "Organisational tasks and roles are well defined."),
    ]),
    _section("sec_my_job", "My Job", [
        ("job_1", "My job is interesting enough."),
        ("job_2", "I can choose how to carry out my work (autonomy)."),
        ("job_3", "My working hours allow a good balance between work and private life."),
    ]),
    _section("sec_remuneration", "My Pay", [
        ("rem_1", "My salary reflects the level of my performance."),
        ("rem_2", "My salary is reasonable compared with similar positions elsewhere."),
    ]),
    _section("sec_boss", "Relationship with My Supervisor", [
        ("boss_1", "My supervisor is open to the ideas I propose."),
        ("boss_2", "I receive regular feedback on my work from my supervisor."),
        ("boss_3", "My supervisor treats people fairly."),
    ]),
    _section("sec_unit", "My Unit (Team)", [
        ("unit_1", "People in my unit can count on each other when in difficulty."),
        ("unit_2", "People in my unit work together to find the best way of working."),
    ]),
    _section("sec_responsibility", "Responsibility", [
        ("resp_1", "I have autonomy in making decisions in my work."),
        ("resp_2", "I feel responsible for my team's results."),
    ]),
    _section("sec_human", "Human Side", [
        ("hum_1", "The working environment is welcoming and positive."),
        ("hum_2", "I feel respected and listened to by my colleagues."),
    ]),
    _section("sec_identity", "Identity", [
        ("ident_1", "I share the values and mission of the organisation."),
        ("ident_2", "I feel an integral part of this company."),
    ]),
]


def missing_climate_answers(
    answers: dict[str, int],
    survey: list[ClimateSection] = CLIMATE_SURVEY,
) -> list[str]:
    """Question ids without an answer, in survey order."""
    return [q.id for section in survey for q in section.questions if q.id not in answers]


def score_climate_survey(
    answers: dict[str, int],
    survey: list[ClimateSection] = CLIMATE_SURVEY,
    submitted_at: datetime | None = None,
) -> ClimateData:
    """Turn 1..5 answers into section averages and an overall average.

    Section averages are keyed by section title; unanswered questions count
    as 0. The overall average is taken over all raw answers.
    """
    for question_id, value in answers.items():
        if not 1 <= value <= 5:
            raise ValueError(f"Answer to '{question_id}' must be between 1 and 5, got {value}")

    section_averages: dict[str, float] = {}
    total = 0
    question_count = 0
    for section in survey:
        section_sum = sum(answers.get(q.id, 0) for q in section.questions)
        section_averages[section.title] = section_sum / len(section.questions)
        total += section_sum
        question_count += len(section.questions)

    return ClimateData(
        raw_scores=dict(answers),
        section_averages=section_averages,
        overall_average=total / question_count if question_count else 0.0,
        submission_date=submitted_at or datetime.now(timezone.utc),
    )


def climate_areas(data: ClimateData) -> ClimateAreas:
    """Sections below 3 (critical) and at or above 4 (strong)."""
    return ClimateAreas(
        critical=[name for name, value in data.section_averages.items() if value < CRITICAL_THRESHOLD],
        strong=[name for name, value in data.section_averages.items() if value >= STRONG_THRESHOLD],
    )
