"""Job suggestion models and the bundled job lookup table."""

from __future__ import annotations

from pydantic import BaseModel, Field, RootModel

from jnana.riasec_types import DIMENSIONS, ScoreVector


class JobSuggestion(BaseModel):
    """A job title suggested for a profile key."""

    title: str = Field(..., min_length=1)
    sector: str = ""
    ideal_score: ScoreVector | None = None


class JobDatabase(RootModel[dict[str, list[JobSuggestion]]]):
    """``{profile key: [JobSuggestion, ...]}`` in insertion order."""

    def keys(self) -> list[str]:
        return list(self.root.keys())

    def get(self, key: str) -> list[JobSuggestion]:
        return self.root.get(key, [])

    def items(self) -> list[tuple[str, list[JobSuggestion]]]:
        return list(self.root.items())


def normalize_job_key(code: str) -> str:
    """Sorted-letters key: ``"E-C-I"`` and ``"ECI"`` both give ``"CEI"``."""
    return "".join(sorted(c for c in code.upper() if c in DIMENSIONS))


GENERIC_JOB_SUGGESTION = JobSuggestion(title="Specialist Consultant", sector="Various")


DEFAULT_JOB_DATABASE: dict[str, list[dict[str, str]]] = {
    "ECI": [
        {"title": "Chief Executive Officer", "sector": "Management"},
        {"title": "Sales Director", "sector": "Sales"},
    ],
    "SEC": [
        {"title": "Human Resources Manager", "sector": "HR"},
        {"title": "Account Manager", "sector": "Sales"},
    ],
    "RIC": [
        {"title": "Mechanical Engineer", "sector": "Industry"},
        {"title": "Analyst Programmer", "sector": "IT/Tech"},
    ],
    "SCA": [
        {"title": "Customer Support Specialist", "sector": "Service"},
        {"title": "Team Coordinator", "sector": "Management"},
    ],
    "IAS": [
        {"title": "UX/UI Designer", "sector": "Creative"},
        {"title": "Marketing Specialist", "sector": "Marketing"},
    ],
    "EIC": [
        {"title": "Business Development Manager", "sector": "Sales"},
        {"title": "Product Owner", "sector": "IT/Tech"},
    ],
}


def create_default_job_database() -> JobDatabase:
    """Return a fresh copy of the bundled job table."""
    return JobDatabase.model_validate(DEFAULT_JOB_DATABASE)
