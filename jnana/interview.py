"""Boundary normalisation for the external interview-analysis result.

The analysis service returns ``{summary, soft_skills, primary_values,
risk_factors, seniority_assessment}``. Anything missing or malformed is
replaced by a documented fallback before the engine sees it.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from jnana.org_models import KarmaData, SeniorityLevel


logger = logging.getLogger(__name__)


FALLBACK_KARMA_DATA = KarmaData(
    summary="Automatic analysis unavailable. The candidate completed the interview.",
    soft_skills=["Communication", "Commitment", "Adaptability"],
    primary_values=["Professionalism", "Growth"],
    risk_factors=["Insufficient data for a complete assessment"],
    seniority_assessment="Mid",
)


class InterviewAnalysis(BaseModel):
    """Raw shape of the interview-analysis service response."""

    summary: str | None = None
    soft_skills: list[str] | None = None
    primary_values: list[str] | None = None
    risk_factors: list[str] | None = None
    seniority_assessment: SeniorityLevel | None = None

    @field_validator("soft_skills", "primary_values", "risk_factors")
    @classmethod
    def drop_blank_entries(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return None
        return [item.strip() for item in v if item and item.strip()]

    @field_validator("summary")
    @classmethod
    def strip_summary(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    def to_karma_data(self) -> KarmaData:
        return KarmaData(
            summary=self.summary,
            soft_skills=self.soft_skills or [],
            primary_values=self.primary_values or [],
            risk_factors=self.risk_factors or [],
            seniority_assessment=self.seniority_assessment,
        )


def fallback_karma_data() -> KarmaData:
    return FALLBACK_KARMA_DATA.model_copy(deep=True)


def normalize_interview_result(raw: dict[str, Any] | None) -> KarmaData:
    """Validate a service payload; use the fallback when absent or invalid."""
    if raw is None:
        logger.warning("Interview analysis missing, using fallback")
        return fallback_karma_data()
    try:
        analysis = InterviewAnalysis.model_validate(raw)
    except ValidationError:
        logger.warning("Interview analysis payload invalid, using fallback", exc_info=True)
        return fallback_karma_data()
    return analysis.to_karma_data()
