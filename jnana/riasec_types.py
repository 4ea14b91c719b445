"""RIASEC dimension, questionnaire and score models.

Defines the six vocational-interest dimensions, the two questionnaire section
kinds (forced choice / checklist) and the six-dimension score vector.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Literal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Dimensions
# ---------------------------------------------------------------------------
Dimension = Literal["R", "I", "A", "S", "E", "C"]

# Canonical display order. Also the tie-break order for profile codes.
DIMENSIONS: tuple[Dimension, ...] = ("R", "I", "A", "S", "E", "C")

DIMENSION_LABELS: dict[str, str] = {
    "R": "Realistic",
    "I": "Investigative",
    "A": "Artistic",
    "S": "Social",
    "E": "Enterprising",
    "C": "Conventional",
}

PROFILE_CODE_DELIMITER = "-"


# ---------------------------------------------------------------------------
# Questionnaire models
# ---------------------------------------------------------------------------
class TestItem(BaseModel):
    """A selectable item; selecting it adds +1 to every tagged dimension."""

    __test__ = False  # not a pytest class

    id: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)
    impact_dimensions: list[Dimension] = Field(default_factory=list)


class ForcedChoiceQuestion(BaseModel):
    """A question with exactly two mutually exclusive options."""

    id: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)
    options: list[TestItem] = Field(..., min_length=2, max_length=2)


class ForcedChoiceSection(BaseModel):
    id: str = Field(..., min_length=1)
    title: str
    description: str = ""
    type: Literal["forced_choice"] = "forced_choice"
    questions: list[ForcedChoiceQuestion] = Field(default_factory=list)

    def iter_items(self) -> Iterator[TestItem]:
        for question in self.questions:
            yield from question.options


class ChecklistSection(BaseModel):
    id: str = Field(..., min_length=1)
    title: str
    description: str = ""
    type: Literal["checklist"] = "checklist"
    items: list[TestItem] = Field(default_factory=list)
    max_selection: int | None = Field(default=None, ge=1)

    def iter_items(self) -> Iterator[TestItem]:
        yield from self.items


TestSection = ForcedChoiceSection | ChecklistSection


# ---------------------------------------------------------------------------
# Score vector
# ---------------------------------------------------------------------------
class ScoreVector(BaseModel):
    """Per-dimension non-negative counts for one questionnaire pass."""

    R: int = Field(default=0, ge=0)
    I: int = Field(default=0, ge=0)  # noqa: E741
    A: int = Field(default=0, ge=0)
    S: int = Field(default=0, ge=0)
    E: int = Field(default=0, ge=0)
    C: int = Field(default=0, ge=0)

    def get(self, dim: str) -> int:
        return getattr(self, dim)

    def items(self) -> list[tuple[Dimension, int]]:
        """(dimension, score) pairs in canonical R,I,A,S,E,C order."""
        return [(dim, getattr(self, dim)) for dim in DIMENSIONS]

    def total(self) -> int:
        return sum(score for _, score in self.items())

    def __add__(self, other: ScoreVector) -> ScoreVector:
        return ScoreVector(**{dim: self.get(dim) + other.get(dim) for dim in DIMENSIONS})


def empty_score() -> ScoreVector:
    """Return an all-zero score vector."""
    return ScoreVector()


def parse_profile_code(code: str) -> list[Dimension]:
    """Extract the RIASEC letters of *code* in their written order.

    Accepts delimited (``"E-C-I"``) and compact (``"ECI"``) codes; any
    character that is not a dimension letter is dropped.
    """
    return [c for c in code.upper() if c in DIMENSIONS]  # type: ignore[misc]
