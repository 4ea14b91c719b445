"""Tests for jnana/engine/scoring.py."""

from jnana.engine.scoring import (
    calculate_profile_code,
    calculate_score,
    rank_dimensions,
    top_dimensions,
)
from jnana.riasec_types import (
    DIMENSIONS,
    ChecklistSection,
    ForcedChoiceQuestion,
    ForcedChoiceSection,
    ScoreVector,
    TestItem,
)
import pytest


@pytest.fixture
def small_bank():
    return [
        ForcedChoiceSection(
            id="s1",
            title="Forced",
            questions=[
                ForcedChoiceQuestion(
                    id="q1",
                    text="Pick one",
                    options=[
                        TestItem(id="q1_A", text="a", impact_dimensions=["S", "C"]),
                        TestItem(id="q1_B", text="b", impact_dimensions=["R", "I"]),
                    ],
                ),
                ForcedChoiceQuestion(
                    id="q2",
                    text="Pick one",
                    options=[
                        TestItem(id="q2_A", text="a", impact_dimensions=["E"]),
                        TestItem(id="q2_B", text="b", impact_dimensions=["I"]),
                    ],
                ),
                ForcedChoiceQuestion(
                    id="q3",
                    text="Pick one",
                    options=[
                        TestItem(id="q3_A", text="a", impact_dimensions=["R", "E"]),
                        TestItem(id="q3_B", text="neutral", impact_dimensions=[]),
                    ],
                ),
            ],
        ),
        ChecklistSection(
            id="s2",
            title="Checklist",
            items=[
                TestItem(id="s2_1", text="x", impact_dimensions=["A"]),
                TestItem(id="s2_2", text="y", impact_dimensions=["A"]),
                TestItem(id="s2_3", text="z", impact_dimensions=["C"]),
            ],
        ),
    ]


class TestCalculateScore:
    def test_empty_selection_is_zero(self, small_bank):
        vector = calculate_score(set(), small_bank)
        assert vector == ScoreVector()
        assert vector.total() == 0

    def test_two_dimension_item_adds_one_to_each(self, small_bank):
        vector = calculate_score({"q1_A", "q2_B"}, small_bank)
        assert vector == ScoreVector(R=0, I=1, A=0, S=1, E=0, C=1)

    def test_unknown_ids_ignored(self, small_bank):
        vector = calculate_score({"nope", "s2_1", "q99_A"}, small_bank)
        assert vector == ScoreVector(A=1)

    def test_neutral_option_contributes_nothing(self, small_bank):
        assert calculate_score({"q3_B"}, small_bank) == ScoreVector()

    def test_checklist_items_counted(self, small_bank):
        vector = calculate_score({"s2_1", "s2_2", "s2_3"}, small_bank)
        assert vector.A == 2
        assert vector.C == 1

    def test_idempotent(self, small_bank):
        ids = {"q1_B", "q2_A", "s2_3"}
        assert calculate_score(ids, small_bank) == calculate_score(ids, small_bank)

    def test_additive_over_disjoint_sets(self, small_bank):
        a = {"q1_A", "s2_1"}
        b = {"q2_B", "q3_A", "s2_3"}
        combined = calculate_score(a | b, small_bank)
        assert combined == calculate_score(a, small_bank) + calculate_score(b, small_bank)

    def test_default_bank(self):
        vector = calculate_score({"q1_A", "q2_B"})
        assert vector == ScoreVector(I=1, S=1, C=1)


class TestProfileCode:
    def test_unambiguous_ranking(self):
        vector = ScoreVector(R=28, I=25, A=5, S=10, E=12, C=20)
        assert calculate_profile_code(vector) == "R-I-C"

    def test_tied_vector_accepts_any_valid_ordering(self, small_bank):
        vector = calculate_score({"q1_A", "q2_B"}, small_bank)
        letters = calculate_profile_code(vector).split("-")
        assert sorted(letters) == ["C", "I", "S"]

    def test_ties_follow_canonical_order(self):
        vector = ScoreVector(R=1, I=1, A=1, S=1, E=1, C=1)
        assert calculate_profile_code(vector) == "R-I-A"

    @pytest.mark.parametrize("vector", [
        ScoreVector(),
        ScoreVector(C=9),
        ScoreVector(R=3, I=3, A=2, S=2, E=1, C=1),
        ScoreVector(R=0, I=40, A=0, S=7, E=0, C=0),
    ])
    def test_always_three_letters(self, vector):
        letters = calculate_profile_code(vector).split("-")
        assert len(letters) == 3
        assert len(set(letters)) == 3
        assert all(letter in DIMENSIONS for letter in letters)

    def test_pure_function_of_vector(self):
        vector = ScoreVector(R=2, I=8, A=8, S=1, E=0, C=3)
        assert calculate_profile_code(vector) == calculate_profile_code(vector.model_copy())


class TestRanking:
    def test_rank_descending(self):
        ranked = rank_dimensions(ScoreVector(R=1, I=5, A=3, S=0, E=4, C=2))
        assert [d for d, _ in ranked] == ["I", "E", "A", "C", "R", "S"]

    def test_top_dimensions(self):
        assert top_dimensions(ScoreVector(S=9, E=8, C=7), n=2) == ["S", "E"]
