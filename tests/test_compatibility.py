"""Tests for jnana/engine/compatibility.py."""

from jnana.engine.compatibility import (
    INSUFFICIENT_DATA,
    compatibility,
    matched_values,
    shared_traits,
    trait_overlap_points,
)
from jnana.org_models import KarmaData, Person
import pytest


def _person(pid, code, values=None):
    karma = KarmaData(primary_values=values) if values is not None else None
    return Person(id=pid, profile_code=code, karma_data=karma)


class TestTraitOverlap:
    @pytest.mark.parametrize("shared,points", [(3, 60), (2, 45), (1, 20), (0, 5)])
    def test_points(self, shared, points):
        assert trait_overlap_points(shared) == points

    def test_shared_traits_unordered(self):
        assert shared_traits("E-C-I", "I-E-C") == ["E", "C", "I"]
        assert shared_traits("R-I-A", "S-E-C") == []

    def test_shared_count_symmetric(self):
        pairs = [("E-C-I", "E-S-A"), ("R-I-A", "A-R-C"), ("S-E-C", "R-I-A")]
        for a, b in pairs:
            assert len(shared_traits(a, b)) == len(shared_traits(b, a))


class TestMatchedValues:
    def test_substring_either_direction(self):
        matched = matched_values(["Innovation", "Team spirit"], ["innovation culture", "Spirit"])
        assert matched == ["Innovation", "Team spirit"]

    def test_no_match(self):
        assert matched_values(["Speed"], ["Care"]) == []


class TestCompatibility:
    def test_missing_profile_code(self):
        result = compatibility(_person("a", None), _person("b", "E-C-I"))
        assert result.score == 0
        assert result.reasons == [INSUFFICIENT_DATA]

    def test_identical_codes_without_values_rescaled_to_100(self):
        result = compatibility(_person("a", "E-C-I"), _person("b", "E-C-I"))
        assert result.score == 100
        assert len(result.reasons) == 2

    @pytest.mark.parametrize("code_b,expected", [("E-C-S", 75), ("E-R-A", 33), ("R-A-S", 8)])
    def test_rescaled_trait_only(self, code_b, expected):
        assert compatibility(_person("a", "E-C-I"), _person("b", code_b)).score == expected

    def test_empty_value_list_counts_as_missing(self):
        a = _person("a", "E-C-I", [])
        b = _person("b", "E-C-I", ["Trust"])
        result = compatibility(a, b)
        assert result.score == 100
        assert any(r.startswith("Partial analysis") for r in result.reasons)
        assert compatibility(b, a).score == 100

    def test_value_component_capped_at_40(self):
        a = _person("a", "R-A-S", ["Trust"])
        b = _person("b", "E-C-I", ["trust"])
        # 5 trait points + min(60, 40)
        assert compatibility(a, b).score == 45

    def test_partial_value_ratio(self):
        a = _person("a", "E-C-R", ["Trust", "Speed"])
        b = _person("b", "E-C-I", ["trust"])
        # 45 + 0.5 * 60
        assert compatibility(a, b).score == 75

    def test_value_mismatch_reason(self):
        a = _person("a", "E-C-I", ["Speed"])
        b = _person("b", "E-C-I", ["Care"])
        result = compatibility(a, b)
        assert result.score == 60
        assert any("mismatch" in r for r in result.reasons)

    def test_score_never_exceeds_100(self):
        a = _person("a", "E-C-I", ["Trust"])
        b = _person("b", "I-C-E", ["Trust"])
        assert compatibility(a, b).score == 100

    def test_asymmetric_when_value_counts_differ(self):
        a = _person("a", "E-C-I", ["Innovation", "Trust", "Speed"])
        b = _person("b", "E-C-I", ["innovation"])
        ab = compatibility(a, b).score
        ba = compatibility(b, a).score
        assert ab == 80
        assert ba == 100
        assert ab != ba
