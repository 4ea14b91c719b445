"""Tests for jnana/climate_survey.py."""

from datetime import datetime, timezone

from jnana.climate_survey import (
    CLIMATE_SURVEY,
    ClimateQuestion,
    ClimateSection,
    climate_areas,
    missing_climate_answers,
    score_climate_survey,
)
import pytest


@pytest.fixture
def survey():
    return [
        ClimateSection(id="a", title="Belonging", questions=[
            ClimateQuestion(id="a1", text="One"),
            ClimateQuestion(id="a2", text="Two"),
        ]),
        ClimateSection(id="b", title="Pay", questions=[ClimateQuestion(id="b1", text="Three")]),
    ]


class TestCatalogue:
    def test_nine_sections(self):
        assert len(CLIMATE_SURVEY) == 9
        assert CLIMATE_SURVEY[0].title == "Sense of Belonging"
        assert CLIMATE_SURVEY[-1].title == "Identity"

    def test_question_ids_unique(self):
        ids = [q.id for s in CLIMATE_SURVEY for q in s.questions]
        assert len(ids) == len(set(ids))


class TestScoring:
    def test_section_and_overall_averages(self, survey):
        data = score_climate_survey({"a1": 4, "a2": 5, "b1": 2}, survey)
        assert data.section_averages == {"Belonging": 4.5, "Pay": 2.0}
        assert data.overall_average == pytest.approx(11 / 3)
        assert data.raw_scores == {"a1": 4, "a2": 5, "b1": 2}

    def test_unanswered_counts_as_zero(self, survey):
        data = score_climate_survey({"a1": 4}, survey)
        assert data.section_averages["Belonging"] == 2.0
        assert data.section_averages["Pay"] == 0.0

    @pytest.mark.parametrize("value", [0, 6, -1])
    def test_out_of_range_answer_raises(self, survey, value):
        with pytest.raises(ValueError, match="between 1 and 5"):
            score_climate_survey({"a1": value}, survey)

    def test_submission_date(self, survey):
        when = datetime(2024, 3, 1, tzinfo=timezone.utc)
        data = score_climate_survey({"a1": 3}, survey, submitted_at=when)
        assert data.submission_date == when

    def test_missing_answers_in_survey_order(self, survey):
        assert missing_climate_answers({"a2": 3}, survey) == ["a1", "b1"]
        assert missing_climate_answers({"a1": 1, "a2": 1, "b1": 1}, survey) == []


class TestAreas:
    def test_critical_and_strong(self, survey):
        data = score_climate_survey({"a1": 4, "a2": 5, "b1": 2}, survey)
        areas = climate_areas(data)
        assert areas.critical == ["Pay"]
        assert areas.strong == ["Belonging"]

    def test_middle_band_is_neither(self, survey):
        data = score_climate_survey({"a1": 3, "a2": 3, "b1": 3}, survey)
        areas = climate_areas(data)
        assert areas.critical == []
        assert areas.strong == []
