"""Tests for jnana/engine/report.py."""

from jnana.engine.report import PAIR_NOT_FOUND, POLE_NOT_FOUND, compose_report
from jnana.job_database import JobDatabase, create_default_job_database
from jnana.org_models import KarmaData, Person
from jnana.riasec_content import RIASEC_DESCRIPTIONS, RIASEC_PAIRS
from jnana.riasec_types import ScoreVector
import pytest


@pytest.fixture
def vector():
    # ranked E, C, I
    return ScoreVector(R=4, I=18, A=2, S=9, E=27, C=21)


class TestComposeReport:
    def test_fixed_section_order(self, vector):
        sections = compose_report(vector, create_default_job_database())
        assert [s.type for s in sections] == ["poles", "dynamics", "jobs"]

    def test_poles_in_ranked_order_with_scores(self, vector):
        poles = compose_report(vector, create_default_job_database())[0]
        e_pos = poles.content.index(RIASEC_DESCRIPTIONS["E"].title)
        c_pos = poles.content.index(RIASEC_DESCRIPTIONS["C"].title)
        i_pos = poles.content.index(RIASEC_DESCRIPTIONS["I"].title)
        assert e_pos < c_pos < i_pos
        assert "(Score: 27)" in poles.content
        assert RIASEC_DESCRIPTIONS["E"].quotes[0] in poles.content

    def test_three_pair_narratives(self, vector):
        dynamics = compose_report(vector, create_default_job_database())[1]
        assert dynamics.content.count("### Dynamic:") == 3
        for key in ("CE", "EI", "CI"):
            assert RIASEC_PAIRS[key] in dynamics.content

    def test_missing_pair_uses_placeholder(self, vector):
        dynamics = compose_report(vector, create_default_job_database(), pairs={})[1]
        assert dynamics.content.count(PAIR_NOT_FOUND) == 3

    def test_missing_pole_uses_placeholder(self, vector):
        poles = compose_report(vector, create_default_job_database(), poles={})[0]
        assert poles.content.count(POLE_NOT_FOUND) == 3

    def test_jobs_use_sorted_key(self, vector):
        jobs = compose_report(vector, create_default_job_database())[2]
        assert "**E-C-I**" in jobs.content
        assert "Chief Executive Officer" in jobs.content

    def test_jobs_fall_back_to_generic(self, vector):
        jobs = compose_report(vector, JobDatabase({}))[2]
        assert "Specialist Consultant" in jobs.content

    def test_person_without_karma_has_no_behaviour_section(self, vector):
        person = Person(id="p1", name="Ada")
        sections = compose_report(vector, create_default_job_database(), person=person)
        assert len(sections) == 3

    def test_behaviour_section_renders_present_fields_only(self, vector):
        person = Person(
            id="p1",
            karma_data=KarmaData(summary="Calm and precise.", primary_values=["Integrity"]),
        )
        sections = compose_report(vector, create_default_job_database(), person=person)
        karma = sections[-1]
        assert karma.type == "karma"
        assert "Calm and precise." in karma.content
        assert "* Integrity" in karma.content
        assert "soft skills" not in karma.content
        assert "seniority" not in karma.content
        assert "risks" not in karma.content

    def test_empty_karma_data_omits_section(self, vector):
        person = Person(id="p1", karma_data=KarmaData())
        sections = compose_report(vector, create_default_job_database(), person=person)
        assert [s.type for s in sections] == ["poles", "dynamics", "jobs"]
