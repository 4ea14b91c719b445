"""Tests for jnana/engine/leadership.py."""

from jnana.engine.leadership import (
    analyze_leadership,
    has_manager_title,
    manager_display_name,
    select_manager,
)
from jnana.org_models import OrgNode, Person
import pytest


@pytest.fixture
def org():
    return OrgNode(
        id="root",
        name="Acme",
        type="root",
        children=[
            OrgNode(id="sales", name="Sales", type="department"),
            OrgNode(id="ops", name="Operations", type="department"),
        ],
    )


@pytest.fixture
def people():
    return [
        Person(id="boss", name="Grace", profile_code="E-C-I", job_title="CEO", department_id="root"),
        Person(id="s1", profile_code="E-C-I", department_id="sales"),
        Person(id="s2", profile_code="R-A-S", department_id="sales"),
        Person(id="o1", profile_code="E-C-A", department_id="ops"),
        Person(id="o2", department_id="ops"),
    ]


class TestManagerSelection:
    @pytest.mark.parametrize("title,expected", [
        ("Sales Manager", True),
        ("Head of Design", True),
        ("Team Lead", True),
        ("CEO", True),
        ("Developer", False),
        (None, False),
    ])
    def test_has_manager_title(self, title, expected):
        assert has_manager_title(Person(id="x", job_title=title)) is expected

    def test_keyword_title_wins(self):
        node = OrgNode(id="n", name="N")
        staff = [Person(id="a", job_title="Developer"), Person(id="b", job_title="Director")]
        assert select_manager(node, staff).id == "b"

    def test_falls_back_to_first_occupant(self):
        node = OrgNode(id="n", name="N")
        staff = [Person(id="a", job_title="Developer"), Person(id="b", job_title="Tester")]
        assert select_manager(node, staff).id == "a"

    def test_cultural_driver_takes_first_occupant(self):
        node = OrgNode(id="n", name="N", is_cultural_driver=True)
        staff = [Person(id="a", job_title="Developer"), Person(id="b", job_title="Director")]
        assert select_manager(node, staff).id == "a"

    def test_empty_unit(self):
        assert select_manager(OrgNode(id="n", name="N"), []) is None

    def test_display_name_falls_back_to_id(self):
        assert manager_display_name(Person(id="p7")) == "p7"
        assert manager_display_name(Person(id="p7", name="Lin")) == "Lin"


class TestAnalyzeLeadership:
    def test_aggregates(self, org, people):
        result = analyze_leadership(org, people)
        # sales: 100 and 8, ops: 75 (o2 has no profile code)
        assert result.total_pairs_analyzed == 3
        assert result.global_alignment_index == 61
        assert result.friction_rate == 33
        assert result.distribution.high == 2
        assert result.distribution.medium == 0
        assert result.distribution.low == 1

    def test_teams_worst_first(self, org, people):
        teams = analyze_leadership(org, people).team_alignment
        assert [t.node_id for t in teams] == ["sales", "ops"]
        assert teams[0].average_fit == pytest.approx(54.0)
        assert teams[0].status == "Low"
        assert teams[1].status == "High"
        assert teams[0].manager_name == "Grace"

    def test_compares_with_parent_manager_not_own(self):
        org = OrgNode(
            id="root",
            name="Acme",
            type="root",
            children=[OrgNode(
                id="sales",
                name="Sales",
                type="department",
                children=[OrgNode(id="north", name="North")],
            )],
        )
        people = [
            Person(id="rep", profile_code="R-A-S", job_title="Sales Rep", department_id="sales"),
            Person(id="mgr", name="Bo", profile_code="E-C-I", job_title="Sales Manager", department_id="sales"),
            Person(id="n1", profile_code="E-C-I", department_id="north"),
        ]
        result = analyze_leadership(org, people)
        # root has no occupants, so only north is compared, against Bo
        assert result.total_pairs_analyzed == 1
        assert result.team_alignment[0].manager_name == "Bo"
        assert result.global_alignment_index == 100

    def test_superior_without_profile_code_skipped(self, org):
        people = [
            Person(id="boss", job_title="CEO", department_id="root"),
            Person(id="s1", profile_code="E-C-I", department_id="sales"),
        ]
        result = analyze_leadership(org, people)
        assert result.total_pairs_analyzed == 0
        assert result.global_alignment_index == 0
        assert result.team_alignment == []

    def test_empty_organisation(self, org):
        result = analyze_leadership(org, [])
        assert result.total_pairs_analyzed == 0
        assert result.friction_rate == 0
