"""Tests for jnana/engine/org_tree.py."""

from jnana.engine.org_tree import (
    collect_node_ids,
    find_node,
    find_parent,
    iter_org,
    node_depth,
    occupants,
    walk_org,
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
            OrgNode(
                id="sales",
                name="Sales",
                type="department",
                children=[OrgNode(id="north", name="North"), OrgNode(id="south", name="South")],
            ),
            OrgNode(id="rnd", name="R&D", type="department", is_cultural_driver=True),
        ],
    )


class TestWalk:
    def test_pre_order(self, org):
        assert [n.id for n, _ in iter_org(org)] == ["root", "sales", "north", "south", "rnd"]

    def test_visitor_receives_parent(self, org):
        seen = []
        walk_org(org, lambda node, parent: seen.append((node.id, parent.id if parent else None)))
        assert seen == [
            ("root", None),
            ("sales", "root"),
            ("north", "sales"),
            ("south", "sales"),
            ("rnd", "root"),
        ]

    def test_single_node(self):
        lone = OrgNode(id="only", name="Only", type="root")
        assert [(n.id, p) for n, p in iter_org(lone)] == [("only", None)]

    def test_collect_with_predicate(self, org):
        assert collect_node_ids(org, lambda n: n.is_cultural_driver) == ["rnd"]
        assert len(collect_node_ids(org)) == 5


class TestLookups:
    def test_find_node(self, org):
        assert find_node(org, "south").name == "South"
        assert find_node(org, "missing") is None

    def test_find_parent(self, org):
        assert find_parent(org, "north").id == "sales"
        assert find_parent(org, "root") is None
        assert find_parent(org, "missing") is None

    def test_node_depth(self, org):
        assert node_depth(org, "root") == 0
        assert node_depth(org, "rnd") == 1
        assert node_depth(org, "south") == 2
        assert node_depth(org, "missing") is None

    def test_occupants_exclude_descendants(self, org):
        people = [
            Person(id="a", department_id="sales"),
            Person(id="b", department_id="north"),
            Person(id="c", department_id="sales"),
        ]
        assert [p.id for p in occupants(org.children[0], people)] == ["a", "c"]
