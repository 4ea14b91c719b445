"""A person's position in the organisation: unit, level, reports, manager.

All functions are *pure*.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from jnana.engine.leadership import manager_display_name, select_manager
from jnana.engine.org_tree import find_node, find_parent, iter_org, node_depth, occupants
from jnana.org_models import OrgNode, OrgNodeType, Person


_CONTEXT_MANAGER_KEYWORDS: tuple[str, ...] = ("manager", "director", "head", "ceo", "cto", "cfo", "lead")


class OrgContext(BaseModel):
    org_node_name: str = "Unassigned"
    org_node_type: OrgNodeType = "team"
    direct_reports: int = Field(default=0, ge=0)
    team_size: int = Field(default=0, ge=0)
    org_level: int = Field(default=0, ge=0)
    is_manager: bool = False
    manager_name: str | None = None


def find_manager_for_person(person: Person, org: OrgNode, people: list[Person]) -> Person | None:
    """Manager of the unit above *person*'s unit; None at the root or when unassigned."""
    if not person.department_id or person.department_id == org.id:
        return None
    parent = find_parent(org, person.department_id)
    if parent is None:
        return None
    return select_manager(parent, occupants(parent, people))


def org_context(person: Person, org: OrgNode, people: list[Person]) -> OrgContext:
    """Describe where *person* sits; defaults when the unit is unknown."""
    if not person.department_id:
        return OrgContext()
    node = find_node(org, person.department_id)
    if node is None:
        return OrgContext()

    team_size = len(occupants(node, people))
    direct_reports = sum(
        len(occupants(descendant, people))
        for descendant, _ in iter_org(node)
        if descendant.id != node.id
    )
    title = (person.job_title or "").lower()
    is_manager = direct_reports > 0 or any(k in title for k in _CONTEXT_MANAGER_KEYWORDS)

    manager = find_manager_for_person(person, org, people)
    return OrgContext(
        org_node_name=node.name,
        org_node_type=node.type,
        direct_reports=direct_reports,
        team_size=team_size,
        org_level=node_depth(org, node.id) or 0,
        is_manager=is_manager,
        manager_name=manager_display_name(manager) if manager is not None else None,
    )
