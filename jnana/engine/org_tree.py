"""Pre-order traversal over the organisation chart.

The tree must be acyclic with unique node ids; cycles are not detected.
All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from jnana.org_models import OrgNode, Person


OrgVisitor = Callable[[OrgNode, "OrgNode | None"], None]


def iter_org(root: OrgNode, parent: OrgNode | None = None) -> Iterator[tuple[OrgNode, OrgNode | None]]:
    """Yield ``(node, parent)`` depth-first, parents before children."""
    yield root, parent
    for child in root.children:
        yield from iter_org(child, root)


def walk_org(root: OrgNode, visitor: OrgVisitor) -> None:
    """Call ``visitor(node, parent)`` once per node in pre-order."""
    for node, parent in iter_org(root):
        visitor(node, parent)


def collect_node_ids(root: OrgNode, predicate: Callable[[OrgNode], bool] | None = None) -> list[str]:
    return [node.id for node, _ in iter_org(root) if predicate is None or predicate(node)]


def find_node(root: OrgNode, node_id: str) -> OrgNode | None:
    return next((node for node, _ in iter_org(root) if node.id == node_id), None)


def find_parent(root: OrgNode, node_id: str) -> OrgNode | None:
    """Parent of *node_id*; None for the root or an unknown id."""
    return next((parent for node, parent in iter_org(root) if node.id == node_id), None)


def node_depth(root: OrgNode, node_id: str) -> int | None:
    """Levels below the root (root is 0); None when not found."""
    def _search(node: OrgNode, depth: int) -> int | None:
        if node.id == node_id:
            return depth
        for child in node.children:
            found = _search(child, depth + 1)
            if found is not None:
                return found
        return None

    return _search(root, 0)


def occupants(node: OrgNode, people: list[Person]) -> list[Person]:
    """People assigned directly to *node* (descendants excluded)."""
    return [p for p in people if p.department_id == node.id]
