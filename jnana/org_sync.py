"""Org chart edits as an explicit operation log.

An edited tree is turned into ``delete`` / ``create`` / ``update`` operations
once, then applied to a flat node store in a single step. New nodes are
recognised by ``OrgNode.persisted``, never by the shape of their id.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Literal
import uuid

from pydantic import BaseModel, Field

from jnana.engine.org_tree import iter_org
from jnana.org_models import OrgNode, OrgNodeType


logger = logging.getLogger(__name__)

OperationKind = Literal["create", "update", "delete"]


class OrgNodeRow(BaseModel):
    """Stored form of a node: flat, with a parent pointer."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    type: OrgNodeType
    parent_id: str | None = None
    is_cultural_driver: bool = False
    sort_order: int = Field(default=0, ge=0)


class OrgOperation(BaseModel):
    """One step of a sync plan. ``node_id`` is temporary for creates."""

    kind: OperationKind
    node_id: str
    parent_id: str | None = None
    name: str | None = None
    type: OrgNodeType | None = None
    is_cultural_driver: bool = False
    sort_order: int = 0


# ---------------------------------------------------------------------------
# Planning
# ---------------------------------------------------------------------------
def plan_org_sync(edited_root: OrgNode, existing_ids: list[str]) -> list[OrgOperation]:
    """Deletes first, then creates/updates in pre-order (parents before children)."""
    persisted_in_tree = {node.id for node, _ in iter_org(edited_root) if node.persisted}
    operations = [
        OrgOperation(kind="delete", node_id=node_id)
        for node_id in existing_ids
        if node_id not in persisted_in_tree
    ]

    for node, parent in iter_org(edited_root):
        sort_order = 0 if parent is None else next(
            i for i, sibling in enumerate(parent.children) if sibling is node
        )
        operations.append(OrgOperation(
            kind="update" if node.persisted else "create",
            node_id=node.id,
            parent_id=parent.id if parent is not None else None,
            name=node.name,
            type=node.type,
            is_cultural_driver=node.is_cultural_driver,
            sort_order=sort_order,
        ))
    return operations


# ---------------------------------------------------------------------------
# Applying
# ---------------------------------------------------------------------------
def _new_id() -> str:
    return str(uuid.uuid4())


def apply_org_operations(
    rows: dict[str, OrgNodeRow],
    operations: list[OrgOperation],
    id_factory: Callable[[], str] = _new_id,
) -> tuple[dict[str, OrgNodeRow], dict[str, str]]:
    """Apply *operations* to a copy of *rows*.

    Returns the new store and the temporary → stored id map for created
    nodes. Deleting a node also deletes its stored descendants, except those
    the same batch updates (moved elsewhere), together with their subtrees.

    Raises:
        ValueError: If an operation references an unknown node or parent.
            *rows* is left untouched.
    """
    store = dict(rows)
    id_map: dict[str, str] = {}
    kept = {op.node_id for op in operations if op.kind == "update"}

    for op in operations:
        if op.kind == "delete":
            for row_id in _subtree_ids(store, op.node_id, kept):
                store.pop(row_id, None)
            continue

        parent_id = id_map.get(op.parent_id, op.parent_id) if op.parent_id else None
        if parent_id is not None and parent_id not in store:
            raise ValueError(f"Operation on '{op.node_id}' references unknown parent '{op.parent_id}'")

        if op.kind == "create":
            stored_id = id_factory()
            id_map[op.node_id] = stored_id
        else:
            if op.node_id not in store:
                raise ValueError(f"Cannot update unknown node '{op.node_id}'")
            stored_id = op.node_id

        store[stored_id] = OrgNodeRow(
            id=stored_id,
            name=op.name or "",
            type=op.type or "team",
            parent_id=parent_id,
            is_cultural_driver=op.is_cultural_driver,
            sort_order=op.sort_order,
        )

    logger.debug("Applied %d org operations (%d created)", len(operations), len(id_map))
    return store, id_map


def _subtree_ids(store: dict[str, OrgNodeRow], root_id: str, kept: set[str]) -> list[str]:
    """*root_id* and its stored descendants, not descending into *kept* nodes."""
    ids = [root_id]
    frontier = [root_id]
    while frontier:
        current = frontier.pop()
        children = [
            row.id for row in store.values()
            if row.parent_id == current and row.id not in kept
        ]
        ids.extend(children)
        frontier.extend(children)
    return ids


def build_tree(rows: dict[str, OrgNodeRow]) -> OrgNode | None:
    """Rebuild the nested tree from a flat store; None when there is no root row."""
    roots = [row for row in rows.values() if row.parent_id is None]
    if not roots:
        return None

    def _build(row: OrgNodeRow) -> OrgNode:
        children = sorted(
            (r for r in rows.values() if r.parent_id == row.id),
            key=lambda r: r.sort_order,
        )
        return OrgNode(
            id=row.id,
            name=row.name,
            type=row.type,
            is_cultural_driver=row.is_cultural_driver,
            children=[_build(child) for child in children],
        )

    return _build(roots[0])
