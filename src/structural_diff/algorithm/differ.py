"""StructuralDiffer: position-by-position classification of two ValueNode trees.

Compares two optional ValueNode trees position by position and produces a
single DiffNode tree in which every node carries a DiffType.  The dispatch
has five cases, evaluated in order:

1. Only right present  -> ADDED, whole right subtree expanded into ADDED nodes.
2. Only left present   -> REMOVED, whole left subtree expanded into REMOVED nodes.
3. Neither present     -> degenerate UNCHANGED placeholder.
4. Kinds differ        -> CHANGED leaf; nested structure is not diffed.
5. Same kind           -> primitives by canonical value, containers by key union.

The key union for containers lists every key of the left side in left order,
followed by the right-only keys in right order.  This ordering is what the
user sees as row order and must stay deterministic.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from structural_diff.tree.builder import ROOT_PATH, child_path
from structural_diff.tree.nodes import NodeKind, ValueNode

__all__ = [
    "DiffNode",
    "DiffType",
    "StructuralDiffer",
    "canonical_form",
    "compare_nodes",
]


class DiffType(StrEnum):
    """Classification of one position in the comparison."""

    ADDED = auto()
    REMOVED = auto()
    CHANGED = auto()
    UNCHANGED = auto()


@dataclass(frozen=True, slots=True)
class DiffNode:
    """One position in the comparison of two documents.

    Attributes:
        path:           Canonical path, identical to the path of the paired
                        ValueNode(s).
        diff_type:      How this position differs between the two sides.
        depth:          Nesting depth, root = 0.
        is_collapsible: True iff this node has a container on a present side
                        and its children are shown in the diff.
        left:           ValueNode on the left side, borrowed, or None.
        right:          ValueNode on the right side, borrowed, or None.
        child_diffs:    Ordered child DiffNodes, or None when the node has no
                        children defined (primitive leaf or kind change).  An
                        empty tuple means an empty container.
    """

    path: str
    diff_type: DiffType
    depth: int = 0
    is_collapsible: bool = False
    left: ValueNode | None = None
    right: ValueNode | None = None
    child_diffs: tuple[DiffNode, ...] | None = None

    @property
    def is_leaf(self) -> bool:
        """True when no children are defined for this node."""
        return self.child_diffs is None


def canonical_form(value: Any) -> Any:
    """Return a comparable canonical form of a primitive value.

    Mirrors JSON serialisation semantics: booleans never compare equal to
    numbers, integral floats compare equal to the matching int, NaN equals
    NaN, and set members are compared without regard to order.
    """
    if isinstance(value, bool):
        return ("bool", value)
    if isinstance(value, (int, float)):
        if isinstance(value, float):
            if math.isnan(value):
                return ("number", "nan")
            if value.is_integer():
                return ("number", int(value))
        return ("number", value)
    if isinstance(value, (set, frozenset)):
        return ("set", frozenset(canonical_form(item) for item in value))
    return (type(value).__name__, value)


@dataclass(slots=True)
class _Pending:
    left: ValueNode | None
    right: ValueNode | None
    path: str
    depth: int
    parent: _Pending | None = None
    has_children: bool = False
    built: list[DiffNode] = field(default_factory=list)


class StructuralDiffer:
    """Builds a DiffNode tree from two optional ValueNode trees.

    The differ is stateless and total: every pair of optional ValueNodes,
    including (None, None), produces a DiffNode.  It walks both trees with an
    explicit stack, so document depth is not bounded by the interpreter's
    recursion limit.

    Example::

        from structural_diff.tree import build_tree

        differ = StructuralDiffer()
        root = differ.compare(build_tree({"a": 1}), build_tree({"a": 2}))
        root.diff_type                  # DiffType.CHANGED
        root.child_diffs[0].diff_type   # DiffType.CHANGED
    """

    def compare(
        self,
        left: ValueNode | None,
        right: ValueNode | None,
        path: str = ROOT_PATH,
        depth: int = 0,
    ) -> DiffNode:
        """Compare two optional ValueNodes found at the same position.

        Args:
            left:  ValueNode from the left document, or None if absent.
            right: ValueNode from the right document, or None if absent.
            path:  Canonical path of this position.
            depth: Nesting depth of this position.

        Returns:
            The DiffNode describing this position and everything below it.
        """
        root = _Pending(left, right, path, depth)
        order: list[_Pending] = []
        stack = [root]
        while stack:
            pending = stack.pop()
            order.append(pending)
            stack.extend(reversed(self._expand(pending)))

        # reverse pre-order finishes every child before its parent
        for pending in reversed(order[1:]):
            if pending.parent is not None:
                pending.parent.built.append(self._finish(pending))
        return self._finish(root)

    def _expand(self, pending: _Pending) -> list[_Pending]:
        """Return the child positions of ``pending`` in display order."""
        left, right = pending.left, pending.right

        if left is None or right is None:
            node = left if left is not None else right
            if node is None or node.children is None:
                return []
            pending.has_children = True
            return [
                _Pending(
                    child if left is not None else None,
                    child if right is not None else None,
                    child.path,
                    pending.depth + 1,
                    parent=pending,
                )
                for child in node.children
            ]

        if left.kind != right.kind or left.kind == NodeKind.PRIMITIVE:
            return []

        left_children = {c.key: c for c in left.children or ()}
        right_children = {c.key: c for c in right.children or ()}

        # dict keys keep insertion order: left keys first, then right-only keys
        all_keys = dict.fromkeys(left_children)
        all_keys.update(dict.fromkeys(right_children))

        is_array = left.kind == NodeKind.ARRAY
        pending.has_children = True
        return [
            _Pending(
                left_children.get(key),
                right_children.get(key),
                child_path(pending.path, key, is_array=is_array),
                pending.depth + 1,
                parent=pending,
            )
            for key in all_keys
        ]

    def _finish(self, pending: _Pending) -> DiffNode:
        """Classify ``pending`` once all of its children are finished."""
        left, right = pending.left, pending.right
        path, depth = pending.path, pending.depth
        child_diffs = tuple(reversed(pending.built)) if pending.has_children else None

        if left is None and right is not None:
            return DiffNode(
                path=path,
                diff_type=DiffType.ADDED,
                depth=depth,
                is_collapsible=right.is_container,
                right=right,
                child_diffs=child_diffs,
            )

        if left is not None and right is None:
            return DiffNode(
                path=path,
                diff_type=DiffType.REMOVED,
                depth=depth,
                is_collapsible=left.is_container,
                left=left,
                child_diffs=child_diffs,
            )

        if left is None or right is None:
            return DiffNode(path=path, diff_type=DiffType.UNCHANGED, depth=depth)

        if left.kind != right.kind:
            return DiffNode(
                path=path,
                diff_type=DiffType.CHANGED,
                depth=depth,
                left=left,
                right=right,
            )

        if left.kind == NodeKind.PRIMITIVE:
            equal = canonical_form(left.value) == canonical_form(right.value)
            return DiffNode(
                path=path,
                diff_type=DiffType.UNCHANGED if equal else DiffType.CHANGED,
                depth=depth,
                left=left,
                right=right,
            )

        has_changes = any(d.diff_type != DiffType.UNCHANGED for d in child_diffs or ())
        return DiffNode(
            path=path,
            diff_type=DiffType.CHANGED if has_changes else DiffType.UNCHANGED,
            depth=depth,
            is_collapsible=True,
            left=left,
            right=right,
            child_diffs=child_diffs,
        )


# Module-level differ (stateless, safe to share)
_differ = StructuralDiffer()


def compare_nodes(
    left: ValueNode | None,
    right: ValueNode | None,
    path: str = ROOT_PATH,
    depth: int = 0,
) -> DiffNode:
    """Functional shorthand for ``StructuralDiffer().compare(...)``."""
    return _differ.compare(left, right, path, depth)
