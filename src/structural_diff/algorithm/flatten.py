"""Collapse-aware pre-order flattening of a DiffNode tree.

A collapsed node contributes exactly one row regardless of the size of its
subtree, so the cost of producing display rows is proportional to the number
of visible rows rather than the size of the tree.
"""

from __future__ import annotations

from collections.abc import Collection, Iterator
from dataclasses import dataclass
from enum import StrEnum, auto

from structural_diff.algorithm.differ import DiffNode, DiffType

__all__ = ["FlatRow", "RowType", "flatten", "iter_visible"]


class RowType(StrEnum):
    """Kind of a visible row: the node itself, or its closing bracket."""

    NODE = auto()
    CLOSE = auto()


@dataclass(frozen=True, slots=True)
class FlatRow:
    """One visible table row, used for counting and minimap positioning."""

    path: str
    diff_type: DiffType
    row_type: RowType


def iter_visible(
    root: DiffNode, collapsed: Collection[str] = frozenset()
) -> Iterator[tuple[DiffNode, RowType]]:
    """Yield ``(node, row_type)`` for every visible row in display order.

    Pre-order walk: the node row first; then, unless the node's path is in
    ``collapsed``, every child row; then, unless collapsed, a CLOSE row for
    collapsible nodes.

    Args:
        root:      Root of the diff tree.
        collapsed: Paths whose subtrees are hidden.
    """
    stack: list[tuple[DiffNode, RowType]] = [(root, RowType.NODE)]
    while stack:
        node, row_type = stack.pop()
        yield node, row_type
        if row_type == RowType.CLOSE or node.path in collapsed:
            continue
        if node.is_collapsible:
            stack.append((node, RowType.CLOSE))
        if node.child_diffs:
            stack.extend((child, RowType.NODE) for child in reversed(node.child_diffs))


def flatten(root: DiffNode, collapsed: Collection[str] = frozenset()) -> list[FlatRow]:
    """Return the visible rows of ``root`` as FlatRows.

    Example::

        rows = flatten(root, {"b"})
        [(r.path, r.row_type) for r in rows]
        # [("", "node"), ("a", "node"), ("b", "node"), ("", "close")]
    """
    return [
        FlatRow(path=node.path, diff_type=node.diff_type, row_type=row_type)
        for node, row_type in iter_visible(root, collapsed)
    ]
