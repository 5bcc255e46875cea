"""Renderer-agnostic cell text for the side-by-side diff table.

``render_rows`` walks the same visible rows as the flattener, so a table
built from it always has exactly ``len(flatten(root, collapsed))`` rows and
the minimap markers line up with it.  Styling is reduced to a CellTone per
side; turning tones into colours is left to the presentation layer.
"""

from __future__ import annotations

import json
from collections.abc import Collection, Sequence
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from structural_diff.algorithm.differ import DiffNode, DiffType
from structural_diff.algorithm.flatten import RowType, iter_visible
from structural_diff.tree.nodes import NodeKind, ValueNode

__all__ = [
    "CellTone",
    "RenderedRow",
    "format_scalar",
    "render_rows",
    "render_text",
]

MISSING_CELL = "-"

_DIFF_MARKERS = {
    DiffType.ADDED: "+",
    DiffType.REMOVED: "-",
    DiffType.CHANGED: "~",
    DiffType.UNCHANGED: " ",
}


class CellTone(StrEnum):
    """Highlight of one cell.

    - ADDED:   content that exists only in, or changed to, the right side.
    - REMOVED: content that exists only in, or changed from, the left side.
    - NEUTRAL: the placeholder side of an added or removed row.
    - PLAIN:   unchanged content.
    """

    ADDED = auto()
    REMOVED = auto()
    NEUTRAL = auto()
    PLAIN = auto()


_TONES: dict[DiffType, tuple[CellTone, CellTone]] = {
    DiffType.ADDED: (CellTone.NEUTRAL, CellTone.ADDED),
    DiffType.REMOVED: (CellTone.REMOVED, CellTone.NEUTRAL),
    DiffType.CHANGED: (CellTone.REMOVED, CellTone.ADDED),
    DiffType.UNCHANGED: (CellTone.PLAIN, CellTone.PLAIN),
}


@dataclass(frozen=True, slots=True)
class RenderedRow:
    """Display data for one row of the side-by-side table."""

    path: str
    row_type: RowType
    diff_type: DiffType
    depth: int
    left_text: str
    right_text: str
    left_tone: CellTone
    right_tone: CellTone
    toggle_left: bool = False
    toggle_right: bool = False
    collapsed: bool = False


def format_scalar(value: Any) -> str:
    """Render a primitive the way it would appear in JSON."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _is_array_element(node: ValueNode) -> bool:
    return node.path.endswith(f"[{node.key}]")


def _node_cell(node: ValueNode | None, summarize: bool) -> str:
    if node is None:
        return MISSING_CELL

    prefix = ""
    if node.depth > 0 and not _is_array_element(node):
        prefix = f"{json.dumps(node.key, ensure_ascii=False)}: "

    trailer = "" if node.is_last else ","
    if node.kind == NodeKind.OBJECT:
        if summarize:
            return f"{prefix}{{...}} {node.child_count} fields{trailer}"
        return f"{prefix}{{"
    if node.kind == NodeKind.ARRAY:
        if summarize:
            return f"{prefix}[...] {node.child_count} items{trailer}"
        return f"{prefix}[ {node.child_count} items"
    return f"{prefix}{format_scalar(node.value)}{trailer}"


def _close_cells(diff: DiffNode) -> tuple[str, str]:
    sides = [n for n in (diff.left, diff.right) if n is not None]
    bracket = "]" if any(n.kind == NodeKind.ARRAY for n in sides) else "}"
    comma = "," if any(not n.is_last for n in sides) else ""
    closing = f"{bracket}{comma}"
    return (
        closing if diff.left is not None else "",
        closing if diff.right is not None else "",
    )


def render_rows(
    root: DiffNode, collapsed: Collection[str] = frozenset()
) -> list[RenderedRow]:
    """Return display rows for ``root`` honouring ``collapsed``.

    A container side of a non-collapsible node (a kind change) is shown in
    its summarised form, since its children are not part of the diff.
    """
    rows: list[RenderedRow] = []
    for node, row_type in iter_visible(root, collapsed):
        is_collapsed = node.path in collapsed
        left_tone, right_tone = _TONES[node.diff_type]
        if row_type == RowType.CLOSE:
            left_text, right_text = _close_cells(node)
        else:
            summarize = is_collapsed or not node.is_collapsible
            left_text = _node_cell(node.left, summarize)
            right_text = _node_cell(node.right, summarize)
        is_node_row = row_type == RowType.NODE
        rows.append(
            RenderedRow(
                path=node.path,
                row_type=row_type,
                diff_type=node.diff_type,
                depth=node.depth,
                left_text=left_text,
                right_text=right_text,
                left_tone=left_tone,
                right_tone=right_tone,
                toggle_left=is_node_row and node.is_collapsible and node.left is not None,
                toggle_right=is_node_row
                and node.is_collapsible
                and node.right is not None,
                collapsed=is_node_row and node.is_collapsible and is_collapsed,
            )
        )
    return rows


def render_text(
    rows: Sequence[RenderedRow],
    left_label: str = "Original",
    right_label: str = "Modified",
    indent: int = 2,
) -> str:
    """Lay ``rows`` out as a plain two-column text table.

    Each line starts with a one-character diff marker (``+ - ~`` or space).

    Example::

        print(render_text(render_rows(root)))
        #   Original | Modified
        # ~ {        | {
        # ~   "a": 1 |   "a": 2
        # ~ }        | }
    """
    lefts = [" " * (indent * row.depth) + row.left_text for row in rows]
    rights = [" " * (indent * row.depth) + row.right_text for row in rows]
    width = max([len(left_label), *(len(text) for text in lefts)])

    lines = [f"  {left_label:<{width}} | {right_label}"]
    for row, left, right in zip(rows, lefts, rights, strict=True):
        marker = _DIFF_MARKERS[row.diff_type]
        lines.append(f"{marker} {left:<{width}} | {right}".rstrip())
    return "\n".join(lines)
