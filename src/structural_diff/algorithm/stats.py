"""Leaf-level edit counts for a full DiffNode tree.

Only leaves are counted.  A wholly added or removed container contributes its
descendant leaves, never itself, and a changed container contributes nothing
beyond its changed descendants.  Collapse state is ignored.
"""

from __future__ import annotations

from structural_diff.algorithm.differ import DiffNode, DiffType
from structural_diff.result import DiffStats

__all__ = ["collect_stats"]


def collect_stats(root: DiffNode | None) -> DiffStats:
    """Count added, removed and changed leaves below (and including) ``root``.

    Counting rules:
    - ``added``:   ``diff_type == ADDED`` and no child diffs defined.
    - ``removed``: ``diff_type == REMOVED`` and no child diffs defined.
    - ``changed``: ``diff_type == CHANGED`` and not collapsible (primitive
      change or kind change).

    An empty container that was added or removed has an empty (not missing)
    child tuple and is therefore not counted.

    Args:
        root: Root of the diff tree, or None when no diff exists.

    Returns:
        A DiffStats; all zeros when ``root`` is None.
    """
    added = removed = changed = 0
    if root is None:
        return DiffStats(added, removed, changed)

    stack = [root]
    while stack:
        node = stack.pop()
        if node.diff_type == DiffType.ADDED and node.child_diffs is None:
            added += 1
        elif node.diff_type == DiffType.REMOVED and node.child_diffs is None:
            removed += 1
        elif node.diff_type == DiffType.CHANGED and not node.is_collapsible:
            changed += 1
        if node.child_diffs:
            stack.extend(node.child_diffs)

    return DiffStats(added=added, removed=removed, changed=changed)
