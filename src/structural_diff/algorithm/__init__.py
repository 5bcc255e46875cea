"""Algorithm subpackage: structural differ, flattener and stats aggregator.

Re-exports:
- StructuralDiffer, compare_nodes, DiffNode, DiffType, canonical_form
- flatten, iter_visible, FlatRow, RowType
- collect_stats
"""

from structural_diff.algorithm.differ import (
    DiffNode,
    DiffType,
    StructuralDiffer,
    canonical_form,
    compare_nodes,
)
from structural_diff.algorithm.flatten import FlatRow, RowType, flatten, iter_visible
from structural_diff.algorithm.stats import collect_stats

__all__ = [
    "DiffNode",
    "DiffType",
    "FlatRow",
    "RowType",
    "StructuralDiffer",
    "canonical_form",
    "collect_stats",
    "compare_nodes",
    "flatten",
    "iter_visible",
]
