"""Structural diff - side-by-side comparison of JSON and YAML documents."""

from __future__ import annotations

from structural_diff.algorithm.differ import DiffNode, DiffType, StructuralDiffer
from structural_diff.algorithm.flatten import FlatRow, RowType, flatten
from structural_diff.algorithm.stats import collect_stats
from structural_diff.api import ABSENT, build_report, diff_texts, diff_values
from structural_diff.collapse import CollapseState
from structural_diff.config import SessionConfig
from structural_diff.result import DiffOutcome, DiffReport, DiffStats, ParseResult
from structural_diff.session import DiffSession
from structural_diff.tree.builder import TreeBuilder, build_tree
from structural_diff.tree.nodes import NodeKind, ValueNode

__version__: str = "0.1.0"
__all__: list[str] = [
    "ABSENT",
    "CollapseState",
    "DiffNode",
    "DiffOutcome",
    "DiffReport",
    "DiffSession",
    "DiffStats",
    "DiffType",
    "FlatRow",
    "NodeKind",
    "ParseResult",
    "RowType",
    "SessionConfig",
    "StructuralDiffer",
    "TreeBuilder",
    "ValueNode",
    "build_report",
    "build_tree",
    "collect_stats",
    "diff_texts",
    "diff_values",
    "flatten",
]
