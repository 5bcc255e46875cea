"""Public API functions for structural-diff.

This module provides the stateless entry points: ``diff_values`` compares two
already-parsed values, ``diff_texts`` parses two source texts first, and
``build_report`` turns two ParseResults into a DiffReport.  Each call builds
fresh trees; nothing is shared between calls.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Final, Literal

from structural_diff.algorithm.differ import DiffNode, DiffType, compare_nodes
from structural_diff.algorithm.stats import collect_stats
from structural_diff.formats import get_format
from structural_diff.protocols import DocumentFormat
from structural_diff.result import DiffOutcome, DiffReport, DiffStats, ParseResult
from structural_diff.tree.builder import build_tree

__all__ = ["ABSENT", "build_report", "diff_texts", "diff_tree", "diff_values"]

logger = logging.getLogger(__name__)


class _Absent(Enum):
    ABSENT = "ABSENT"

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent.ABSENT
"""Marker for a missing document, distinct from a parsed ``None``."""


def _as_parse_result(value: Any) -> ParseResult:
    if value is ABSENT:
        return ParseResult.absent()
    return ParseResult.document(value)


def diff_tree(left: ParseResult, right: ParseResult) -> DiffNode | None:
    """Return the DiffNode root for two valid parse results, else None.

    No tree is produced when either side is invalid or both are absent.
    """
    if not left.valid or not right.valid:
        return None
    if not left.present and not right.present:
        return None
    left_tree = build_tree(left.parsed) if left.present else None
    right_tree = build_tree(right.parsed) if right.present else None
    return compare_nodes(left_tree, right_tree)


def build_report(left: ParseResult, right: ParseResult) -> DiffReport:
    """Classify two parse results into a DiffReport.

    Outcome precedence: INVALID (either side failed to parse), then EMPTY
    (both documents absent), then IDENTICAL / DIFFERENT by the root's
    diff type.
    """
    root = diff_tree(left, right)
    if not left.valid or not right.valid:
        outcome = DiffOutcome.INVALID
    elif root is None:
        outcome = DiffOutcome.EMPTY
    elif root.diff_type == DiffType.UNCHANGED:
        outcome = DiffOutcome.IDENTICAL
    else:
        outcome = DiffOutcome.DIFFERENT

    stats = collect_stats(root) if root is not None else DiffStats()
    logger.debug("diff outcome=%s stats=%s", outcome, stats)
    return DiffReport(outcome=outcome, root=root, stats=stats, left=left, right=right)


def diff_values(left: Any = ABSENT, right: Any = ABSENT) -> DiffReport:
    """Compare two already-parsed document values.

    Args:
        left:  Left document value, or ``ABSENT`` when there is no document.
               ``None`` is a present ``null`` document.
        right: Right document value, or ``ABSENT``.

    Returns:
        A DiffReport.  Its outcome is never INVALID.
    """
    return build_report(_as_parse_result(left), _as_parse_result(right))


def diff_texts(
    left_text: str,
    right_text: str,
    fmt: Literal["json", "yaml", "yml"] | str | DocumentFormat = "json",
) -> DiffReport:
    """Parse two source texts and compare them.

    Args:
        left_text:  Left source text; blank text means no document.
        right_text: Right source text.
        fmt:        Format name or a DocumentFormat instance.

    Returns:
        A DiffReport.  Parse failures produce an INVALID outcome whose
        ``left.error`` / ``right.error`` carry the diagnostics.

    Raises:
        ValueError: If ``fmt`` is an unknown format name.
    """
    document_format = get_format(fmt)
    return build_report(document_format.parse(left_text), document_format.parse(right_text))
