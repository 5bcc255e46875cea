"""Result dataclasses shared by the parse layer, the engine and the session.

This module provides the data containers returned by parse, stats and
diff calls.  None of them validate their contents.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from structural_diff.algorithm.differ import DiffNode

__all__ = ["DiffOutcome", "DiffReport", "DiffStats", "ParseResult"]


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of parsing one side's source text.

    Attributes:
        valid:   False iff the text could not be parsed.
        error:   Human-readable diagnostic when ``valid`` is False, else None.
        parsed:  The parsed value.  Meaningful only when ``present`` is True;
                 a parsed ``null`` document is ``parsed=None, present=True``.
        present: False when the text holds no document at all (blank text,
                 or a YAML stream with only comments).  Absent documents do
                 not build a tree.
    """

    valid: bool
    error: str | None = None
    parsed: Any = None
    present: bool = False

    @classmethod
    def absent(cls) -> ParseResult:
        """A valid result carrying no document."""
        return cls(valid=True)

    @classmethod
    def document(cls, parsed: Any) -> ParseResult:
        """A valid result carrying ``parsed``."""
        return cls(valid=True, parsed=parsed, present=True)

    @classmethod
    def failure(cls, error: str) -> ParseResult:
        """An invalid result with a diagnostic message."""
        return cls(valid=False, error=error)


@dataclass(frozen=True, slots=True)
class DiffStats:
    """Leaf-level edit counts of a diff tree.

    Attributes:
        added:   Leaves present only on the right.
        removed: Leaves present only on the left.
        changed: Primitive value changes and kind changes.
    """

    added: int = 0
    removed: int = 0
    changed: int = 0

    @property
    def total(self) -> int:
        return self.added + self.removed + self.changed

    @property
    def has_changes(self) -> bool:
        return self.total > 0


class DiffOutcome(StrEnum):
    """The four externally distinguishable states of a comparison.

    - EMPTY:     both documents absent, no diff tree.
    - INVALID:   at least one side failed to parse, no diff tree.
    - IDENTICAL: a diff tree exists and its root is unchanged.
    - DIFFERENT: a diff tree exists and its root is not unchanged.

    The outcome follows the root's diff type, not the leaf counts, so a
    purely structural edit such as ``{}`` vs ``{"a": []}`` is DIFFERENT even
    though its DiffStats are all zero.
    """

    EMPTY = auto()
    INVALID = auto()
    IDENTICAL = auto()
    DIFFERENT = auto()


@dataclass(frozen=True, slots=True)
class DiffReport:
    """Full result of comparing two documents.

    Attributes:
        outcome: Which of the four states the comparison is in.
        root:    Root DiffNode, or None for EMPTY and INVALID outcomes.
        stats:   Leaf-level counts (all zeros when ``root`` is None).
        left:    Parse result of the left side.
        right:   Parse result of the right side.
    """

    outcome: DiffOutcome
    root: DiffNode | None
    stats: DiffStats
    left: ParseResult
    right: ParseResult
