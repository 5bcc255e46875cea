"""DiffSession: stateful orchestrator for one side-by-side comparison view.

Wires a DocumentFormat (behind a ParseCache), the differ, the flattener,
the stats aggregator, the collapse state and the minimap geometry together.

Architecture:
- Editing either text invalidates the report.  The report (parse results,
  diff tree, stats, outcome) is recomputed lazily on next access, from
  scratch; there is no incremental re-diffing.
- Rows depend on the report and on the collapse state.  They are recomputed
  lazily whenever either has changed since the last access.
- The collapse state survives text edits, so a collapsed path stays
  collapsed as long as it exists in the new tree.
- Parsing goes through a per-session LRU cache: editing one side never
  re-parses the other.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from structural_diff.algorithm.flatten import FlatRow, flatten
from structural_diff.api import build_report
from structural_diff.cache import ParseCache
from structural_diff.collapse import CollapseState
from structural_diff.config import SessionConfig
from structural_diff.formats import get_format
from structural_diff.navigator import (
    Band,
    MinimapMarker,
    ScrollMetrics,
    click_ratio,
    marker_bands,
    scroll_target,
    viewport_band,
)
from structural_diff.render import RenderedRow, render_rows, render_text
from structural_diff.result import DiffOutcome, DiffReport, DiffStats

if TYPE_CHECKING:
    from collections.abc import Callable

    from structural_diff.algorithm.differ import DiffNode
    from structural_diff.protocols import DocumentFormat

__all__ = ["DiffSession"]

logger = logging.getLogger(__name__)

IDENTICAL_MESSAGE = "Files are identical"
NO_CONTENT_MESSAGE = "No content to compare"


class DiffSession:
    """One comparison view: two texts, a collapse state and derived data.

    Example::

        session = DiffSession("json")
        session.set_left_text('{"a": 1, "b": {"c": 1}}')
        session.set_right_text('{"a": 2, "b": {"c": 1}}')
        session.outcome            # DiffOutcome.DIFFERENT
        session.stats              # DiffStats(added=0, removed=0, changed=1)
        session.toggle("b")
        [r.path for r in session.rows]
        # ['', 'a', 'b', '']
    """

    def __init__(
        self,
        fmt: str | DocumentFormat = "json",
        config: SessionConfig | None = None,
    ) -> None:
        """Initialise the session.

        Args:
            fmt:    Format name ("json", "yaml", "yml") or a DocumentFormat.
            config: Labels, cache size and minimap parameters.  Defaults to
                    ``SessionConfig()``.

        Raises:
            ValueError: If ``fmt`` is an unknown format name.
        """
        self._config = config if config is not None else SessionConfig()
        self._format = ParseCache(get_format(fmt), max_size=self._config.parse_cache_size)
        self._collapse = CollapseState()
        self._left_text = ""
        self._right_text = ""
        self.left_label = self._config.left_label
        self.right_label = self._config.right_label

        self._report: DiffReport | None = None
        self._rows: list[FlatRow] | None = None
        self._rows_key: frozenset[str] | None = None

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def format(self) -> DocumentFormat:
        return self._format.wrapped

    @property
    def parse_cache(self) -> ParseCache:
        return self._format

    @property
    def left_text(self) -> str:
        return self._left_text

    @property
    def right_text(self) -> str:
        return self._right_text

    def set_left_text(self, text: str) -> None:
        if text != self._left_text:
            self._left_text = text
            self._invalidate()

    def set_right_text(self, text: str) -> None:
        if text != self._right_text:
            self._right_text = text
            self._invalidate()

    def _invalidate(self) -> None:
        self._report = None
        self._rows = None

    # ------------------------------------------------------------------
    # Report
    # ------------------------------------------------------------------

    @property
    def report(self) -> DiffReport:
        if self._report is None:
            left = self._format.parse(self._left_text)
            right = self._format.parse(self._right_text)
            self._report = build_report(left, right)
            logger.debug(
                "recomputed diff: outcome=%s stats=%s",
                self._report.outcome,
                self._report.stats,
            )
        return self._report

    @property
    def root(self) -> DiffNode | None:
        return self.report.root

    @property
    def stats(self) -> DiffStats:
        return self.report.stats

    @property
    def outcome(self) -> DiffOutcome:
        return self.report.outcome

    @property
    def left_error(self) -> str | None:
        return self.report.left.error

    @property
    def right_error(self) -> str | None:
        return self.report.right.error

    @property
    def message(self) -> str | None:
        """Status line for outcomes that show no table, else None."""
        outcome = self.outcome
        if outcome == DiffOutcome.INVALID:
            return self.format.error_message
        if outcome == DiffOutcome.EMPTY:
            if self._left_text.strip() or self._right_text.strip():
                return NO_CONTENT_MESSAGE
            return self.format.empty_message
        if outcome == DiffOutcome.IDENTICAL:
            return IDENTICAL_MESSAGE
        return None

    # ------------------------------------------------------------------
    # Rows and collapse state
    # ------------------------------------------------------------------

    @property
    def collapsed(self) -> frozenset[str]:
        return self._collapse.paths

    @property
    def rows(self) -> list[FlatRow]:
        """Visible rows of the current diff tree (empty without a tree)."""
        paths = self._collapse.paths
        if self._rows is None or self._rows_key != paths:
            root = self.root
            self._rows = flatten(root, paths) if root is not None else []
            self._rows_key = paths
        return self._rows

    @property
    def rendered_rows(self) -> list[RenderedRow]:
        root = self.root
        if root is None:
            return []
        return render_rows(root, self._collapse.paths)

    def text_table(self) -> str:
        """Plain-text side-by-side table of the visible rows."""
        return render_text(self.rendered_rows, self.left_label, self.right_label)

    def toggle(self, path: str) -> bool:
        """Toggle ``path``; returns True if it is collapsed afterwards."""
        return self._collapse.toggle(path)

    def collapse_all(self) -> None:
        self._collapse.collapse_all(self.root)

    def expand_all(self) -> None:
        self._collapse.expand_all()

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format_left(self) -> str | None:
        """Pretty-print the left text in place; returns an error or None."""
        return self._format_side(self.set_left_text, self._left_text)

    def format_right(self) -> str | None:
        """Pretty-print the right text in place; returns an error or None."""
        return self._format_side(self.set_right_text, self._right_text)

    def _format_side(self, setter: Callable[[str], None], text: str) -> str | None:
        errors: list[str] = []
        self._format.format(text, setter, errors.append)
        return errors[0] if errors else None

    # ------------------------------------------------------------------
    # Minimap
    # ------------------------------------------------------------------

    def markers(self) -> list[MinimapMarker]:
        """Minimap markers; empty unless the documents differ."""
        if self.outcome != DiffOutcome.DIFFERENT:
            return []
        return marker_bands(self.rows, min_height=self._config.marker_min_height)

    def viewport(self, metrics: ScrollMetrics) -> Band:
        return viewport_band(metrics, min_height=self._config.viewport_min_height)

    def scroll_target(
        self, click_y: float, minimap_height: float, metrics: ScrollMetrics
    ) -> float:
        """Scroll offset for a click ``click_y`` pixels below the minimap top."""
        return scroll_target(click_ratio(click_y, minimap_height), metrics)
