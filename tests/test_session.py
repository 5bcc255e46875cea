"""Tests for DiffSession.

Covers:
- The four outcomes and their status messages
- Lazy recomputation on edits, with the unchanged side served from cache
- Collapse state: toggle, collapse_all, expand_all, survival across edits
- Rows and rendered rows staying in step
- In-place formatting of either side
- Minimap markers, viewport band and click-to-scroll
"""

from __future__ import annotations

import pytest

from structural_diff import DiffOutcome, DiffSession, DiffStats, SessionConfig
from structural_diff.algorithm.flatten import RowType
from structural_diff.formats import YamlFormat
from structural_diff.navigator import Band, ScrollMetrics


def _session(left: str, right: str, fmt: str = "json") -> DiffSession:
    session = DiffSession(fmt)
    session.set_left_text(left)
    session.set_right_text(right)
    return session


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------


class TestOutcomes:
    def test_fresh_session_is_empty(self) -> None:
        session = DiffSession()
        assert session.outcome == DiffOutcome.EMPTY
        assert session.root is None
        assert session.rows == []
        assert session.message == "Enter JSON in both panels to compare"

    def test_identical(self) -> None:
        session = _session('{"a": 1}', '{"a":1}')
        assert session.outcome == DiffOutcome.IDENTICAL
        assert session.message == "Files are identical"

    def test_different(self) -> None:
        session = _session('{"a": 1}', '{"a": 2}')
        assert session.outcome == DiffOutcome.DIFFERENT
        assert session.stats == DiffStats(changed=1)
        assert session.message is None

    def test_invalid(self) -> None:
        session = _session('{"a": 1}', '{"a": ')
        assert session.outcome == DiffOutcome.INVALID
        assert session.left_error is None
        assert session.right_error
        assert session.message == "Fix JSON errors to see diff"
        assert session.rows == []

    def test_comments_only_yaml_is_no_content(self) -> None:
        session = _session("# nothing here\n", "", fmt="yaml")
        assert session.outcome == DiffOutcome.EMPTY
        assert session.message == "No content to compare"

    def test_yaml_messages(self) -> None:
        session = DiffSession(YamlFormat())
        assert session.message == "Enter YAML in both panels to compare"

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError):
            DiffSession("xml")


# ---------------------------------------------------------------------------
# Recomputation
# ---------------------------------------------------------------------------


class TestRecomputation:
    def test_report_reused_until_edit(self) -> None:
        session = _session("[1]", "[2]")
        first = session.report
        assert session.report is first
        session.set_right_text("[1]")
        assert session.report is not first
        assert session.outcome == DiffOutcome.IDENTICAL

    def test_same_text_does_not_invalidate(self) -> None:
        session = _session("[1]", "[2]")
        first = session.report
        session.set_left_text("[1]")
        assert session.report is first

    def test_unchanged_side_served_from_cache(self) -> None:
        session = _session('{"a": 1}', '{"a": 2}')
        _ = session.report
        misses = session.parse_cache.misses
        session.set_right_text('{"a": 3}')
        _ = session.report
        assert session.parse_cache.misses == misses + 1
        assert session.parse_cache.hits >= 1

    def test_cache_size_from_config(self) -> None:
        session = DiffSession(config=SessionConfig(parse_cache_size=3))
        assert session.parse_cache.max_size == 3

    def test_labels_from_config(self) -> None:
        session = DiffSession(config=SessionConfig(left_label="v1", right_label="v2"))
        session.set_left_text("1")
        session.set_right_text("2")
        header = session.text_table().splitlines()[0]
        assert "v1" in header
        assert "v2" in header


# ---------------------------------------------------------------------------
# Collapse and rows
# ---------------------------------------------------------------------------


class TestCollapse:
    def test_toggle_hides_children(self) -> None:
        session = _session('{"a": 1, "b": {"c": 1}}', '{"a": 2, "b": {"c": 1}}')
        assert [r.path for r in session.rows] == ["", "a", "b", "b.c", "b", ""]
        assert session.toggle("b") is True
        assert [r.path for r in session.rows] == ["", "a", "b", ""]
        assert session.toggle("b") is False
        assert len(session.rows) == 6

    def test_collapse_all_and_expand_all(self) -> None:
        session = _session('{"a": [1], "b": {}}', '{"a": [2], "b": {}}')
        session.collapse_all()
        assert session.collapsed == frozenset({"", "a", "b"})
        assert [(r.path, r.row_type) for r in session.rows] == [("", RowType.NODE)]
        session.expand_all()
        assert session.collapsed == frozenset()

    def test_collapse_survives_edits(self) -> None:
        session = _session('{"b": [1, 2]}', '{"b": [1]}')
        session.toggle("b")
        session.set_right_text('{"b": [3]}')
        assert "b" in session.collapsed
        assert [r.path for r in session.rows] == ["", "b", ""]

    def test_collapse_all_without_tree(self) -> None:
        session = DiffSession()
        session.toggle("x")
        session.collapse_all()
        assert session.collapsed == frozenset()

    def test_rendered_rows_match_rows(self) -> None:
        session = _session('{"a": [1, {"b": 2}]}', '{"a": [1], "c": null}')
        session.toggle("a")
        assert [r.path for r in session.rendered_rows] == [r.path for r in session.rows]

    def test_text_table(self) -> None:
        session = _session('{"a": 1}', '{"a": 2}')
        assert session.text_table().splitlines()[2] == '~   "a": 1 |   "a": 2'


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


class TestFormatting:
    def test_format_left(self) -> None:
        session = _session('{"a":[1,2]}', "")
        assert session.format_left() is None
        assert session.left_text == '{\n  "a": [\n    1,\n    2\n  ]\n}'

    def test_format_right_error(self) -> None:
        session = _session("", '{"a": ')
        error = session.format_right()
        assert error
        assert session.right_text == '{"a": '

    def test_format_blank_is_noop(self) -> None:
        session = _session("", "")
        assert session.format_left() is None
        assert session.left_text == ""

    def test_format_yaml(self) -> None:
        session = _session("b: {x: 1}\na: [1]\n", "", fmt="yaml")
        assert session.format_left() is None
        assert session.left_text == "b:\n  x: 1\na:\n- 1\n"

    def test_format_invalidates_report(self) -> None:
        session = _session('{"a":1}', '{"a": 1}')
        first = session.report
        session.format_left()
        assert session.report is not first
        assert session.outcome == DiffOutcome.IDENTICAL


# ---------------------------------------------------------------------------
# Minimap
# ---------------------------------------------------------------------------


class TestMinimap:
    def test_markers_only_when_different(self) -> None:
        assert _session("[1]", "[1]").markers() == []
        assert _session("", "").markers() == []

    def test_markers_follow_rows(self) -> None:
        session = _session('{"a": 1, "b": 2}', '{"a": 1, "b": 3}')
        markers = session.markers()
        assert [m.path for m in markers] == ["", "b", ""]
        assert markers[1].row_index == 2
        assert markers[1].top == pytest.approx(50.0)

    def test_marker_floor_from_config(self) -> None:
        session = DiffSession(config=SessionConfig(marker_min_height=30.0))
        session.set_left_text("[1, 2]")
        session.set_right_text("[1, 3]")
        assert all(m.height == pytest.approx(30.0) for m in session.markers())

    def test_viewport(self) -> None:
        session = DiffSession()
        band = session.viewport(ScrollMetrics(scroll_top=0, scroll_height=1000, client_height=10))
        assert band == Band(top=0.0, height=5.0)

    def test_scroll_target(self) -> None:
        session = DiffSession()
        metrics = ScrollMetrics(scroll_top=0, scroll_height=2000, client_height=1000)
        assert session.scroll_target(100, 200, metrics) == pytest.approx(500.0)
