"""Unit tests for the public API functions: diff_values, diff_texts, build_report."""

from __future__ import annotations

from typing import Any

import pytest

from structural_diff import (
    ABSENT,
    DiffOutcome,
    DiffReport,
    DiffStats,
    DiffType,
    ParseResult,
    build_report,
    diff_texts,
    diff_values,
)
from structural_diff.api import diff_tree
from structural_diff.formats import JsonFormat


class TestDiffValues:
    """Tests for the diff_values() function."""

    @pytest.mark.parametrize(
        ("left", "right", "outcome", "stats"),
        [
            ({"a": 1}, {"a": 1}, DiffOutcome.IDENTICAL, DiffStats(0, 0, 0)),
            ({"a": 1}, {"a": 2}, DiffOutcome.DIFFERENT, DiffStats(0, 0, 1)),
            ({}, {"b": [1, 2]}, DiffOutcome.DIFFERENT, DiffStats(2, 0, 0)),
            ({"x": {"y": 1}}, {}, DiffOutcome.DIFFERENT, DiffStats(0, 1, 0)),
            ([1, 2, 3], [1, 2], DiffOutcome.DIFFERENT, DiffStats(0, 1, 0)),
        ],
    )
    def test_scenarios(
        self, left: Any, right: Any, outcome: DiffOutcome, stats: DiffStats
    ) -> None:
        report = diff_values(left, right)
        assert isinstance(report, DiffReport)
        assert report.outcome == outcome
        assert report.stats == stats
        assert report.root is not None

    def test_both_absent_is_empty(self) -> None:
        report = diff_values()
        assert report.outcome == DiffOutcome.EMPTY
        assert report.root is None
        assert report.stats == DiffStats()

    def test_empty_differs_from_identical_documents(self) -> None:
        assert diff_values(ABSENT, ABSENT).outcome != diff_values({}, {}).outcome

    def test_null_documents_are_identical(self) -> None:
        report = diff_values(None, None)
        assert report.outcome == DiffOutcome.IDENTICAL
        assert report.root is not None

    def test_one_side_absent(self) -> None:
        report = diff_values({"a": 1}, ABSENT)
        assert report.outcome == DiffOutcome.DIFFERENT
        assert report.root is not None
        assert report.root.diff_type == DiffType.REMOVED
        assert report.stats == DiffStats(removed=1)

    def test_structural_only_difference_has_zero_stats(self) -> None:
        report = diff_values({}, {"a": []})
        assert report.outcome == DiffOutcome.DIFFERENT
        assert report.stats.total == 0

    def test_absent_repr(self) -> None:
        assert repr(ABSENT) == "ABSENT"

    def test_no_global_state_between_calls(self) -> None:
        r1 = diff_values({"a": [1]}, {"a": [2]})
        r2 = diff_values({"a": [1]}, {"a": [2]})
        assert r1.root == r2.root
        assert r1.root is not r2.root


class TestDiffTexts:
    """Tests for the diff_texts() function."""

    def test_json(self) -> None:
        report = diff_texts('{"a": 1}', '{"a": 2}')
        assert report.outcome == DiffOutcome.DIFFERENT
        assert report.stats == DiffStats(changed=1)

    def test_blank_texts_are_empty(self) -> None:
        report = diff_texts("", "  \n")
        assert report.outcome == DiffOutcome.EMPTY

    def test_invalid_left(self) -> None:
        report = diff_texts("{", "{}")
        assert report.outcome == DiffOutcome.INVALID
        assert report.root is None
        assert report.left.error
        assert report.right.error is None

    def test_invalid_beats_empty(self) -> None:
        assert diff_texts("{", "").outcome == DiffOutcome.INVALID

    def test_yaml(self) -> None:
        report = diff_texts("a: 1\nb: [1, 2]\n", "a: 1\nb: [1]\n", fmt="yaml")
        assert report.outcome == DiffOutcome.DIFFERENT
        assert report.stats == DiffStats(removed=1)

    def test_yaml_and_json_agree(self) -> None:
        yaml_report = diff_texts("a: 1", "a: 2", fmt="yml")
        json_report = diff_texts('{"a": 1}', '{"a": 2}', fmt="json")
        assert yaml_report.root == json_report.root

    def test_deeply_nested_json(self) -> None:
        depth = 400
        left = "[" * depth + "1" + "]" * depth
        right = "[" * depth + "2" + "]" * depth
        report = diff_texts(left, right)
        assert report.outcome == DiffOutcome.DIFFERENT
        assert report.stats == DiffStats(changed=1)

    def test_format_instance(self) -> None:
        report = diff_texts("[1]", "[1]", fmt=JsonFormat())
        assert report.outcome == DiffOutcome.IDENTICAL

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="unknown document format"):
            diff_texts("", "", fmt="toml")


class TestBuildReport:
    """Tests for build_report() and diff_tree()."""

    def test_both_invalid(self) -> None:
        report = build_report(ParseResult.failure("bad"), ParseResult.failure("worse"))
        assert report.outcome == DiffOutcome.INVALID
        assert (report.left.error, report.right.error) == ("bad", "worse")

    def test_diff_tree_none_when_invalid(self) -> None:
        assert diff_tree(ParseResult.failure("bad"), ParseResult.document(1)) is None

    def test_diff_tree_none_when_both_absent(self) -> None:
        assert diff_tree(ParseResult.absent(), ParseResult.absent()) is None

    def test_diff_tree_one_sided(self) -> None:
        root = diff_tree(ParseResult.absent(), ParseResult.document([1]))
        assert root is not None
        assert root.diff_type == DiffType.ADDED
        assert root.left is None
