"""pytest plugin for structural-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from structural_diff import DiffOutcome, DiffType, diff_values
from structural_diff.render import render_rows, render_text


@pytest.fixture(scope="session")
def assert_no_structural_diff() -> Any:
    """Fixture that returns a callable structural equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to diff_values() which builds fresh trees per call).

    Usage in tests::

        def test_payload(assert_no_structural_diff):
            assert_no_structural_diff({"a": [1, 2]}, {"a": [1, 2]})

        def test_payload_changed(assert_no_structural_diff):
            with pytest.raises(AssertionError, match=r"changed=1"):
                assert_no_structural_diff({"a": 1}, {"a": 2})

    Returns:
        A callable ``_assert(actual, expected, only_changes=True) -> None``
        that raises ``AssertionError`` when the documents differ.
    """

    def _assert(actual: Any, expected: Any, only_changes: bool = True) -> None:
        """Assert that two parsed documents are structurally identical.

        Args:
            actual:       The value produced by the code under test (left side).
            expected:     The reference value (right side).
            only_changes: When True (default), the table in the failure
                          message lists differing rows only.

        Raises:
            AssertionError: When the comparison outcome is not IDENTICAL, with
                a message including the leaf counts and a side-by-side table.
        """
        report = diff_values(actual, expected)
        if report.outcome == DiffOutcome.IDENTICAL or report.root is None:
            return
        rows = render_rows(report.root)
        if only_changes:
            rows = [row for row in rows if row.diff_type != DiffType.UNCHANGED]
        stats = report.stats
        raise AssertionError(
            f"documents differ: "
            f"added={stats.added} removed={stats.removed} changed={stats.changed}\n"
            f"{render_text(rows, 'actual', 'expected')}"
        )

    return _assert
