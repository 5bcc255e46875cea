"""JsonFormat: parse/format contract for JSON source text.

Pasted JSON is often still escaped (``{\\"a\\": 1}`` copied out of a log line
or a string literal).  When the text does not parse as-is, one retry is made
with every ``\\"`` replaced by ``"``.  If the retry fails too, the diagnostic
of the first attempt is reported since it refers to the text the user typed.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

from structural_diff.protocols import NESTING_ERROR
from structural_diff.result import ParseResult

__all__ = ["JsonFormat"]

logger = logging.getLogger(__name__)


def _loads_lenient(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        unescaped = text.replace('\\"', '"')
        try:
            return json.loads(unescaped)
        except json.JSONDecodeError:
            raise exc from None


class JsonFormat:
    """JSON implementation of the DocumentFormat protocol."""

    name = "json"
    placeholder = '{"key": "value"}'
    empty_message = "Enter JSON in both panels to compare"
    error_message = "Fix JSON errors to see diff"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def parse(self, text: str) -> ParseResult:
        if not text.strip():
            return ParseResult.absent()
        try:
            return ParseResult.document(_loads_lenient(text))
        except json.JSONDecodeError as exc:
            logger.debug("JSON parse failed: %s", exc)
            return ParseResult.failure(str(exc) or "Invalid JSON")
        except RecursionError:
            logger.debug("JSON parse failed: nesting exceeds the recursion limit")
            return ParseResult.failure(NESTING_ERROR)

    def format(
        self,
        text: str,
        on_success: Callable[[str], None],
        on_error: Callable[[str], None],
    ) -> None:
        """Pretty-print ``text`` with ``self.indent`` spaces per level."""
        if not text.strip():
            return
        try:
            parsed = _loads_lenient(text)
        except json.JSONDecodeError as exc:
            logger.debug("JSON format failed: %s", exc)
            on_error(str(exc) or "Invalid JSON")
            return
        except RecursionError:
            on_error(NESTING_ERROR)
            return
        on_success(json.dumps(parsed, indent=self.indent, ensure_ascii=False))
