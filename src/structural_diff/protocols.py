"""DocumentFormat Protocol: the parse/format boundary of the diff engine.

Defines the structural interface every source syntax must satisfy.  The
engine never reads source text itself; it consumes ``ParseResult`` values
produced by a DocumentFormat.  Custom formats need no base class, any class
with the conformant attributes and methods passes ``isinstance`` checks.

Example::

    import tomllib

    from structural_diff.result import ParseResult

    class TomlFormat:
        name = "toml"
        placeholder = 'key = "value"'
        empty_message = "Enter TOML in both panels to compare"
        error_message = "Fix TOML errors to see diff"

        def parse(self, text: str) -> ParseResult:
            if not text.strip():
                return ParseResult.absent()
            try:
                return ParseResult.document(tomllib.loads(text))
            except tomllib.TOMLDecodeError as exc:
                return ParseResult.failure(str(exc))

        def format(self, text, on_success, on_error) -> None:
            ...

    assert isinstance(TomlFormat(), DocumentFormat)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from structural_diff.result import ParseResult

__all__ = ["NESTING_ERROR", "DocumentFormat"]

NESTING_ERROR = "Document is nested too deeply to parse"
"""Failure message for documents deeper than the parser can descend."""


@runtime_checkable
class DocumentFormat(Protocol):
    """Structural protocol for a source syntax (JSON, YAML, ...).

    ``parse`` must:
    - Return ``ParseResult.absent()`` for blank text.
    - Return ``ParseResult.failure(message)`` instead of raising on bad input,
      including input nested deeper than the parser can descend.

    ``format`` must re-serialise ``text`` into canonical pretty-printed form
    and report through exactly one of the callbacks, or through neither when
    ``text`` is blank.
    """

    name: str
    placeholder: str
    empty_message: str
    error_message: str

    def parse(self, text: str) -> ParseResult: ...

    def format(
        self,
        text: str,
        on_success: Callable[[str], None],
        on_error: Callable[[str], None],
    ) -> None: ...
