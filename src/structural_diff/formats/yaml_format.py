"""YamlFormat: parse/format contract for YAML source text, backed by PyYAML.

Parsing uses ``yaml.SafeLoader`` node by node so that a stream holding no
document at all (blank, or comments only) is told apart from a document
whose value is ``null``: the former is absent, the latter is present.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import yaml

from structural_diff.protocols import NESTING_ERROR
from structural_diff.result import ParseResult
from structural_diff.tree.builder import key_label

__all__ = ["YamlFormat"]

logger = logging.getLogger(__name__)


class _DocumentLoader(yaml.SafeLoader):
    """SafeLoader that rejects mappings whose keys collide once labelled.

    Keys such as ``1`` and ``'1'``, or ``1`` and ``true``, are distinct to YAML
    but share a label (or a dict slot) in the tree, which would silently drop
    one of the entries.  Repeating the very same key stays allowed, so merge
    keys (``<<``) keep working.
    """

    def construct_mapping(
        self, node: yaml.MappingNode, deep: bool = False
    ) -> dict[Any, Any]:
        mapping = super().construct_mapping(node, deep=deep)
        by_label: dict[str, Any] = {}
        by_value: dict[Any, Any] = {}
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            label = key_label(key)
            for seen in (by_label.get(label, key), by_value.get(key, key)):
                if seen is not key and (type(seen) is not type(key) or seen != key):
                    raise yaml.constructor.ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found conflicting keys {seen!r} and {key!r}",
                        key_node.start_mark,
                    )
            by_label.setdefault(label, key)
            by_value.setdefault(key, key)
        return mapping


def _load_single(text: str) -> tuple[bool, Any]:
    """Return ``(present, value)`` for a single-document YAML stream.

    Raises:
        yaml.YAMLError: On syntax errors or when the stream holds more than
            one document.
    """
    loader = _DocumentLoader(text)
    try:
        node = loader.get_single_node()
        if node is None:
            return False, None
        return True, loader.construct_document(node)
    finally:
        loader.dispose()


class YamlFormat:
    """YAML implementation of the DocumentFormat protocol."""

    name = "yaml"
    placeholder = "key: value"
    empty_message = "Enter YAML in both panels to compare"
    error_message = "Fix YAML errors to see diff"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def parse(self, text: str) -> ParseResult:
        if not text.strip():
            return ParseResult.absent()
        try:
            present, value = _load_single(text)
        except yaml.YAMLError as exc:
            logger.debug("YAML parse failed: %s", exc)
            return ParseResult.failure(str(exc) or "Invalid YAML")
        except RecursionError:
            logger.debug("YAML parse failed: nesting exceeds the recursion limit")
            return ParseResult.failure(NESTING_ERROR)
        if not present:
            return ParseResult.absent()
        return ParseResult.document(value)

    def format(
        self,
        text: str,
        on_success: Callable[[str], None],
        on_error: Callable[[str], None],
    ) -> None:
        """Re-dump ``text`` in block style, keeping mapping order."""
        if not text.strip():
            return
        try:
            present, value = _load_single(text)
        except yaml.YAMLError as exc:
            logger.debug("YAML format failed: %s", exc)
            on_error(str(exc) or "Invalid YAML")
            return
        except RecursionError:
            on_error(NESTING_ERROR)
            return
        if not present:
            return
        on_success(
            yaml.safe_dump(
                value,
                indent=self.indent,
                sort_keys=False,
                allow_unicode=True,
                default_flow_style=False,
            )
        )
