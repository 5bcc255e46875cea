"""Formats subpackage: DocumentFormat implementations for source syntaxes.

Contains:
- JsonFormat: stdlib ``json`` with a lenient retry for escaped input
- YamlFormat: PyYAML ``SafeLoader`` / ``safe_dump``
- get_format: lookup by name ("json", "yaml", "yml")
"""

from __future__ import annotations

from structural_diff.formats.json_format import JsonFormat
from structural_diff.formats.yaml_format import YamlFormat
from structural_diff.protocols import DocumentFormat

__all__ = ["JsonFormat", "YamlFormat", "get_format"]

_FORMATS: dict[str, type[JsonFormat] | type[YamlFormat]] = {
    "json": JsonFormat,
    "yaml": YamlFormat,
    "yml": YamlFormat,
}


def get_format(fmt: str | DocumentFormat) -> DocumentFormat:
    """Return a DocumentFormat for ``fmt``.

    Args:
        fmt: A format name (case-insensitive) or an object already satisfying
             the DocumentFormat protocol, which is returned unchanged.

    Raises:
        ValueError: If ``fmt`` is an unknown name.
    """
    if not isinstance(fmt, str):
        return fmt
    try:
        return _FORMATS[fmt.lower()]()
    except KeyError:
        msg = f"unknown document format {fmt!r}, expected one of {sorted(_FORMATS)}"
        raise ValueError(msg) from None
