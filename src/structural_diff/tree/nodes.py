"""ValueNode dataclass and NodeKind StrEnum for document-to-tree representation.

Provides the foundational data types produced by TreeBuilder and consumed by
the StructuralDiffer.  A ValueNode tree is built once per document and never
mutated afterwards; DiffNodes borrow references to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = ["NodeKind", "ValueNode"]


class NodeKind(StrEnum):
    """Enumeration of the three structural kinds of a document position.

    StrEnum values are the lowercased member names (Python 3.11+):
    - OBJECT    -> "object"    : a keyed collection (JSON object, YAML mapping)
    - ARRAY     -> "array"     : an ordered sequence (JSON array, YAML sequence)
    - PRIMITIVE -> "primitive" : a scalar leaf (string, number, bool, null)
    """

    OBJECT = auto()
    ARRAY = auto()
    PRIMITIVE = auto()


@dataclass(frozen=True, slots=True)
class ValueNode:
    """One position in a parsed document.

    Attributes:
        key:       Field name or array index as a string; "root" for the
                   document root.
        path:      Canonical address.  Object fields append ".key" (bare "key"
                   at the root), array elements append "[index]".  The root
                   path is the empty string.
        value:     The raw value found at this position.
        kind:      Which structural kind this position holds (see NodeKind).
        depth:     Nesting depth, root = 0.
        is_last:   True iff this node is the final child of its parent.
        children:  Ordered child nodes for containers; None for primitives.
                   Objects keep the mapping's iteration order, arrays keep
                   index order.
    """

    key: str
    path: str
    value: Any
    kind: NodeKind
    depth: int = 0
    is_last: bool = True
    children: tuple[ValueNode, ...] | None = None

    def __post_init__(self) -> None:
        if self.kind == NodeKind.PRIMITIVE and self.children is not None:
            msg = f"primitive node at {self.path!r} cannot have children"
            raise ValueError(msg)
        if self.kind != NodeKind.PRIMITIVE and self.children is None:
            msg = f"{self.kind} node at {self.path!r} requires a children tuple"
            raise ValueError(msg)

    @property
    def is_container(self) -> bool:
        """True for OBJECT and ARRAY nodes."""
        return self.kind != NodeKind.PRIMITIVE

    @property
    def child_count(self) -> int:
        """Number of direct children (0 for primitives)."""
        return len(self.children) if self.children is not None else 0
