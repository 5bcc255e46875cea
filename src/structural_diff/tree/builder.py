"""TreeBuilder: converts any parsed document value into a ValueNode tree.

Converts mappings, sequences, and scalar values into a tree of ValueNode
objects.  The builder is agnostic to the source syntax: anything
``json.loads`` or ``yaml.safe_load`` can return is accepted.

The walk uses an explicit stack, so document depth is not bounded by the
interpreter's recursion limit.  Nodes are collected in pre-order and then
finished in reverse, which builds every child tuple before its parent.

Canonical paths are built during traversal:
- Root is "" (empty string)
- Object fields append ".{key}" (bare "{key}" directly under the root)
- Array elements append "[{index}]"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from structural_diff.tree.nodes import NodeKind, ValueNode

__all__ = [
    "ROOT_KEY",
    "ROOT_PATH",
    "TreeBuilder",
    "build_tree",
    "child_path",
    "key_label",
]

ROOT_KEY = "root"
ROOT_PATH = ""


def child_path(parent_path: str, key: str, *, is_array: bool) -> str:
    """Return the canonical path of child ``key`` below ``parent_path``.

    Example::

        child_path("", "a", is_array=False)    # "a"
        child_path("a", "b", is_array=False)   # "a.b"
        child_path("a.b", "0", is_array=True)  # "a.b[0]"
    """
    if is_array:
        return f"{parent_path}[{key}]"
    return f"{parent_path}.{key}" if parent_path else key


def key_label(key: Any) -> str:
    """Return the label of a mapping key, spelled the way JSON spells scalars.

    Strings are used as-is.  YAML also allows null, boolean and numeric keys;
    those become ``"null"``, ``"true"`` / ``"false"`` and their decimal form.
    """
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


@dataclass(slots=True)
class _Pending:
    value: Any
    key: str
    path: str
    depth: int
    is_last: bool
    parent: _Pending | None = None
    kind: NodeKind = NodeKind.PRIMITIVE
    built: list[ValueNode] = field(default_factory=list)

    def finish(self) -> ValueNode:
        children = None
        if self.kind != NodeKind.PRIMITIVE:
            # children were finished last-to-first
            children = tuple(reversed(self.built))
        return ValueNode(
            key=self.key,
            path=self.path,
            value=self.value,
            kind=self.kind,
            depth=self.depth,
            is_last=self.is_last,
            children=children,
        )


@dataclass
class TreeBuilder:
    """Converts any parsed document value into a ValueNode tree.

    Dispatch order matters: ``str`` and ``bytes`` are sequences in Python but
    are scalars in a document, so only ``list`` and ``tuple`` count as arrays.
    Any ``Mapping`` counts as an object; non-string mapping keys (YAML allows
    integers, booleans and dates as keys) are labelled with ``key_label``.
    Everything else, including None, is a primitive.

    No value is rejected.  An absent document is represented by not building
    a tree at all, never by a sentinel node.

    Example::

        builder = TreeBuilder()
        tree = builder.build({"a": [1, 2]})
        # tree: OBJECT(root) -> ARRAY("a", path="a") -> PRIMITIVE("0", path="a[0]"), ...
    """

    def build(
        self,
        value: Any,
        key: str = ROOT_KEY,
        path: str = ROOT_PATH,
        depth: int = 0,
        is_last: bool = True,
    ) -> ValueNode:
        """Convert a parsed value to a ValueNode tree.

        Args:
            value:   Any parsed document value.
            key:     Label of this position within its parent.
            path:    Canonical path to this position.
            depth:   Nesting depth of this position (root = 0).
            is_last: Whether this position is the last child of its parent.

        Returns:
            A ValueNode tree rooted at the appropriate node kind.
        """
        root = _Pending(value, key, path, depth, is_last)
        order: list[_Pending] = []
        stack = [root]
        while stack:
            pending = stack.pop()
            order.append(pending)
            stack.extend(reversed(self._expand(pending)))

        for pending in reversed(order[1:]):
            if pending.parent is not None:
                pending.parent.built.append(pending.finish())
        return root.finish()

    def _expand(self, pending: _Pending) -> list[_Pending]:
        """Classify ``pending`` and return its children, in document order."""
        value = pending.value
        if isinstance(value, (list, tuple)):
            pending.kind = NodeKind.ARRAY
            labelled = [(str(idx), item) for idx, item in enumerate(value)]
        elif isinstance(value, Mapping):
            pending.kind = NodeKind.OBJECT
            labelled = [(key_label(name), val) for name, val in value.items()]
        else:
            return []

        is_array = pending.kind == NodeKind.ARRAY
        last = len(labelled) - 1
        return [
            _Pending(
                item,
                label,
                child_path(pending.path, label, is_array=is_array),
                pending.depth + 1,
                idx == last,
                parent=pending,
            )
            for idx, (label, item) in enumerate(labelled)
        ]


# Module-level builder (stateless, safe to share)
_builder = TreeBuilder()


def build_tree(value: Any) -> ValueNode:
    """Build a ValueNode tree for a whole document (root key, empty path)."""
    return _builder.build(value)
