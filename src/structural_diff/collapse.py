"""CollapseState: the set of diff paths whose subtrees are hidden.

The state is mutated by user interaction and read by the flattener through
the ``paths`` snapshot.  It survives recomputation of the diff tree: a path
that no longer exists simply never matches.
"""

from __future__ import annotations

from collections.abc import Iterator

from structural_diff.algorithm.differ import DiffNode

__all__ = ["CollapseState", "collapsible_paths"]


def collapsible_paths(root: DiffNode) -> list[str]:
    """Return every collapsible path of ``root`` in pre-order."""
    paths: list[str] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_collapsible:
            paths.append(node.path)
        if node.child_diffs:
            stack.extend(reversed(node.child_diffs))
    return paths


class CollapseState:
    """Mutable set of collapsed paths.

    Example::

        state = CollapseState()
        state.toggle("a")       # "a" collapsed
        state.toggle("a")       # "a" expanded again
        state.collapse_all(root)
        state.expand_all()      # empty
    """

    def __init__(self, paths: set[str] | None = None) -> None:
        self._paths: set[str] = set(paths) if paths else set()

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __repr__(self) -> str:
        return f"CollapseState({sorted(self._paths)!r})"

    @property
    def paths(self) -> frozenset[str]:
        """Immutable snapshot of the collapsed paths."""
        return frozenset(self._paths)

    def is_collapsed(self, path: str) -> bool:
        return path in self._paths

    def toggle(self, path: str) -> bool:
        """Collapse ``path`` if expanded, expand it if collapsed.

        Returns:
            True if ``path`` is collapsed after the call.
        """
        if path in self._paths:
            self._paths.discard(path)
            return False
        self._paths.add(path)
        return True

    def collapse_all(self, root: DiffNode | None) -> None:
        """Replace the set with every collapsible path of ``root``."""
        self._paths = set(collapsible_paths(root)) if root is not None else set()

    def expand_all(self) -> None:
        self._paths.clear()
