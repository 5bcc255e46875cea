"""Tree subpackage for document-to-tree conversion primitives.

Re-exports the public API for the tree module:
- ValueNode: frozen dataclass representing one position in a parsed document
- NodeKind: StrEnum of the three node kinds (OBJECT, ARRAY, PRIMITIVE)
- TreeBuilder: converts any parsed value into a ValueNode tree
- build_tree: convenience wrapper building a whole-document tree
- key_label: JSON spelling of a mapping key
"""

from structural_diff.tree.builder import TreeBuilder, build_tree, child_path, key_label
from structural_diff.tree.nodes import NodeKind, ValueNode

__all__ = ["NodeKind", "TreeBuilder", "ValueNode", "build_tree", "child_path", "key_label"]
