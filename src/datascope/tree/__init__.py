"""Tree subpackage for document-to-tree conversion primitives.

Re-exports the public API for the tree module:
- TreeNode: dataclass representing a node in the value tree
- ValueType: StrEnum of the six JSON value kinds
- build_tree: converts a parsed document into ordered TreeNodes
- get_path_string: renders a node path as dot or bracket text
"""

from datascope.tree.builder import build_tree, iter_tree
from datascope.tree.nodes import TreeNode, ValueType, format_number, get_value_type
from datascope.tree.paths import get_path_string

__all__ = [
    "TreeNode",
    "ValueType",
    "build_tree",
    "format_number",
    "get_path_string",
    "get_value_type",
    "iter_tree",
]
