"""build_tree: converts a parsed document into an ordered list of TreeNodes.

Arrays yield one node per element in index order (key = stringified index);
objects yield one node per key in insertion order. Containers carry their
children, primitives carry ``children=None``.

The walk uses an explicit worklist instead of recursion, so nesting depth is
not limited by ``sys.getrecursionlimit()``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from datascope.tree.nodes import TreeNode, get_value_type

__all__ = ["build_tree", "iter_tree"]

logger = logging.getLogger(__name__)


def _entries(value: Any) -> Iterator[tuple[str, Any]]:
    if isinstance(value, list):
        for idx, item in enumerate(value):
            yield str(idx), item
    elif isinstance(value, dict):
        for key, item in value.items():
            yield str(key), item


def build_tree(value: Any, parent_path: list[str] | None = None) -> list[TreeNode]:
    """Build the child nodes of ``value``.

    Args:
        value:       The parsed document (or any sub-value).
        parent_path: Path of ``value`` itself. Defaults to the root (``[]``).

    Returns:
        One TreeNode per direct child of ``value``. A bare primitive document
        yields ``[]``.

    Raises:
        InvalidInputError: If a nested value is not a valid JSON type.
    """
    base = list(parent_path) if parent_path is not None else []
    roots: list[TreeNode] = []
    # Each entry: (container value, its path, list receiving its child nodes)
    stack: list[tuple[Any, list[str], list[TreeNode]]] = [(value, base, roots)]
    count = 0

    while stack:
        container, path, out = stack.pop()
        for key, item in _entries(container):
            node_type = get_value_type(item)
            node = TreeNode(key=key, value=item, type=node_type, path=[*path, key])
            if node.is_container:
                node.children = []
                stack.append((item, node.path, node.children))
            out.append(node)
            count += 1

    logger.debug("built value tree with %d nodes", count)
    return roots


def iter_tree(nodes: list[TreeNode]) -> Iterator[TreeNode]:
    """Yield every node of a forest in pre-order."""
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        yield node
        if node.children:
            stack.extend(reversed(node.children))
