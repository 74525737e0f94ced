"""build_graph: converts a parsed document into a node/link graph.

Every value becomes one GraphNode; every container gets one directed link per
direct child (PROPERTY for object members, ELEMENT for array items). Child ids
are ``f"{parent_id}.{key_or_index}"``.

The output is deterministic: nodes are emitted in pre-order and each link is
emitted immediately before the subtree of its target, exactly as a recursive
walk would produce them. The walk itself uses an explicit stack.
"""

from __future__ import annotations

import logging
from typing import Any

from datascope.graph.models import GraphData, GraphLink, GraphNode, LinkType, NodeKind
from datascope.tree.nodes import get_value_type

__all__ = ["build_graph"]

logger = logging.getLogger(__name__)

# (value, node id, node label, depth, link from the parent or None for the root)
_Frame = tuple[Any, str, str, int, GraphLink | None]


def build_graph(
    value: Any,
    parent_id: str = "root",
    parent_label: str = "root",
    depth: int = 0,
) -> GraphData:
    """Convert a JSON value into GraphData.

    Args:
        value:        Any valid JSON value (dict, list, str, int, float, bool, None).
        parent_id:    Id given to the node for ``value`` itself.
        parent_label: Label given to the node for ``value`` itself.
        depth:        Depth of the node for ``value`` itself.

    Returns:
        GraphData with one node per value and one link per parent/child pair.

    Raises:
        InvalidInputError: If a primitive is not a valid JSON type.
    """
    graph = GraphData()
    stack: list[_Frame] = [(value, parent_id, parent_label, depth, None)]

    while stack:
        item, node_id, label, level, link = stack.pop()
        if link is not None:
            graph.links.append(link)

        if isinstance(item, list):
            graph.nodes.append(
                GraphNode(id=node_id, label=label, type=NodeKind.ARRAY, depth=level, size=len(item))
            )
            children: list[_Frame] = []
            for idx, child in enumerate(item):
                child_id = f"{node_id}.{idx}"
                child_link = GraphLink(
                    source=node_id, target=child_id, type=LinkType.ELEMENT, label=str(idx)
                )
                children.append((child, child_id, f"[{idx}]", level + 1, child_link))
            stack.extend(reversed(children))
        elif isinstance(item, dict):
            graph.nodes.append(
                GraphNode(id=node_id, label=label, type=NodeKind.OBJECT, depth=level, size=len(item))
            )
            children = []
            for key, child in item.items():
                key = str(key)
                child_id = f"{node_id}.{key}"
                child_link = GraphLink(
                    source=node_id, target=child_id, type=LinkType.PROPERTY, label=key
                )
                children.append((child, child_id, key, level + 1, child_link))
            stack.extend(reversed(children))
        else:
            get_value_type(item)  # rejects non-JSON primitives
            graph.nodes.append(
                GraphNode(
                    id=node_id,
                    label=label,
                    type=NodeKind.PRIMITIVE,
                    depth=level,
                    size=1,
                    value=item,
                )
            )

    logger.debug(
        "built graph with %d nodes and %d links", len(graph.nodes), len(graph.links)
    )
    return graph
