"""Graph data types: GraphNode, GraphLink, GraphData and GraphAnalytics.

Node ids are positional: ``"root"`` joined with every key/index on the way
down, separated by ``"."``. Segments are not escaped, so the key ``"a.b"``
and the nested path ``a -> b`` render to the same id. Callers that need
collision-free ids must not rely on ``id`` alone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "GraphAnalytics",
    "GraphData",
    "GraphLink",
    "GraphNode",
    "LinkType",
    "NodeKind",
]


class NodeKind(StrEnum):
    """Structural kind of a graph node: OBJECT, ARRAY or PRIMITIVE."""

    OBJECT = auto()
    ARRAY = auto()
    PRIMITIVE = auto()


class LinkType(StrEnum):
    """PROPERTY links leave objects, ELEMENT links leave arrays."""

    PROPERTY = auto()
    ELEMENT = auto()


@dataclass(slots=True)
class GraphNode:
    """A container or primitive in the graph.

    Attributes:
        id:    Dot-joined positional id (``"root.b.0"``).
        label: Key for object members, ``"[i]"`` for array elements.
        type:  Structural kind.
        value: The primitive value; ``None`` for containers (and for null).
        depth: Nesting level, root is 0.
        size:  Number of direct children for containers, 1 for primitives.
    """

    id: str
    label: str
    type: NodeKind
    depth: int
    size: int
    value: Any = None


@dataclass(slots=True)
class GraphLink:
    """Directed parent -> child edge."""

    source: str
    target: str
    type: LinkType
    label: str | None = None


@dataclass(slots=True)
class GraphData:
    """Node and link lists in document pre-order."""

    nodes: list[GraphNode] = field(default_factory=list)
    links: list[GraphLink] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class GraphAnalytics:
    """Read-only snapshot produced by ``analyze_graph``.

    Attributes:
        total_nodes: Length of the node list (duplicates included).
        total_edges: Length of the link list (directed, not doubled).
        average_degree: Mean undirected degree over distinct node ids.
        max_depth: Deepest ``GraphNode.depth``; 0 for an empty graph.
        nodes_by_depth: depth -> node count.
        nodes_by_type: node kind -> node count.
        largest_component: Size of the largest connected component.
        density: ``2E / (N(N-1))``, 0 when N <= 1.
        diameter: Longest shortest path between reachable node pairs.
        average_path: Mean shortest-path length over reachable ordered pairs.
        leaf_nodes: Primitive nodes that are the source of no link.
        branching_factor: Links per non-primitive node.
        clustering_coefficient: Mean local clustering over nodes of degree >= 2.
        centrality: node id -> degree centrality, for every distinct id.
    """

    total_nodes: int
    total_edges: int
    average_degree: float
    max_depth: int
    nodes_by_depth: dict[int, int]
    nodes_by_type: dict[str, int]
    largest_component: int
    density: float
    diameter: int
    average_path: float
    leaf_nodes: int
    branching_factor: float
    clustering_coefficient: float
    centrality: dict[str, float]

    def top_central(self, limit: int = 5) -> list[tuple[str, float]]:
        """Return the ``limit`` most central nodes, highest first.

        Ties keep node order (``sorted`` is stable).
        """
        ranked = sorted(self.centrality.items(), key=lambda item: item[1], reverse=True)
        return ranked[:limit]

    def to_dict(self) -> dict[str, Any]:
        """camelCase mapping for JSON export."""
        return {
            "totalNodes": self.total_nodes,
            "totalEdges": self.total_edges,
            "averageDegree": self.average_degree,
            "maxDepth": self.max_depth,
            "nodesByDepth": dict(self.nodes_by_depth),
            "nodesByType": dict(self.nodes_by_type),
            "largestComponent": self.largest_component,
            "density": self.density,
            "diameter": self.diameter,
            "averagePath": self.average_path,
            "leafNodes": self.leaf_nodes,
            "branchingFactor": self.branching_factor,
            "clusteringCoefficient": self.clustering_coefficient,
            "centrality": dict(self.centrality),
        }
