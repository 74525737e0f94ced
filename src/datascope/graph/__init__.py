"""graph subpackage: value-to-graph conversion and graph analytics.

Example::

    from datascope.graph import analyze_graph, build_graph

    graph = build_graph({"a": 1, "b": [2, 3]})
    analytics = analyze_graph(graph)
    # analytics.total_nodes == 5, analytics.average_degree == 1.6
"""

from __future__ import annotations

from datascope.graph.analyzer import analyze_graph, build_adjacency
from datascope.graph.builder import build_graph
from datascope.graph.config import AnalyzerConfig
from datascope.graph.models import (
    GraphAnalytics,
    GraphData,
    GraphLink,
    GraphNode,
    LinkType,
    NodeKind,
)

__all__ = [
    "AnalyzerConfig",
    "GraphAnalytics",
    "GraphData",
    "GraphLink",
    "GraphNode",
    "LinkType",
    "NodeKind",
    "analyze_graph",
    "build_adjacency",
    "build_graph",
]
