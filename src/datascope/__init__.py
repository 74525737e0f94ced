"""DataScope - structural exploration and graph analytics for parsed documents."""

from __future__ import annotations

from datascope.api import (
    advanced_search_nodes,
    analyze_graph,
    build_graph,
    build_tree,
    calculate_stats,
    explore,
    search_nodes,
)
from datascope.errors import DataScopeError, GraphTooLargeError, InvalidInputError
from datascope.explorer import DataExplorer
from datascope.graph import (
    AnalyzerConfig,
    GraphAnalytics,
    GraphData,
    GraphLink,
    GraphNode,
    LinkType,
    NodeKind,
)
from datascope.result import ExplorationResult
from datascope.search import SearchMode, SearchOptions
from datascope.stats import DataStats
from datascope.tree import TreeNode, ValueType, get_path_string, get_value_type

__version__: str = "0.1.0"
__all__: list[str] = [
    "AnalyzerConfig",
    "DataExplorer",
    "DataScopeError",
    "DataStats",
    "ExplorationResult",
    "GraphAnalytics",
    "GraphData",
    "GraphLink",
    "GraphNode",
    "GraphTooLargeError",
    "InvalidInputError",
    "LinkType",
    "NodeKind",
    "SearchMode",
    "SearchOptions",
    "TreeNode",
    "ValueType",
    "advanced_search_nodes",
    "analyze_graph",
    "build_graph",
    "build_tree",
    "calculate_stats",
    "explore",
    "get_path_string",
    "get_value_type",
    "search_nodes",
]
