"""Public API functions for datascope.

Thin entry points over the builders, the analyzer and the search filters.
``explore`` creates a fresh ``DataExplorer`` per call so no state is shared
between calls.
"""

from __future__ import annotations

from typing import Any

from datascope.explorer import DataExplorer
from datascope.graph.analyzer import analyze_graph
from datascope.graph.builder import build_graph
from datascope.graph.config import AnalyzerConfig
from datascope.result import ExplorationResult
from datascope.search.filter import advanced_search_nodes, search_nodes
from datascope.stats import calculate_stats
from datascope.tree.builder import build_tree

__all__ = [
    "advanced_search_nodes",
    "analyze_graph",
    "build_graph",
    "build_tree",
    "calculate_stats",
    "explore",
    "search_nodes",
]


def explore(value: Any, config: AnalyzerConfig | None = None) -> ExplorationResult:
    """Build the tree, stats, graph and analytics for a parsed document.

    Args:
        value:  Parsed document (dict, list, str, int, float, bool, None).
        config: Analyzer limits. Defaults to ``AnalyzerConfig()`` when None.

    Returns:
        An ``ExplorationResult``.
    """
    return DataExplorer(config=config).explore(value)
