"""DataExplorer: runs every derivation over one parsed document.

Wires ``build_tree``, ``calculate_stats``, ``build_graph`` and
``analyze_graph`` into a single ``explore()`` call and times it. The explorer
holds only its immutable ``AnalyzerConfig``, so one instance can be reused for
any number of documents.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from datascope.graph.analyzer import analyze_graph
from datascope.graph.builder import build_graph
from datascope.graph.config import AnalyzerConfig
from datascope.result import ExplorationResult
from datascope.stats import calculate_stats
from datascope.tree.builder import build_tree

__all__ = ["DataExplorer"]

logger = logging.getLogger(__name__)


class DataExplorer:
    """Orchestrator for document exploration.

    Example::

        from datascope.explorer import DataExplorer

        explorer = DataExplorer()
        result = explorer.explore({"a": 1, "b": [2, 3]})
        print(result.analytics.total_nodes)   # 5
        print(result.stats.total_keys)        # 4
    """

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        """Initialise the explorer.

        Args:
            config: Analyzer limits. Defaults to ``AnalyzerConfig()``.
        """
        self._config: AnalyzerConfig = config if config is not None else AnalyzerConfig()

    @property
    def config(self) -> AnalyzerConfig:
        return self._config

    def explore(self, value: Any) -> ExplorationResult:
        """Derive tree, stats, graph and analytics for ``value``.

        Args:
            value: Parsed document (dict, list, str, int, float, bool, None).

        Returns:
            An ``ExplorationResult`` with all five fields populated.

        Raises:
            InvalidInputError: If ``value`` contains a non-JSON value.
            GraphTooLargeError: If the graph exceeds ``config.max_nodes``.
        """
        t0 = time.perf_counter()

        tree = build_tree(value)
        stats = calculate_stats(value)
        graph = build_graph(value)
        analytics = analyze_graph(graph, self._config)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug("explored document in %.2f ms", elapsed_ms)

        return ExplorationResult(
            tree=tree,
            stats=stats,
            graph=graph,
            analytics=analytics,
            computation_time_ms=elapsed_ms,
        )
