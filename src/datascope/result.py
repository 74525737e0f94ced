"""ExplorationResult dataclass for one-shot document exploration.

This module provides the result type returned by ``explore()`` calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datascope.graph.models import GraphAnalytics, GraphData
    from datascope.stats import DataStats
    from datascope.tree.nodes import TreeNode

__all__ = ["ExplorationResult"]


@dataclass(frozen=True, slots=True)
class ExplorationResult:
    """Everything derived from one parsed document.

    Attributes:
        tree: Top-level TreeNodes (``[]`` for a bare primitive document).
        stats: Key/depth/type counters.
        graph: Node/link graph rooted at ``"root"``.
        analytics: Metrics over ``graph``.
        computation_time_ms: Wall-clock duration of the whole pass in
            milliseconds.
    """

    tree: list[TreeNode]
    stats: DataStats
    graph: GraphData
    analytics: GraphAnalytics
    computation_time_ms: float
