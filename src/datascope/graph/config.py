"""AnalyzerConfig for graph analysis.

AnalyzerConfig is a frozen (immutable) dataclass holding resource limits for
``analyze_graph``. The defaults impose no cap, so the analysis stays total
over any graph.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["AnalyzerConfig"]


@dataclass(frozen=True, slots=True)
class AnalyzerConfig:
    """Immutable configuration for ``analyze_graph``.

    Attributes:
        max_nodes: Refuse graphs with more nodes than this (raises
            ``GraphTooLargeError``). ``None`` means unlimited.  All-pairs path
            metrics are O(V·(V+E)), so hosts analysing untrusted documents
            should set a cap.
        path_batch_size: Number of BFS origins solved together when computing
            diameter and average path.  Peak memory for the distance block is
            ``path_batch_size * V`` floats.
    """

    max_nodes: int | None = None
    path_batch_size: int = 256

    def __post_init__(self) -> None:
        if self.max_nodes is not None and self.max_nodes < 0:
            msg = f"max_nodes must be >= 0 or None, got {self.max_nodes}"
            raise ValueError(msg)
        if self.path_batch_size < 1:
            msg = f"path_batch_size must be >= 1, got {self.path_batch_size}"
            raise ValueError(msg)
