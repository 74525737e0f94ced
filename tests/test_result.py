"""Tests for the ExplorationResult frozen dataclass."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from datascope.graph.analyzer import analyze_graph
from datascope.graph.builder import build_graph
from datascope.result import ExplorationResult
from datascope.stats import calculate_stats
from datascope.tree.builder import build_tree


def make_result(**overrides: object) -> ExplorationResult:
    """Return a valid ExplorationResult, optionally overriding specific fields."""
    doc = {"a": 1}
    graph = build_graph(doc)
    defaults: dict[str, object] = {
        "tree": build_tree(doc),
        "stats": calculate_stats(doc),
        "graph": graph,
        "analytics": analyze_graph(graph),
        "computation_time_ms": 1.5,
    }
    defaults.update(overrides)
    return ExplorationResult(**defaults)  # type: ignore[arg-type]


class TestExplorationResult:
    def test_construction(self) -> None:
        result = make_result()
        assert result.computation_time_ms == 1.5
        assert result.analytics.total_nodes == 2

    def test_frozen(self) -> None:
        result = make_result()
        with pytest.raises(FrozenInstanceError):
            result.computation_time_ms = 0.0  # type: ignore[misc]

    def test_equality(self) -> None:
        assert make_result() == make_result()

    def test_timing_participates_in_equality(self) -> None:
        assert make_result() != make_result(computation_time_ms=2.0)
