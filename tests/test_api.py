"""Tests for the public API functions in datascope.api."""

from __future__ import annotations

import pytest

from datascope import api
from datascope.errors import GraphTooLargeError, InvalidInputError
from datascope.graph.config import AnalyzerConfig
from datascope.result import ExplorationResult


class TestExplore:
    def test_returns_exploration_result(self) -> None:
        assert isinstance(api.explore({"a": 1}), ExplorationResult)

    def test_reference_document(self) -> None:
        result = api.explore({"a": 1, "b": [2, 3]})
        assert [n.key for n in result.tree] == ["a", "b"]
        assert result.stats.total_keys == 4
        assert [n.id for n in result.graph.nodes][0] == "root"
        assert result.analytics.total_nodes == 5
        assert result.analytics.average_degree == pytest.approx(1.6)

    def test_graph_has_one_more_node_than_tree(self) -> None:
        result = api.explore({"users": [{"id": 1}, {"id": 2}]})
        assert result.analytics.total_nodes == 6

    def test_primitive_document(self) -> None:
        result = api.explore(42)
        assert result.tree == []
        assert result.analytics.total_nodes == 1

    def test_config_forwarded(self) -> None:
        with pytest.raises(GraphTooLargeError):
            api.explore([1, 2, 3], config=AnalyzerConfig(max_nodes=2))

    def test_invalid_input(self) -> None:
        with pytest.raises(InvalidInputError):
            api.explore({"bad": b"bytes"})

    def test_timing_recorded(self) -> None:
        assert api.explore({"a": 1}).computation_time_ms >= 0.0

    def test_repeat_calls_equal_apart_from_timing(self) -> None:
        doc = {"x": [1, {"y": None}]}
        first = api.explore(doc)
        second = api.explore(doc)
        assert first.analytics == second.analytics
        assert first.graph == second.graph
        assert first.stats == second.stats


class TestReExports:
    def test_functions_exposed(self) -> None:
        for name in api.__all__:
            assert callable(getattr(api, name))
