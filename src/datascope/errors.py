"""Exception hierarchy for datascope.

All library errors derive from ``DataScopeError`` and additionally from the
builtin exception a caller would naturally expect (``TypeError`` for values
outside the JSON value model, ``ValueError`` for size limits), so existing
``except TypeError`` handlers keep working.
"""

from __future__ import annotations

__all__ = ["DataScopeError", "GraphTooLargeError", "InvalidInputError"]


class DataScopeError(Exception):
    """Base class for every error raised by datascope."""


class InvalidInputError(DataScopeError, TypeError):
    """A value is not one of the JSON shapes (object, array, string, number,
    boolean, null).

    Raised by the builders when the upstream parser hands over something
    like a ``datetime`` or a ``set``.
    """

    def __init__(self, value: object) -> None:
        self.value_type = type(value)
        super().__init__(f"Unsupported JSON value type: {type(value)!r}")


class GraphTooLargeError(DataScopeError, ValueError):
    """The graph exceeds ``AnalyzerConfig.max_nodes``."""

    def __init__(self, total_nodes: int, max_nodes: int) -> None:
        self.total_nodes = total_nodes
        self.max_nodes = max_nodes
        super().__init__(
            f"graph has {total_nodes} nodes, analysis is capped at {max_nodes}"
        )
