"""calculate_stats: counters over a parsed document.

Counts every value by ``ValueType``, the total number of keys/elements
enumerated by all containers, and the deepest nesting level reached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from datascope.tree.nodes import ValueType, get_value_type

__all__ = ["DataStats", "calculate_stats"]

logger = logging.getLogger(__name__)


def _empty_type_count() -> dict[ValueType, int]:
    return dict.fromkeys(ValueType, 0)


@dataclass(slots=True)
class DataStats:
    """Summary counters for one document (or sub-document).

    Attributes:
        total_keys: Sum of container sizes: object key counts plus array
            lengths, over every container in the document.
        max_depth:  Deepest nesting level reached, counted from the depth
            passed to ``calculate_stats``.
        type_count: Count per ValueType; all six buckets are always present.
    """

    total_keys: int = 0
    max_depth: int = 0
    type_count: dict[ValueType, int] = field(default_factory=_empty_type_count)

    def merge(self, other: DataStats) -> None:
        """Fold ``other`` into this instance.

        Keys and type counts are summed field by field; depth takes the max.
        """
        self.total_keys += other.total_keys
        self.max_depth = max(self.max_depth, other.max_depth)
        for value_type, count in other.type_count.items():
            self.type_count[value_type] += count


def _own_stats(value: Any, depth: int) -> DataStats:
    stats = DataStats(max_depth=depth)
    stats.type_count[get_value_type(value)] += 1
    if isinstance(value, (list, dict)):
        stats.total_keys = len(value)
    return stats


def calculate_stats(value: Any, depth: int = 0) -> DataStats:
    """Compute DataStats for ``value``.

    Args:
        value: Any valid JSON value.
        depth: Depth assigned to ``value`` itself. Defaults to 0.

    Returns:
        Aggregated DataStats. A primitive yields one type count and
        ``total_keys == 0``.

    Raises:
        InvalidInputError: If a nested value is not a valid JSON type.
    """
    stats = _own_stats(value, depth)
    stack: list[tuple[Any, int]] = []
    if isinstance(value, (list, dict)):
        stack.append((value, depth))

    while stack:
        item, level = stack.pop()
        children = item.values() if isinstance(item, dict) else item
        for child in children:
            stats.merge(_own_stats(child, level + 1))
            if isinstance(child, (list, dict)):
                stack.append((child, level + 1))

    logger.debug(
        "stats: %d keys, max depth %d", stats.total_keys, stats.max_depth
    )
    return stats
