"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers by graph size: ~100, ~1 000 and ~5 000 nodes. All-pairs path
metrics dominate analysis cost (O(V·(V+E))), so the tiers grow the node count
rather than the nesting depth.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_records(count: int, fields: int = 4) -> list[dict[str, Any]]:
    """Generate ``count`` flat records, as a parsed CSV or JSONL file would be."""
    return [
        {f"field_{j}": f"value_{i}_{j}" if j % 2 else i * j for j in range(fields)}
        for i in range(count)
    ]


def generate_nested(sections: int, groups: int, leaves: int) -> dict[str, Any]:
    """Generate a three-level document: sections -> groups -> leaf keys."""
    return {
        f"section_{i}": {
            f"group_{j}": {f"leaf_{k}": [i, j, k] if k % 3 == 0 else k for k in range(leaves)}
            for j in range(groups)
        }
        for i in range(sections)
    }


@pytest.fixture(scope="session")
def doc_small() -> list[dict[str, Any]]:
    """20 records x 4 fields = 101 nodes."""
    return generate_records(20)


@pytest.fixture(scope="session")
def doc_medium() -> dict[str, Any]:
    """5 x 10 x 10 nested document, ~1 100 nodes."""
    return generate_nested(5, 10, 10)


@pytest.fixture(scope="session")
def doc_large() -> list[dict[str, Any]]:
    """1 000 records x 4 fields = 5 001 nodes."""
    return generate_records(1000)
