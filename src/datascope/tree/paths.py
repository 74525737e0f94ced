"""Human-readable rendering of TreeNode paths."""

from __future__ import annotations

import re
from typing import Literal

__all__ = ["get_path_string"]

_INDEX = re.compile(r"^\d+$")
_IDENTIFIER = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


def _dot_segment(segment: str) -> str:
    if _INDEX.match(segment):
        return f"[{segment}]"
    if _IDENTIFIER.match(segment):
        return segment
    return f'["{segment}"]'


def get_path_string(path: list[str], fmt: Literal["dot", "bracket"] = "dot") -> str:
    """Render a path as text.

    ``dot``:     ``["users", "0", "first name"]`` -> ``users.[0].["first name"]``
    ``bracket``: ``["users", "0"]`` -> ``["users"]["0"]``

    An empty path renders as ``""``.
    """
    if not path:
        return ""
    if fmt == "dot":
        return ".".join(_dot_segment(seg) for seg in path).removeprefix(".")
    return "".join(f'["{seg}"]' for seg in path)
