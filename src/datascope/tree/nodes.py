"""TreeNode dataclass and ValueType StrEnum for the value-tree representation.

Provides the foundational data types used by ``build_tree`` to turn a parsed
document into path-addressed tree nodes for browsing and searching.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from datascope.errors import InvalidInputError

__all__ = ["CONTAINER_TYPES", "TreeNode", "ValueType", "format_number", "get_value_type"]


class ValueType(StrEnum):
    """The six JSON value kinds.

    StrEnum values are the lowercased member names:
    - STRING  -> "string"
    - NUMBER  -> "number"  : int or float (never bool)
    - BOOLEAN -> "boolean"
    - NULL    -> "null"
    - ARRAY   -> "array"   : Python list
    - OBJECT  -> "object"  : Python dict
    """

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    ARRAY = auto()
    OBJECT = auto()


CONTAINER_TYPES = frozenset({ValueType.ARRAY, ValueType.OBJECT})


def get_value_type(value: Any) -> ValueType:
    """Classify a parsed value.

    Raises:
        InvalidInputError: If value is not a valid JSON type.
    """
    if value is None:
        return ValueType.NULL
    # bool MUST be checked before int; bool subclasses int in Python
    if isinstance(value, bool):
        return ValueType.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueType.NUMBER
    if isinstance(value, str):
        return ValueType.STRING
    if isinstance(value, list):
        return ValueType.ARRAY
    if isinstance(value, dict):
        return ValueType.OBJECT
    raise InvalidInputError(value)


def format_number(value: int | float) -> str:
    """Render a number the way the document text shows it.

    Integral floats drop their fractional part (``1.0`` -> ``"1"``) so that a
    search for ``"1"`` finds a value parsed from ``1.0``.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(slots=True)
class TreeNode:
    """A node in the value tree.

    Attributes:
        key:         Object key, or the stringified index for array elements.
        value:       The original parsed value (the whole subtree for containers).
        type:        The ``ValueType`` of ``value``.
        path:        Keys/indices from the document root, all as strings.
                     Unique per node; used as the node's identity.
        children:    Child nodes for OBJECT/ARRAY nodes, ``None`` for primitives.
        is_expanded: Presentation flag; the only field expected to change after
                     construction.
    """

    key: str
    value: Any
    type: ValueType
    path: list[str]
    children: list[TreeNode] | None = None
    is_expanded: bool = False

    @property
    def is_container(self) -> bool:
        return self.type in CONTAINER_TYPES
