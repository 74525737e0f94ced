"""Tests for ValueType, get_value_type, format_number and the TreeNode dataclass."""

from __future__ import annotations

import datetime

import pytest

from datascope.errors import DataScopeError, InvalidInputError
from datascope.tree.nodes import TreeNode, ValueType, format_number, get_value_type

# ---------------------------------------------------------------------------
# ValueType
# ---------------------------------------------------------------------------


class TestValueType:
    def test_has_exactly_six_members(self) -> None:
        assert len(list(ValueType)) == 6

    def test_values_are_lowercase_names(self) -> None:
        assert {m.value for m in ValueType} == {
            "string",
            "number",
            "boolean",
            "null",
            "array",
            "object",
        }

    def test_is_str_subclass(self) -> None:
        assert isinstance(ValueType.OBJECT, str)
        assert ValueType.OBJECT == "object"


# ---------------------------------------------------------------------------
# get_value_type
# ---------------------------------------------------------------------------


class TestGetValueType:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, ValueType.NULL),
            (True, ValueType.BOOLEAN),
            (False, ValueType.BOOLEAN),
            (0, ValueType.NUMBER),
            (3.5, ValueType.NUMBER),
            ("", ValueType.STRING),
            ([], ValueType.ARRAY),
            ({}, ValueType.OBJECT),
        ],
    )
    def test_classification(self, value: object, expected: ValueType) -> None:
        assert get_value_type(value) is expected

    def test_bool_is_not_number(self) -> None:
        """bool subclasses int; it must still classify as BOOLEAN."""
        assert get_value_type(True) is not ValueType.NUMBER

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(InvalidInputError, match="Unsupported JSON value type"):
            get_value_type(datetime.date(2024, 1, 1))

    def test_invalid_input_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            get_value_type({1, 2})

    def test_invalid_input_is_datascope_error(self) -> None:
        with pytest.raises(DataScopeError) as exc_info:
            get_value_type(object())
        assert exc_info.value.value_type is object


# ---------------------------------------------------------------------------
# format_number
# ---------------------------------------------------------------------------


class TestFormatNumber:
    def test_int(self) -> None:
        assert format_number(42) == "42"

    def test_integral_float_drops_fraction(self) -> None:
        assert format_number(1.0) == "1"

    def test_fractional_float(self) -> None:
        assert format_number(2.5) == "2.5"

    def test_negative(self) -> None:
        assert format_number(-3) == "-3"


# ---------------------------------------------------------------------------
# TreeNode
# ---------------------------------------------------------------------------


class TestTreeNode:
    def test_defaults(self) -> None:
        node = TreeNode(key="a", value=1, type=ValueType.NUMBER, path=["a"])
        assert node.children is None
        assert node.is_expanded is False

    def test_is_container(self) -> None:
        obj = TreeNode(key="o", value={}, type=ValueType.OBJECT, path=["o"], children=[])
        leaf = TreeNode(key="s", value="x", type=ValueType.STRING, path=["s"])
        assert obj.is_container
        assert not leaf.is_container

    def test_is_expanded_is_mutable(self) -> None:
        node = TreeNode(key="a", value=[], type=ValueType.ARRAY, path=["a"], children=[])
        node.is_expanded = True
        assert node.is_expanded is True

    def test_slots(self) -> None:
        node = TreeNode(key="a", value=1, type=ValueType.NUMBER, path=["a"])
        with pytest.raises(AttributeError):
            node.extra = 1  # type: ignore[attr-defined]
