"""
Tests for leaf schemas (string, number, integer, boolean, equals).
"""

import math
import unittest

import pytest
from parameterized import parameterized

from not_me import (
    UNDEFINED,
    SchemaDefinitionError,
    boolean,
    equals,
    integer,
    number,
    string,
)


class TestLeafTypeChecks(unittest.TestCase):
    """Type checks accept their type and reject everything else."""

    @parameterized.expand([
        ("string", string, "hello", "hello"),
        ("empty_string", string, "", ""),
        ("int", number, 3, 3),
        ("float", number, 2.5, 2.5),
        ("negative", number, -1, -1),
        ("integer", integer, 7, 7),
        ("integral_float", integer, 4.0, 4),
        ("true", boolean, True, True),
        ("false", boolean, False, False),
    ])
    def test_accepts(self, _name, constructor, value, expected):
        result = constructor().validate(value)

        self.assertFalse(result.errors)
        self.assertEqual(result.value, expected)
        self.assertIs(type(result.value), type(expected))

    @parameterized.expand([
        ("string_int", string, 1, "Input is not a string"),
        ("string_none", string, None, "Input is not a string"),
        ("string_bool", string, True, "Input is not a string"),
        ("number_str", number, "1", "Input is not a number"),
        ("number_bool", number, True, "Input is not a number"),
        ("number_nan", number, float("nan"), "Input is not a number"),
        ("number_none", number, None, "Input is not a number"),
        ("integer_fraction", integer, 1.5, "Input is not an integer"),
        ("integer_bool", integer, False, "Input is not an integer"),
        ("integer_inf", integer, math.inf, "Input is not an integer"),
        ("boolean_int", boolean, 1, "Input is not a boolean"),
        ("boolean_str", boolean, "true", "Input is not a boolean"),
    ])
    def test_rejects(self, _name, constructor, value, message):
        result = constructor().validate(value)

        self.assertTrue(result.errors)
        self.assertEqual(result.messages_tree.to_data(), [message])

    @parameterized.expand([
        ("string", string),
        ("number", number),
        ("integer", integer),
        ("boolean", boolean),
    ])
    def test_absent_value_is_optional(self, _name, constructor):
        result = constructor().validate()

        self.assertFalse(result.errors)
        self.assertIs(result.value, UNDEFINED)


class TestEqualsSchema:
    """Tests for equals()."""

    def test_accepts_allowed_value(self):
        assert equals(["a", "b"]).validate("b").value == "b"

    def test_rejects_other_value(self):
        result = equals(["a", "b"]).validate("c")

        assert result.messages_tree.to_data() == [
            "Input is not equal to any of the allowed values: ['a', 'b']"
        ]

    def test_bool_does_not_match_int(self):
        assert equals([1]).validate(True).errors is True
        assert equals([True]).validate(1).errors is True
        assert equals([False]).validate(False).errors is False

    def test_int_matches_equal_float(self):
        assert equals([1]).validate(1.0).errors is False

    def test_none_can_be_allowed(self):
        assert equals([None, "x"]).validate(None).errors is False

    def test_empty_allowed_values(self):
        with pytest.raises(SchemaDefinitionError, match="at least one"):
            equals([])

    def test_string_is_not_a_sequence_of_values(self):
        with pytest.raises(SchemaDefinitionError):
            equals("abc")

    def test_allowed_values_are_copied(self):
        allowed = ["a"]
        schema = equals(allowed)
        allowed.append("b")

        assert schema.validate("b").errors is True
