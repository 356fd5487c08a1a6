"""
Leaf schemas: terminal type and value checks.

- string(): str
- number(): int or float (not bool, not NaN)
- integer(): int, or a float with an integral value (returned as int)
- boolean(): bool
- equals(allowed): one of a fixed set of values
"""

import math
from typing import Any, Sequence, TypeVar

from ..exceptions import SchemaDefinitionError
from ..result import ValidationResult, ValidationSuccess
from .base import Schema, failure

T = TypeVar("T")


class StringSchema(Schema[str]):
    MESSAGE = "Input is not a string"

    def _validate_present(self, value: Any) -> ValidationResult[str]:
        if isinstance(value, str):
            return ValidationSuccess(value)
        return failure(self.MESSAGE)

    def __repr__(self) -> str:
        return "string()"


class NumberSchema(Schema[float]):
    MESSAGE = "Input is not a number"

    def _validate_present(self, value: Any) -> ValidationResult[float]:
        # bool is a subclass of int
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return failure(self.MESSAGE)
        if isinstance(value, float) and math.isnan(value):
            return failure(self.MESSAGE)
        return ValidationSuccess(value)

    def __repr__(self) -> str:
        return "number()"


class IntegerSchema(Schema[int]):
    MESSAGE = "Input is not an integer"

    def _validate_present(self, value: Any) -> ValidationResult[int]:
        if isinstance(value, bool):
            return failure(self.MESSAGE)
        if isinstance(value, int):
            return ValidationSuccess(value)
        if isinstance(value, float) and math.isfinite(value) and value == int(value):
            return ValidationSuccess(int(value))
        return failure(self.MESSAGE)

    def __repr__(self) -> str:
        return "integer()"


class BooleanSchema(Schema[bool]):
    MESSAGE = "Input is not a boolean"

    def _validate_present(self, value: Any) -> ValidationResult[bool]:
        if isinstance(value, bool):
            return ValidationSuccess(value)
        return failure(self.MESSAGE)

    def __repr__(self) -> str:
        return "boolean()"


def _same_value(left: Any, right: Any) -> bool:
    """Equality that keeps True/False apart from 1/0."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    return left == right


class EqualsSchema(Schema[T]):
    """Accepts only values equal to one of ``allowed``."""

    def __init__(self, allowed: Sequence[T]):
        if isinstance(allowed, (str, bytes)) or not isinstance(allowed, Sequence):
            raise SchemaDefinitionError(
                f"equals() expects a sequence of allowed values, got: {allowed!r}"
            )
        if not allowed:
            raise SchemaDefinitionError("equals() requires at least one allowed value")
        self._set_attributes(allowed=tuple(allowed))

    @property
    def message(self) -> str:
        return f"Input is not equal to any of the allowed values: {list(self.allowed)!r}"

    def _validate_present(self, value: Any) -> ValidationResult[T]:
        for candidate in self.allowed:
            if _same_value(value, candidate):
                return ValidationSuccess(value)
        return failure(self.message)

    def __repr__(self) -> str:
        return f"equals({list(self.allowed)!r})"


def string() -> StringSchema:
    return StringSchema()


def number() -> NumberSchema:
    return NumberSchema()


def integer() -> IntegerSchema:
    return IntegerSchema()


def boolean() -> BooleanSchema:
    return BooleanSchema()


def equals(allowed: Sequence[T]) -> EqualsSchema[T]:
    """
    Schema accepting only the given values.

    Example:
        >>> equals(["draft", "published"]).validate("draft").value
        'draft'
    """
    return EqualsSchema(allowed)


__all__ = [
    "StringSchema",
    "NumberSchema",
    "IntegerSchema",
    "BooleanSchema",
    "EqualsSchema",
    "string",
    "number",
    "integer",
    "boolean",
    "equals",
]
