"""
Array schema.

Validates every element of a list or tuple against one element schema,
left to right. On failure the error tree is index-aligned with the input,
with ``None`` in place of elements that validated cleanly.
"""

from typing import Any, List, Optional, TypeVar

from ..error_messages import ErrorMessagesList, ErrorMessagesTree
from ..exceptions import SchemaDefinitionError
from ..result import ValidationFailure, ValidationResult, ValidationSuccess
from ..undefined import UNDEFINED
from .base import Schema, failure

T = TypeVar("T")


class ArraySchema(Schema[List[T]]):
    MESSAGE = "Input is not an array"

    def __init__(self, element: Schema[T]):
        if not isinstance(element, Schema):
            raise SchemaDefinitionError(f"array() expects an element schema, got: {element!r}")
        self._set_attributes(element=element)

    def _validate_present(self, value: Any) -> ValidationResult[List[T]]:
        if not isinstance(value, (list, tuple)):
            return failure(self.MESSAGE)

        output: List[Any] = []
        errors: List[Optional[ErrorMessagesTree]] = []
        failed = False

        for item in value:
            result = self.element.validate(item)
            if result.errors:
                failed = True
                errors.append(result.messages_tree)
                output.append(None)
            else:
                errors.append(None)
                # keep indices aligned when an element validates as absent
                output.append(None if result.value is UNDEFINED else result.value)

        if failed:
            return ValidationFailure(ErrorMessagesList(errors))
        return ValidationSuccess(output)

    def __repr__(self) -> str:
        return f"array({self.element!r})"


def array(element: Schema[T]) -> ArraySchema[T]:
    """Schema for a list whose elements all satisfy ``element``."""
    return ArraySchema(element)
