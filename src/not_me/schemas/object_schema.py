"""
Object schema.

Validates a mapping against declared field schemas and rebuilds a new dict
holding only the declared fields. Unknown input keys are dropped and absent
optional fields are left out.

Every declared field is validated, so a failing object reports the errors
of all its failing fields at once.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from ..error_messages import ErrorMessagesObject, ErrorMessagesTree
from ..exceptions import SchemaDefinitionError
from ..result import ValidationFailure, ValidationResult, ValidationSuccess
from ..undefined import UNDEFINED
from .base import Schema, failure


class ObjectSchema(Schema[Dict[str, Any]]):
    """
    Schema for key-value structures.

    Attributes:
        fields: Read-only mapping of field name to child schema, in
            declaration order.
    """

    MESSAGE = "Input is not an object"

    def __init__(self, fields: Mapping[str, Schema]):
        if not isinstance(fields, Mapping):
            raise SchemaDefinitionError(
                f"object() expects a mapping of field schemas, got: {fields!r}"
            )
        for name, schema in fields.items():
            if not isinstance(name, str):
                raise SchemaDefinitionError(f"Field name must be a string, got: {name!r}")
            if not isinstance(schema, Schema):
                raise SchemaDefinitionError(
                    f"Field '{name}' must be a schema, got: {schema!r}"
                )
        self._set_attributes(fields=MappingProxyType(dict(fields)))

    def _validate_present(self, value: Any) -> ValidationResult[Dict[str, Any]]:
        if not isinstance(value, Mapping):
            return failure(self.MESSAGE)

        output: Dict[str, Any] = {}
        errors: Dict[str, ErrorMessagesTree] = {}

        for name, schema in self.fields.items():
            result = schema.validate(value.get(name, UNDEFINED))
            if result.errors:
                errors[name] = result.messages_tree
            elif result.value is not UNDEFINED:
                output[name] = result.value

        if errors:
            return ValidationFailure(ErrorMessagesObject(errors))
        return ValidationSuccess(output)

    def __repr__(self) -> str:
        inner = ", ".join(f"{name!r}: {schema!r}" for name, schema in self.fields.items())
        return "object({" + inner + "})"


def object(fields: Optional[Mapping[str, Schema]] = None) -> ObjectSchema:
    """
    Schema for an object with the given fields.

    Example:
        >>> schema = object({"a": equals(["a"]).defined()}).defined()
        >>> schema.validate({"a": "a", "b": "b"}).value
        {'a': 'a'}
    """
    return ObjectSchema({} if fields is None else fields)
