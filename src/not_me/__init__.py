"""
not-me: composable runtime validation for untyped data.

Build a schema once, then validate any number of values against it. Each
call returns either a sanitized value or a tree of error messages located
by field name and index.

Example:
    >>> from not_me import object, number, equals
    >>> schema = object({
    ...     "a": number().defined(),
    ...     "kind": equals(["x", "y"]),
    ... }).defined()
    >>> schema.validate({"a": 1, "kind": "x", "extra": True}).value
    {'a': 1, 'kind': 'x'}
    >>> schema.validate({"a": "1"}).messages_tree.to_data()
    {'a': ['Input is not a number']}
"""

from .undefined import UNDEFINED
from .exceptions import FormResolverError, NotMeError, SchemaDefinitionError
from .error_messages import (
    ErrorMessagesLeaf,
    ErrorMessagesList,
    ErrorMessagesObject,
    ErrorMessagesTree,
)
from .result import ValidationFailure, ValidationResult, ValidationSuccess
from .schemas import (
    ArraySchema,
    BooleanSchema,
    EqualsSchema,
    IntegerSchema,
    NumberSchema,
    ObjectSchema,
    RefinedSchema,
    Refinement,
    Schema,
    StringSchema,
    array,
    boolean,
    equals,
    integer,
    number,
    object,
    string,
)
from .loader import SchemaDefinition, load_schema, load_schema_file

__all__ = [
    # Sentinel
    "UNDEFINED",
    # Exceptions
    "NotMeError",
    "SchemaDefinitionError",
    "FormResolverError",
    # Error messages tree
    "ErrorMessagesTree",
    "ErrorMessagesLeaf",
    "ErrorMessagesObject",
    "ErrorMessagesList",
    # Results
    "ValidationResult",
    "ValidationSuccess",
    "ValidationFailure",
    # Schemas
    "Schema",
    "RefinedSchema",
    "Refinement",
    "StringSchema",
    "NumberSchema",
    "IntegerSchema",
    "BooleanSchema",
    "EqualsSchema",
    "ObjectSchema",
    "ArraySchema",
    "string",
    "number",
    "integer",
    "boolean",
    "equals",
    "object",
    "array",
    # Declarative loading
    "SchemaDefinition",
    "load_schema",
    "load_schema_file",
    "__version__",
]

__version__ = "0.1.0"
