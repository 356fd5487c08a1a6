"""
Schema constructors and classes.

Leaf schemas check a single value, container schemas (object, array)
validate nested structure, and refinements layer extra constraints onto
any schema.
"""

from .base import (
    DEFINED,
    NOT_DEFINED_MESSAGE,
    NULLABLE,
    DefinedRefinement,
    NullableRefinement,
    PredicateRefinement,
    RefinedSchema,
    Refinement,
    Schema,
)
from .leaf import (
    BooleanSchema,
    EqualsSchema,
    IntegerSchema,
    NumberSchema,
    StringSchema,
    boolean,
    equals,
    integer,
    number,
    string,
)
from .object_schema import ObjectSchema, object
from .array_schema import ArraySchema, array

__all__ = [
    # Base
    "Schema",
    "RefinedSchema",
    "Refinement",
    "DefinedRefinement",
    "NullableRefinement",
    "PredicateRefinement",
    "DEFINED",
    "NULLABLE",
    "NOT_DEFINED_MESSAGE",
    # Leaf
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
    # Containers
    "ObjectSchema",
    "ArraySchema",
    "object",
    "array",
]
