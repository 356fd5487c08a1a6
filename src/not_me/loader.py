"""
Declarative schema loading.

Builds schema trees from plain mappings, typically read from YAML:

    type: object
    defined: true
    properties:
      name:
        type: string
        required: true
      status:
        type: equals
        allowed: [draft, published]
      tags:
        type: array
        items:
          type: string

Each definition is checked by the ``SchemaDefinition`` pydantic model
before any schema is built, so a bad definition fails with a
``SchemaDefinitionError`` naming the offending entry.

Example:
    >>> schema = load_schema({"type": "object", "properties": {"a": {"type": "number"}}})
    >>> schema.validate({"a": 1, "b": 2}).value
    {'a': 1}
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Literal, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .exceptions import SchemaDefinitionError
from .schemas import Schema, array, boolean, equals, integer, number, object, string

logger = logging.getLogger(__name__)

SchemaType = Literal["string", "number", "integer", "boolean", "equals", "object", "array"]


class SchemaDefinition(BaseModel):
    """
    Declarative definition of one schema node.

    Attributes:
        type: Schema kind
        defined: Reject absent values ("Input is not defined")
        required: Alias of ``defined``
        nullable: Accept ``None``
        allowed: Allowed values (equals only)
        properties: Field definitions (object only)
        items: Element definition (array only)
    """

    model_config = ConfigDict(extra="forbid")

    type: SchemaType = Field(..., description="Schema kind")
    defined: bool = Field(False, description="Reject absent values")
    required: bool = Field(False, description="Alias of defined")
    nullable: bool = Field(False, description="Accept None")
    allowed: Optional[List[Any]] = Field(None, description="Allowed values (equals only)")
    properties: Optional[Dict[str, "SchemaDefinition"]] = Field(
        None, description="Field definitions (object only)"
    )
    items: Optional["SchemaDefinition"] = Field(None, description="Element definition (array only)")

    @model_validator(mode="after")
    def check_type_options(self) -> "SchemaDefinition":
        if self.type == "equals":
            if not self.allowed:
                raise ValueError("'equals' requires a non-empty 'allowed' list")
        elif self.allowed is not None:
            raise ValueError(f"'allowed' is only valid for 'equals', not '{self.type}'")

        if self.type == "array":
            if self.items is None:
                raise ValueError("'array' requires an 'items' definition")
        elif self.items is not None:
            raise ValueError(f"'items' is only valid for 'array', not '{self.type}'")

        if self.type != "object" and self.properties is not None:
            raise ValueError(f"'properties' is only valid for 'object', not '{self.type}'")
        return self

    def build(self) -> Schema:
        """Build the schema this definition describes."""
        if self.type == "object":
            schema: Schema = object(
                {name: prop.build() for name, prop in (self.properties or {}).items()}
            )
        elif self.type == "array":
            schema = array(self.items.build())
        elif self.type == "equals":
            schema = equals(self.allowed)
        else:
            schema = _LEAF_CONSTRUCTORS[self.type]()

        if self.nullable:
            schema = schema.nullable()
        if self.defined or self.required:
            schema = schema.defined()
        return schema


SchemaDefinition.model_rebuild()

_LEAF_CONSTRUCTORS = {
    "string": string,
    "number": number,
    "integer": integer,
    "boolean": boolean,
}


def parse_definition(definition: Union[Mapping[str, Any], SchemaDefinition]) -> SchemaDefinition:
    """
    Check a raw definition mapping.

    Raises:
        SchemaDefinitionError: If the definition is malformed.
    """
    if isinstance(definition, SchemaDefinition):
        return definition
    if not isinstance(definition, Mapping):
        raise SchemaDefinitionError(
            f"Schema definition must be a mapping, got: {type(definition).__name__}"
        )
    try:
        return SchemaDefinition.model_validate(dict(definition))
    except ValidationError as e:
        raise SchemaDefinitionError(f"Invalid schema definition:\n{e}") from e


def load_schema(definition: Union[Mapping[str, Any], SchemaDefinition]) -> Schema:
    """
    Build a schema from a declarative definition.

    Raises:
        SchemaDefinitionError: If the definition is malformed.
    """
    schema = parse_definition(definition).build()
    logger.debug("Loaded schema %r", schema)
    return schema


def load_schema_file(path: Union[str, Path]) -> Schema:
    """
    Build a schema from a YAML (or JSON) definition file.

    Raises:
        FileNotFoundError: If the file does not exist.
        SchemaDefinitionError: If the file is not valid YAML or the
            definition is malformed.
    """
    path = Path(path)
    content = path.read_text()
    try:
        definition = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SchemaDefinitionError(f"Invalid YAML syntax in {path}: {e}") from e

    logger.info("Loading schema from %s", path)
    return load_schema(definition)
