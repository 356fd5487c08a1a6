"""
Tests for the Object Schema.

Covers optional/defined objects, non-object input, field aggregation,
unknown-field stripping and the empty schema.
"""

import pytest

from not_me import (
    UNDEFINED,
    ErrorMessagesObject,
    SchemaDefinitionError,
    equals,
    number,
    object,
    string,
)


class TestObjectSchemaBasics:
    """Tests for nested optional and defined objects."""

    def test_accepts_object_input(self):
        """Nested optional objects may be omitted entirely."""
        schema = object({"a": object({"b": object({})})})

        result = schema.validate({})

        assert result.to_dict() == {"errors": False, "value": {}}

    def test_fails_with_non_object_input(self):
        """A non-object nested value reports a single message at its field."""
        schema = object({"a": object({"b": object({})})})

        result = schema.validate({"a": 2})

        assert result.to_dict() == {
            "errors": True,
            "messagesTree": {"a": ["Input is not an object"]},
        }

    def test_fails_with_non_defined_object_input(self):
        """A defined nested object must be present."""
        schema = object({"a": object({"b": object({})}).defined()})

        result = schema.validate({})

        assert result.to_dict() == {
            "errors": True,
            "messagesTree": {"a": ["Input is not defined"]},
        }

    def test_fails_with_invalid_property(self):
        """Leaf errors are keyed by field name."""
        schema = object({"a": string().defined()})

        result = schema.validate({"a": True})

        assert result.to_dict() == {
            "errors": True,
            "messagesTree": {"a": ["Input is not a string"]},
        }

    def test_nested_defined_objects_pass(self):
        """Deeply defined objects return the sanitized structure."""
        schema = object({"a": object({"b": number().defined()}).defined()}).defined()

        result = schema.validate({"a": {"b": 2}})

        assert result.errors is False
        assert result.value == {"a": {"b": 2}}

    def test_wrong_leaf_type_in_defined_object(self):
        """Wrong type for a defined number field."""
        schema = object({"a": number().defined()}).defined()

        result = schema.validate({"a": "x"})

        assert result.errors is True
        assert result.messages_tree.to_data() == {"a": ["Input is not a number"]}

    def test_optional_object_absent_is_undefined(self):
        """An optional object validated without a value stays absent."""
        result = object({"a": number()}).validate()

        assert result.errors is False
        assert result.value is UNDEFINED

    def test_defined_object_absent_fails_without_descending(self):
        """A missing defined object fails with one message and no field errors."""
        schema = object({"a": number().defined(), "b": string().defined()}).defined()

        result = schema.validate()

        assert result.messages_tree.to_data() == ["Input is not defined"]

    def test_output_is_a_new_dict(self):
        """The input mapping is never returned or mutated."""
        data = {"a": 1, "b": 2}
        result = object({"a": number()}).validate(data)

        assert result.value == {"a": 1}
        assert result.value is not data
        assert data == {"a": 1, "b": 2}


class TestNonObjectInput:
    """Any non-mapping input fails with a single top-level message."""

    @pytest.mark.parametrize(
        "value",
        [None, 0, 2, 1.5, True, "text", "", [], [1, 2], (1,), {1, 2}],
    )
    def test_non_mapping_input(self, value):
        schema = object({"a": number().defined()})

        result = schema.validate(value)

        assert result.errors is True
        assert result.messages_tree.to_data() == ["Input is not an object"]


class TestObjectAggregation:
    """Tests for error aggregation across fields."""

    def test_reports_every_failing_field(self):
        """Two failing siblings both appear in the tree."""
        schema = object({"a": number().defined(), "b": string().defined(), "c": string()})

        result = schema.validate({"b": 3, "c": "ok"})

        tree = result.messages_tree
        assert isinstance(tree, ErrorMessagesObject)
        assert tree.to_data() == {
            "a": ["Input is not defined"],
            "b": ["Input is not a string"],
        }
        assert "c" not in tree

    def test_nested_errors_mirror_input_shape(self, user_schema):
        """Errors inside nested objects are keyed by path."""
        result = user_schema.validate(
            {"name": "Ann", "role": "owner", "address": {"zip": 1000}}
        )

        assert result.messages_tree.to_data() == {
            "role": [
                "Input is not equal to any of the allowed values: ['admin', 'member']"
            ],
            "address": {
                "city": ["Input is not defined"],
                "zip": ["Input is not a string"],
            },
        }

    def test_valid_nested_object(self, user_schema):
        """Valid nested input returns declared fields only."""
        result = user_schema.validate(
            {
                "name": "Ann",
                "role": "admin",
                "address": {"city": "Lisbon", "country": "PT"},
                "password": "secret",
            }
        )

        assert result.value == {
            "name": "Ann",
            "role": "admin",
            "address": {"city": "Lisbon"},
        }


class TestUnknownFields:
    """Tests for stripping fields not declared in the schema."""

    def test_strip_unknown_fields(self):
        """Unknown keys never reach the output."""
        schema = object({"a": equals(["a"]).defined()}).defined()

        result = schema.validate({"a": "a", "b": "b"})

        assert result.to_dict() == {"errors": False, "value": {"a": "a"}}

    def test_missing_optional_field_is_absent(self):
        """Missing optional fields are left out rather than set to None."""
        result = object({"a": number(), "b": number()}).validate({"a": 1})

        assert result.value == {"a": 1}
        assert "b" not in result.value

    def test_explicit_none_is_not_absent(self):
        """None is a value, so a nullable field keeps it."""
        result = object({"a": number().nullable()}).validate({"a": None})

        assert result.value == {"a": None}


class TestEmptySchema:
    """Tests for object({})."""

    def test_empty_schema_empty_object_pass(self):
        result = object({}).defined().validate({})

        assert result.to_dict() == {"errors": False, "value": {}}

    def test_empty_schema_strips_everything(self):
        result = object({}).validate({"extra": 1})

        assert result.errors is False
        assert result.value == {}

    def test_object_without_fields_argument(self):
        assert object().validate({"x": 1}).value == {}


class TestObjectSchemaDefinition:
    """Tests for invalid object schema construction."""

    def test_field_must_be_schema(self):
        with pytest.raises(SchemaDefinitionError, match="Field 'a' must be a schema"):
            object({"a": "string"})

    def test_field_name_must_be_string(self):
        with pytest.raises(SchemaDefinitionError, match="Field name must be a string"):
            object({1: string()})

    def test_fields_must_be_mapping(self):
        with pytest.raises(SchemaDefinitionError):
            object([("a", string())])

    def test_schema_is_immutable(self):
        schema = object({"a": string()})

        with pytest.raises(AttributeError):
            schema.fields = {}
        with pytest.raises(TypeError):
            schema.fields["b"] = string()
