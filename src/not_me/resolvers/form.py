"""
Form resolver.

Turns a schema into a form validation callback returning ``None`` for
valid values, or a nested ``{field: message}`` map showing one message per
field:

- object nodes keep every failing field
- leaves keep only their first message
- list nodes keep only the first failing element's errors

Example:
    >>> resolve = form_resolver(object({"a": number().defined()}).defined())
    >>> resolve({"a": "not a number"})
    {'a': 'Input is not a number'}
"""

import logging
from typing import Any, Callable, Dict, Optional, Union

from ..error_messages import (
    ErrorMessagesLeaf,
    ErrorMessagesList,
    ErrorMessagesObject,
    ErrorMessagesTree,
)
from ..exceptions import FormResolverError
from ..schemas.base import Schema

logger = logging.getLogger(__name__)

FormErrors = Dict[str, Any]
FormError = Union[str, None, FormErrors]

NOT_AN_OBJECT_TREE_MESSAGE = (
    "Messages tree should be an object. "
    "Make sure you're using an object schema to validate your form."
)


def _flatten(tree: ErrorMessagesTree) -> FormError:
    if isinstance(tree, ErrorMessagesObject):
        return messages_tree_to_form_errors(tree)
    if isinstance(tree, ErrorMessagesList):
        errors = tree.errors()
        if not errors:
            return None
        _, first = errors[0]
        return _flatten(first)
    if isinstance(tree, ErrorMessagesLeaf):
        return tree.first_message
    raise TypeError(f"Unknown error messages tree node: {tree!r}")


def messages_tree_to_form_errors(tree: ErrorMessagesObject) -> FormErrors:
    """Flatten an object error tree into ``{field: message-or-nested-map}``."""
    return {name: _flatten(child) for name, child in tree.fields.items()}


def form_resolver(schema: Schema) -> Callable[[Any], Optional[FormErrors]]:
    """
    Build a form validation callback from an object schema.

    Returns:
        Callable taking the form values and returning None when they are
        valid, or the flattened error map when they are not.

    Raises (from the callback):
        FormResolverError: If the schema produced an error tree that is not
            an object, e.g. when validating a form with an array schema.
    """

    def resolve(values: Any) -> Optional[FormErrors]:
        result = schema.validate(values)
        if not result.errors:
            return None

        tree = result.messages_tree
        if not isinstance(tree, ErrorMessagesObject):
            logger.error("Form schema produced a %s error tree", type(tree).__name__)
            raise FormResolverError(NOT_AN_OBJECT_TREE_MESSAGE)

        form_errors = messages_tree_to_form_errors(tree)
        logger.debug("Form validation failed for fields: %s", list(form_errors))
        return form_errors

    return resolve
