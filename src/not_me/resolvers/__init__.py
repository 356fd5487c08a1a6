"""
Resolvers adapting validation results to presentation layers.

- form: nested ``{field: message}`` maps for form libraries
"""

from .form import (
    NOT_AN_OBJECT_TREE_MESSAGE,
    form_resolver,
    messages_tree_to_form_errors,
)

__all__ = [
    "form_resolver",
    "messages_tree_to_form_errors",
    "NOT_AN_OBJECT_TREE_MESSAGE",
]
