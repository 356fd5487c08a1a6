"""
Validation results.

Every call to ``Schema.validate`` returns exactly one of:

- ValidationSuccess: ``errors`` is False and ``value`` holds the sanitized value
- ValidationFailure: ``errors`` is True and ``messages_tree`` holds the errors
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, TypeVar, Union

from .error_messages import ErrorMessagesTree
from .undefined import UNDEFINED

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationSuccess(Generic[T]):
    """
    Successful validation.

    Attributes:
        value: Sanitized value. ``UNDEFINED`` when an optional value was absent.
    """

    value: T

    @property
    def errors(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to ``{"errors": False, "value": ...}``, omitting absent values."""
        result: Dict[str, Any] = {"errors": False}
        if self.value is not UNDEFINED:
            result["value"] = self.value
        return result


@dataclass(frozen=True)
class ValidationFailure:
    """
    Failed validation.

    Attributes:
        messages_tree: Error messages located by field name or index.
    """

    messages_tree: ErrorMessagesTree

    @property
    def errors(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to ``{"errors": True, "messagesTree": ...}``."""
        return {"errors": True, "messagesTree": self.messages_tree.to_data()}


ValidationResult = Union[ValidationSuccess[T], ValidationFailure]
