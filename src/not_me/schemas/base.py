"""
Base schema and refinements.

Every schema is an immutable ``Schema[T]``. ``validate`` handles absent
values (``UNDEFINED``) once for all variants and hands present values to
the variant's ``_validate_present``.

Refinements never mutate the receiver. They return a ``RefinedSchema``
that wraps the original schema with an ordered tuple of refinements:

- presence refinements (``defined``, ``nullable``) run before the inner
  schema and may decide the result on their own
- ``test`` predicates run after the inner schema succeeds, and every
  failing predicate's message is reported
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from ..error_messages import ErrorMessagesLeaf
from ..exceptions import SchemaDefinitionError
from ..result import ValidationFailure, ValidationResult, ValidationSuccess
from ..undefined import UNDEFINED

T = TypeVar("T")

NOT_DEFINED_MESSAGE = "Input is not defined"


def failure(*messages: str) -> ValidationFailure:
    """Build a failure holding a single leaf of messages."""
    return ValidationFailure(ErrorMessagesLeaf(messages))


class Schema(ABC, Generic[T]):
    """
    Immutable description of an expected shape producing values of type T.

    Subclasses set their attributes in ``__init__`` through
    ``_set_attributes``; plain assignment raises ``AttributeError``.
    """

    def validate(self, value: Any = UNDEFINED) -> ValidationResult[T]:
        """
        Validate ``value`` and return a success or a failure.

        Never raises for a well-formed schema. An absent value
        (``UNDEFINED``) succeeds with ``UNDEFINED`` unless the schema was
        refined with ``defined()``.
        """
        if value is UNDEFINED:
            return ValidationSuccess(UNDEFINED)
        return self._validate_present(value)

    @abstractmethod
    def _validate_present(self, value: Any) -> ValidationResult[T]:
        """Check a value that was supplied (possibly ``None``)."""

    def refine(self, refinement: "Refinement") -> "RefinedSchema[T]":
        """Return a new schema with ``refinement`` layered on this one."""
        return RefinedSchema(self, (refinement,))

    def defined(self) -> "RefinedSchema[T]":
        """Reject absent values with "Input is not defined"."""
        return self.refine(DEFINED)

    def required(self) -> "RefinedSchema[T]":
        """Alias of ``defined()``."""
        return self.defined()

    def nullable(self) -> "RefinedSchema[Optional[T]]":
        """Accept ``None`` without running the schema's own checks."""
        return self.refine(NULLABLE)

    def test(self, predicate: Callable[[T], bool], message: str) -> "RefinedSchema[T]":
        """
        Add a predicate run against the sanitized value.

        Predicates run in registration order once the schema's own checks
        pass, and the messages of all failing predicates are reported
        together. Absent and ``None`` values skip predicates.
        """
        return self.refine(PredicateRefinement(predicate, message))

    def _set_attributes(self, **attributes: Any) -> None:
        for name, value in attributes.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")


class Refinement:
    """
    Additional constraint layered onto a schema.

    ``check_presence`` runs before the inner schema and returns a result to
    short-circuit validation, or None to continue. ``check_value`` runs on a
    present sanitized value and returns a failure message, or None.
    """

    name = "refinement"

    def check_presence(self, value: Any) -> Optional[ValidationResult]:
        return None

    def check_value(self, value: Any) -> Optional[str]:
        return None

    def __repr__(self) -> str:
        return f"{self.name}()"


class DefinedRefinement(Refinement):
    name = "defined"

    def check_presence(self, value: Any) -> Optional[ValidationResult]:
        if value is UNDEFINED:
            return failure(NOT_DEFINED_MESSAGE)
        return None


class NullableRefinement(Refinement):
    name = "nullable"

    def check_presence(self, value: Any) -> Optional[ValidationResult]:
        if value is None:
            return ValidationSuccess(None)
        return None


class PredicateRefinement(Refinement):
    name = "test"

    def __init__(self, predicate: Callable[[Any], bool], message: str):
        if not callable(predicate):
            raise SchemaDefinitionError(f"Test predicate must be callable, got: {predicate!r}")
        self.predicate = predicate
        self.message = message

    def check_value(self, value: Any) -> Optional[str]:
        if self.predicate(value):
            return None
        return self.message

    def __repr__(self) -> str:
        return f"test({self.message!r})"


DEFINED = DefinedRefinement()
NULLABLE = NullableRefinement()


class RefinedSchema(Schema[T]):
    """
    A schema wrapped with an ordered tuple of refinements.

    Refining a ``RefinedSchema`` appends to the tuple and keeps the same
    inner schema.
    """

    def __init__(self, inner: Schema[T], refinements: Tuple[Refinement, ...]):
        self._set_attributes(inner=inner, refinements=tuple(refinements))

    def validate(self, value: Any = UNDEFINED) -> ValidationResult[T]:
        for refinement in self.refinements:
            decided = refinement.check_presence(value)
            if decided is not None:
                return decided

        result = self.inner.validate(value)
        if result.errors or result.value is UNDEFINED or result.value is None:
            return result

        messages = []
        for refinement in self.refinements:
            message = refinement.check_value(result.value)
            if message is not None:
                messages.append(message)
        if messages:
            return failure(*messages)
        return result

    def _validate_present(self, value: Any) -> ValidationResult[T]:
        return self.validate(value)

    def refine(self, refinement: Refinement) -> "RefinedSchema[T]":
        return RefinedSchema(self.inner, self.refinements + (refinement,))

    @property
    def is_defined(self) -> bool:
        return any(isinstance(r, DefinedRefinement) for r in self.refinements)

    def __repr__(self) -> str:
        chain = "".join(f".{r!r}" for r in self.refinements)
        return f"{self.inner!r}{chain}"
