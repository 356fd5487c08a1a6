"""
Exception classes for not-me.

Validation failures are never raised: ``Schema.validate`` returns them as
data inside a ``ValidationFailure``. The exceptions below only signal
programmer misuse, either while building a schema or when handing a
result to an adapter that cannot represent it.

Design Principle:
    exceptions.py (BASE - zero dependencies)
        ^
    schemas/ (CORE)
        ^
    loader, resolvers/, cli (SURFACES)
"""


class NotMeError(Exception):
    """Base exception for not-me errors."""
    pass


class SchemaDefinitionError(NotMeError, ValueError):
    """
    Raised when a schema is constructed with an invalid configuration.

    Examples: an ``object`` field that is not a schema, an ``equals``
    schema with no allowed values, or a declarative definition that fails
    to parse.
    """
    pass


class FormResolverError(NotMeError, TypeError):
    """
    Raised when a form resolver receives an error tree it cannot map.

    Form error maps are keyed by field name, so the top-level tree must be
    an object node.
    """
    pass
