"""
Error messages tree.

A tree of human-readable validation messages that mirrors the shape of the
validated input:

- ErrorMessagesLeaf: ordered, non-empty messages for one value
- ErrorMessagesObject: field name -> tree, only for fields that failed
- ErrorMessagesList: index-aligned trees, ``None`` for clean elements

``to_data()`` converts a tree into plain lists and dicts, e.g.::

    {"a": ["Input is not an object"], "tags": [None, ["Input is not a string"]]}
"""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple


class ErrorMessagesTree(ABC):
    """Base class of every error tree node."""

    __slots__ = ()

    @abstractmethod
    def to_data(self) -> Any:
        """Convert to plain lists and dicts."""

    @staticmethod
    def from_data(data: Any) -> "ErrorMessagesTree":
        """
        Parse the plain shape produced by ``to_data``.

        A list made only of strings is a leaf, any other list is a list
        node, and a dict is an object node.

        Raises:
            ValueError: If ``data`` is not a valid tree shape.
        """
        if isinstance(data, Mapping):
            return ErrorMessagesObject(
                {key: ErrorMessagesTree.from_data(child) for key, child in data.items()}
            )
        if isinstance(data, (list, tuple)):
            if not data:
                raise ValueError("Empty list is not a valid error messages tree")
            if all(isinstance(item, str) for item in data):
                return ErrorMessagesLeaf(data)
            return ErrorMessagesList(
                [None if item is None else ErrorMessagesTree.from_data(item) for item in data]
            )
        raise ValueError(f"Invalid error messages tree node: {data!r}")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ErrorMessagesTree):
            return NotImplemented
        return type(self) is type(other) and self.to_data() == other.to_data()

    __hash__ = None


class ErrorMessagesLeaf(ErrorMessagesTree):
    """Messages reported against a single value, in evaluation order."""

    __slots__ = ("messages",)

    def __init__(self, messages: Iterable[str]):
        messages = tuple(messages)
        if not messages:
            raise ValueError("ErrorMessagesLeaf requires at least one message")
        object.__setattr__(self, "messages", messages)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ErrorMessagesLeaf is immutable")

    @property
    def first_message(self) -> str:
        return self.messages[0]

    def to_data(self) -> list:
        return list(self.messages)

    def __repr__(self) -> str:
        return f"ErrorMessagesLeaf({list(self.messages)!r})"


class ErrorMessagesObject(ErrorMessagesTree):
    """
    Errors of an object's fields, keyed by field name.

    A missing key means the field validated cleanly.
    """

    __slots__ = ("fields",)

    def __init__(self, fields: Mapping[str, ErrorMessagesTree]):
        object.__setattr__(self, "fields", MappingProxyType(dict(fields)))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ErrorMessagesObject is immutable")

    def __getitem__(self, name: str) -> ErrorMessagesTree:
        return self.fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def __len__(self) -> int:
        return len(self.fields)

    def to_data(self) -> Dict[str, Any]:
        return {name: child.to_data() for name, child in self.fields.items()}

    def __repr__(self) -> str:
        return f"ErrorMessagesObject({dict(self.fields)!r})"


class ErrorMessagesList(ErrorMessagesTree):
    """Errors of an array's elements, aligned with the input indices."""

    __slots__ = ("items",)

    def __init__(self, items: Sequence[Optional[ErrorMessagesTree]]):
        object.__setattr__(self, "items", tuple(items))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ErrorMessagesList is immutable")

    def __getitem__(self, index: int) -> Optional[ErrorMessagesTree]:
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def errors(self) -> Tuple[Tuple[int, ErrorMessagesTree], ...]:
        """(index, tree) pairs for elements that failed, in index order."""
        return tuple((index, item) for index, item in enumerate(self.items) if item is not None)

    def to_data(self) -> list:
        return [None if item is None else item.to_data() for item in self.items]

    def __repr__(self) -> str:
        return f"ErrorMessagesList({list(self.items)!r})"
