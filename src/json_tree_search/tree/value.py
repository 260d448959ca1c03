"""Conversion of arbitrary JSON-like values into the two-shape tree model.

A value is presented either as a ``BaseValue`` (a leaf with a display string)
or as an ``ExpandableValue`` (ordered ``(segment, child)`` entries of an object
or array). Children stay as the caller's raw values: each one is converted
only when the traversal reaches it.

Types can take part in a search without being plain JSON by implementing
``SupportsTreeValue``::

    @dataclass
    class Point:
        x: int
        y: int

        def to_tree_value(self) -> TreeValue:
            return ExpandableValue(
                entries=(("x", self.x), ("y", self.y)),
                expandable_type=ExpandableType.OBJECT,
            )
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any, Protocol, runtime_checkable

from json_tree_search.tree.pointer import Path, PathSegment

__all__ = [
    "BaseValue",
    "BaseValueType",
    "ExpandableType",
    "ExpandableValue",
    "SupportsTreeValue",
    "TreeValue",
    "is_expandable",
    "iter_expandable_paths",
    "to_tree_value",
]


class BaseValueType(StrEnum):
    """Kind of a leaf value: null, bool, number or string."""

    NULL = auto()
    BOOL = auto()
    NUMBER = auto()
    STRING = auto()


class ExpandableType(StrEnum):
    """Whether an expandable value has object or array semantics.

    Only object keys take part in matching; array indices never do.
    """

    OBJECT = auto()
    ARRAY = auto()


@dataclass(frozen=True, slots=True)
class BaseValue:
    """A leaf of the tree.

    Attributes:
        value:         The original Python value.
        display_value: The rendered form used for matching ("null", "true", ...).
        value_type:    Which kind of leaf this is.
    """

    value: Any
    display_value: str
    value_type: BaseValueType


@dataclass(frozen=True, slots=True)
class ExpandableValue:
    """An object or array node.

    Attributes:
        entries:         ``(segment, child)`` pairs in document order. Object
                         segments are ``str`` keys, array segments ``int`` indices.
        expandable_type: OBJECT or ARRAY.
    """

    entries: tuple[tuple[PathSegment, Any], ...]
    expandable_type: ExpandableType


TreeValue = BaseValue | ExpandableValue


@runtime_checkable
class SupportsTreeValue(Protocol):
    """Structural protocol for values that convert themselves into a TreeValue."""

    def to_tree_value(self) -> TreeValue: ...


def to_tree_value(value: Any) -> TreeValue:
    """Convert a value into a ``BaseValue`` or ``ExpandableValue``.

    Dispatch order matters: bool is checked before int because bool
    subclasses int.

    Raises:
        TypeError: If the value has no tree representation, or an object has a
            non-string key.
    """
    if isinstance(value, (BaseValue, ExpandableValue)):
        return value

    if isinstance(value, SupportsTreeValue):
        return value.to_tree_value()

    if isinstance(value, bool):
        return BaseValue(value, "true" if value else "false", BaseValueType.BOOL)

    if value is None:
        return BaseValue(None, "null", BaseValueType.NULL)

    if isinstance(value, str):
        return BaseValue(value, value, BaseValueType.STRING)

    if isinstance(value, (int, float)):
        return BaseValue(value, str(value), BaseValueType.NUMBER)

    if isinstance(value, Mapping):
        for key in value:
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be str, got {type(key)!r}")
        return ExpandableValue(tuple(value.items()), ExpandableType.OBJECT)

    if isinstance(value, (list, tuple)):
        return ExpandableValue(tuple(enumerate(value)), ExpandableType.ARRAY)

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def is_expandable(value: Any) -> bool:
    """Return True if ``value`` converts to an object or array."""
    return isinstance(to_tree_value(value), ExpandableValue)


def iter_expandable_paths(value: Any) -> Iterator[Path]:
    """Yield the path of every expandable node, root first, depth-first."""
    tree_value = to_tree_value(value)
    if not isinstance(tree_value, ExpandableValue):
        return

    stack: list[tuple[Path, ExpandableValue]] = [((), tree_value)]
    while stack:
        path, node = stack.pop()
        yield path
        children = []
        for segment, child in node.entries:
            child_value = to_tree_value(child)
            if isinstance(child_value, ExpandableValue):
                children.append(((*path, segment), child_value))
        stack.extend(reversed(children))
