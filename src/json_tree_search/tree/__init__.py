"""Tree subpackage: the value model the search walks over.

Re-exports the public API for the tree module:
- to_tree_value: converts any JSON-like value into a BaseValue or ExpandableValue
- BaseValue / ExpandableValue: the two node shapes
- BaseValueType / ExpandableType: StrEnums tagging leaves and containers
- to_json_pointer / parse_json_pointer: RFC 6901 rendering of paths
"""

from json_tree_search.tree.pointer import (
    Path,
    PathSegment,
    parse_json_pointer,
    to_json_pointer,
)
from json_tree_search.tree.value import (
    BaseValue,
    BaseValueType,
    ExpandableType,
    ExpandableValue,
    SupportsTreeValue,
    TreeValue,
    is_expandable,
    iter_expandable_paths,
    to_tree_value,
)

__all__ = [
    "BaseValue",
    "BaseValueType",
    "ExpandableType",
    "ExpandableValue",
    "Path",
    "PathSegment",
    "SupportsTreeValue",
    "TreeValue",
    "is_expandable",
    "iter_expandable_paths",
    "parse_json_pointer",
    "to_json_pointer",
    "to_tree_value",
]
