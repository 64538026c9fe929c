"""Building trees from the fields of dataclass instances."""

from __future__ import annotations

import dataclasses
import sys
from collections.abc import Callable
from enum import IntEnum
from typing import Any, Optional

from treeprint.helpers import TREE_TAG, filter_tags, is_empty, tag_spec
from treeprint.tree import Node, new

FmtFunc = Callable[[str, Any], "tuple[str, bool]"]

# Decides, for one field, whether the node gets a meta value and which one.
_Describe = Callable[[str, dataclasses.Field, Any, bool], "tuple[bool, Any]"]


class StructTreeOption(IntEnum):
    """What each node built from a field shows as its meta value."""

    NAME = 0
    VALUE = 1
    TAG = 2
    TYPE = 3
    TYPE_SIZE = 4


class StructTreeError(ValueError):
    """Raised when a value cannot be turned into a tree."""


def _is_struct(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _type_name(value: Any) -> str:
    return type(value).__qualname__


def _check_struct(value: Any) -> tuple[dataclasses.Field, ...]:
    if not _is_struct(value):
        raise StructTreeError(
            f"treeprint: {_type_name(value)} is not a struct we could work with"
        )
    return dataclasses.fields(value)


def _field_meta(field: dataclasses.Field) -> tuple[str, bool, bool]:
    """Return the displayed name of a field and its skip and omit flags."""
    name, omit = "", False
    tag = field.metadata.get(TREE_TAG)
    if tag:
        name, omit = tag_spec(str(tag))
    if name == "-":
        return field.name, True, omit
    if not name.strip():
        name = field.name
    return name, False, omit


def _build(tree: Node, value: Any, describe: Optional[_Describe]) -> None:
    """Add a node for every shown field of ``value``; without ``describe`` no meta."""
    for field in _check_struct(value):
        field_value = getattr(value, field.name)
        name, skip, omit = _field_meta(field)
        if skip or (omit and is_empty(field_value)):
            continue
        is_struct = _is_struct(field_value)
        if describe is None:
            has_meta, meta = False, None
        else:
            has_meta, meta = describe(name, field, field_value, is_struct)
        if not is_struct or not dataclasses.fields(field_value):
            if has_meta:
                tree.add_meta_node(meta, name)
            else:
                tree.add_node(name)
            continue
        branch = tree.add_meta_branch(meta, name) if has_meta else tree.add_branch(name)
        try:
            _build(branch, field_value, describe)
        except StructTreeError as err:
            raise StructTreeError(f"{err} on struct branch {name}") from err


def _describe_value(name, field, value, is_struct):
    return not is_struct, value


def _describe_tag(name, field, value, is_struct):
    return True, filter_tags(field.metadata)


def _describe_type(name, field, value, is_struct):
    return True, _type_name(value)


def _describe_size(name, field, value, is_struct):
    return True, sys.getsizeof(value)


_DESCRIBERS: dict[StructTreeOption, Optional[_Describe]] = {
    StructTreeOption.NAME: None,
    StructTreeOption.VALUE: _describe_value,
    StructTreeOption.TAG: _describe_tag,
    StructTreeOption.TYPE: _describe_type,
    StructTreeOption.TYPE_SIZE: _describe_size,
}


def from_struct(value: Any, option: StructTreeOption | int = StructTreeOption.NAME) -> Node:
    """Build a tree from the fields of a dataclass instance."""
    try:
        mode = StructTreeOption(option)
    except ValueError:
        raise StructTreeError(f"treeprint: invalid StructTreeOption {option}") from None
    tree = new()
    _build(tree, value, _DESCRIBERS[mode])
    return tree


def from_struct_with_meta(value: Any, fmt_func: FmtFunc | None = None) -> Node:
    """Build a tree whose meta values come from ``fmt_func(name, value)``.

    ``fmt_func`` returns the meta text and whether to show it. Without it
    the tree holds field names only.
    """
    if fmt_func is None:
        return from_struct(value, StructTreeOption.NAME)

    def describe(name, field, field_value, is_struct):
        formatted, show = fmt_func(name, field_value)
        return show, formatted

    tree = new()
    _build(tree, value, describe)
    return tree


def repr_value(value: Any) -> str:
    """Render a dataclass instance as a value tree, anything else with ``str``."""
    if not _is_struct(value):
        return str(value)
    try:
        return str(from_struct(value, StructTreeOption.VALUE))
    except StructTreeError as err:
        return str(err)