"""Small helpers for reading field tags and testing values for emptiness."""

from __future__ import annotations

from collections.abc import Mapping, Sized
from typing import Any

TREE_TAG = "tree"


def is_empty(value: Any) -> bool:
    """Return True when ``value`` is the zero value of its kind.

    None, False, zero numbers and empty sized containers count as empty.
    Any other object, structured records included, is never empty.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float, complex)):
        return value == 0
    if isinstance(value, (str, bytes, bytearray, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    if isinstance(value, Sized) and isinstance(value, Mapping):
        return len(value) == 0
    return False


def tag_spec(tag: str) -> tuple[str, bool]:
    """Split a ``name[,omitempty]`` tree tag into the name and the omit flag."""
    parts = tag.split(",")
    if len(parts) < 2:
        return tag, False
    return parts[0], parts[1] == "omitempty"


def filter_tags(tags: str | Mapping[str, Any]) -> str:
    """Return the field tags without the tree tag, as ``key:"value"`` text.

    ``tags`` is either a space separated tag string or a mapping of tag keys
    to values, such as the metadata of a dataclass field.
    """
    if isinstance(tags, str):
        return " ".join(
            part for part in tags.split(" ") if not part.startswith(f"{TREE_TAG}:")
        )
    return " ".join(
        f'{key}:"{value}"' for key, value in tags.items() if key != TREE_TAG
    )