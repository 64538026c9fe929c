import sys
from dataclasses import dataclass, field

import pytest

from treeprint.structs import (
    StructTreeError,
    StructTreeOption,
    from_struct,
    from_struct_with_meta,
    repr_value,
)


@dataclass
class Empty:
    pass


@dataclass
class SubThree:
    inner_one: float | None = field(default=None, metadata={"tree": "inner_one,omitempty"})
    inner_two: Empty | None = field(default=None, metadata={"tree": ",omitempty"})
    inner_three: float | None = field(default=None, metadata={"tree": "inner_three"})


@dataclass
class Three:
    sub_one: list = field(default_factory=list)
    sub_two: list = field(default_factory=list)
    sub_three: SubThree = field(default_factory=SubThree)


@dataclass
class NameStruct:
    one: str = field(default="", metadata={"json": "one", "tree": "one"})
    two: int = field(default=0, metadata={"tree": "two"})
    three: Three = field(default_factory=Three)


@dataclass
class Bio:
    age: int = 0
    city: str = ""
    meta: object = None


@dataclass
class ValueStruct:
    name: str = ""
    bio: Bio = field(default_factory=Bio)


@dataclass
class Tagged:
    hidden: int = field(default=1, metadata={"tree": "-"})
    blank: int = field(default=2, metadata={"tree": "   "})
    leaf: Empty = field(default_factory=Empty)


def _value_struct():
    return ValueStruct(name="Max", bio=Bio(age=100, city="NYC", meta=list(b"hello")))


def test_from_struct_name():
    tree = from_struct(NameStruct(), StructTreeOption.NAME)
    expected = (
        ".\n"
        "├── one\n"
        "├── two\n"
        "└── three\n"
        "    ├── sub_one\n"
        "    ├── sub_two\n"
        "    └── sub_three\n"
        "        └── inner_three\n"
    )
    assert str(tree) == expected


def test_from_struct_default_option_is_name():
    assert str(from_struct(NameStruct())) == str(from_struct(NameStruct(), StructTreeOption.NAME))


def test_from_struct_tags():
    tree = from_struct(NameStruct(), StructTreeOption.TAG)
    expected = (
        ".\n"
        '├── [json:"one"]  one\n'
        "├── []  two\n"
        "└── []  three\n"
        "    ├── []  sub_one\n"
        "    ├── []  sub_two\n"
        "    └── []  sub_three\n"
        "        └── []  inner_three\n"
    )
    assert str(tree) == expected


def test_from_struct_type():
    tree = from_struct(NameStruct(), StructTreeOption.TYPE)
    expected = (
        ".\n"
        "├── [str]  one\n"
        "├── [int]  two\n"
        "└── [Three]  three\n"
        "    ├── [list]  sub_one\n"
        "    ├── [list]  sub_two\n"
        "    └── [SubThree]  sub_three\n"
        "        └── [NoneType]  inner_three\n"
    )
    assert str(tree) == expected


def test_from_struct_type_size():
    value = NameStruct()
    tree = from_struct(value, StructTreeOption.TYPE_SIZE)
    assert [node.value for node in tree.walk()] == [
        "one", "two", "three", "sub_one", "sub_two", "sub_three", "inner_three",
    ]
    assert tree.find_by_value("one").meta == sys.getsizeof(value.one)
    assert tree.find_by_value("three").meta == sys.getsizeof(value.three)
    assert all(isinstance(node.meta, int) and node.meta > 0 for node in tree.walk())


def test_from_struct_value():
    tree = from_struct(_value_struct(), StructTreeOption.VALUE)
    expected = (
        ".\n"
        "├── [Max]  name\n"
        "└── bio\n"
        "    ├── [100]  age\n"
        "    ├── [NYC]  city\n"
        "    └── [[104, 101, 108, 108, 111]]  meta\n"
    )
    assert str(tree) == expected


def test_from_struct_with_meta():
    tree = from_struct_with_meta(
        _value_struct(), lambda _name, v: (f"lol {type(v).__name__}", True)
    )
    expected = (
        ".\n"
        "├── [lol str]  name\n"
        "└── [lol Bio]  bio\n"
        "    ├── [lol int]  age\n"
        "    ├── [lol str]  city\n"
        "    └── [lol list]  meta\n"
    )
    assert str(tree) == expected


def test_from_struct_with_meta_hidden_equals_name_tree():
    value = _value_struct()
    hidden = from_struct_with_meta(value, lambda _name, _v: ("ignored", False))
    assert str(hidden) == str(from_struct(value, StructTreeOption.NAME))


def test_from_struct_with_meta_without_function():
    value = NameStruct()
    assert str(from_struct_with_meta(value, None)) == str(from_struct(value))


def test_skip_blank_name_and_empty_struct_leaf():
    tree = from_struct(Tagged())
    assert [node.value for node in tree.walk()] == ["blank", "leaf"]
    assert tree.find_by_value("leaf").nodes == []


def test_omitempty_keeps_non_empty_values():
    value = NameStruct(three=Three(sub_three=SubThree(inner_one=1.5, inner_two=Empty())))
    tree = from_struct(value)
    sub = tree.nodes[2].nodes[2]
    assert [node.value for node in sub.nodes] == ["inner_one", "inner_two", "inner_three"]


def test_not_a_struct_raises():
    with pytest.raises(StructTreeError, match="treeprint: int is not a struct we could work with"):
        from_struct(42)


def test_dataclass_type_is_rejected():
    with pytest.raises(StructTreeError, match="is not a struct"):
        from_struct(NameStruct, StructTreeOption.VALUE)


def test_invalid_option_raises():
    with pytest.raises(StructTreeError, match="invalid StructTreeOption 99"):
        from_struct(NameStruct(), 99)


def test_int_option_accepted():
    assert str(from_struct(NameStruct(), 2)) == str(from_struct(NameStruct(), StructTreeOption.TAG))


def test_repr_value_of_plain_value():
    assert repr_value(42) == "42"
    assert repr_value("Max") == "Max"


def test_repr_value_of_struct():
    value = _value_struct()
    assert repr_value(value) == str(from_struct(value, StructTreeOption.VALUE))
    assert repr_value(value).startswith(".\n├── [Max]  name\n")