# treeprint

A small library for composing trees and rendering them as text.

```
.
├── Dockerfile
├── [ 204]  bin
│   ├── dbmaker
│   └── testtool
└── [122K]  testtool.a
```

## Installation

```
pip install .
```

## Building a tree

```python
from treeprint.tree import new, new_with_root

tree = new()                       # root value is "."
tree.add_node("Dockerfile")
bin_dir = tree.add_meta_branch(" 204", "bin")
bin_dir.add_node("dbmaker").add_node("testtool")
tree.add_meta_node("122K", "testtool.a")

print(tree, end="")
```

- `add_node` and `add_meta_node` add a leaf and return the node they were
  called on, so calls can be chained.
- `add_branch` and `add_meta_branch` add a child and return that child.
- A meta value is rendered in square brackets before the value, followed by
  two spaces.
- Multi-line values are indented so that the tree's edges stay connected.
- `branch()` detaches a node from its parent, so it renders as a root.

`new_with_root("mytree")` starts a tree with a root value of your choice.
Every node is a `Node` with the attributes `value`, `meta`, `root` (its
parent, or `None`) and `nodes` (its children).

## Searching and walking

- `find_by_meta(meta)` searches depth first for a descendant whose meta value
  equals `meta`.
- `find_by_value(value)` looks for a direct child whose value equals `value`;
  below that level it searches by meta value.
- `find_last_node()` returns the last child.

Each returns the matching `Node` or `None`. `walk()` yields every node below
the one it is called on, each node before its children, and `visit_all(fn)`
calls `fn` on each of them in the same order.

## Rendering options

`str(tree)` and `render()` return the tree as a string; `to_bytes()` returns
it as UTF-8 bytes. Both take an optional `RenderOptions`, whose fields are
`edge_link`, `edge_mid`, `edge_end`, `indent_size` and `separator` (the text
between an edge and its value).

```python
from treeprint.tree import RenderOptions

text = tree.render(RenderOptions(edge_link="|", edge_mid="+", edge_end="+",
                                 indent_size=0, separator=""))
```

Fields left as `None` are filled at render time from the module defaults in
`treeprint.tree`: `default_edge_style` (an `EdgeStyle` with `link`, `mid` and
`end`, by default `│`, `├──` and `└──`), `default_indent_size` (3) and
`default_edge_separator` (a single space). Reassigning these changes how every
tree renders. `RenderOptions.resolve()` returns the options with those
defaults filled in.

## Trees from dataclasses

`treeprint.structs` builds a tree from a dataclass instance. A field that
holds a dataclass instance with fields becomes a branch; every other field
becomes a leaf named after the field.

```python
from treeprint.structs import StructTreeOption, from_struct

tree = from_struct(config, StructTreeOption.VALUE)
```

`StructTreeOption` chooses each node's meta value:

- `NAME` (the default): none, field names only.
- `VALUE`: the field's value, on leaves only.
- `TAG`: the field's metadata other than the `"tree"` key, as `key:"value"`
  pairs.
- `TYPE`: the name of the value's type.
- `TYPE_SIZE`: the value's size in bytes as reported by `sys.getsizeof`.

Field metadata under the `"tree"` key renames a field (`"name"`), leaves it
out when its value is empty (`"name,omitempty"`) or hides it (`"-"`):

```python
from dataclasses import dataclass, field

@dataclass
class Config:
    host: str = field(default="", metadata={"tree": "hostname"})
    port: int = field(default=0, metadata={"tree": "port,omitempty"})
```

`from_struct_with_meta(value, fmt_func)` lets you choose each node's meta
text: `fmt_func(name, value)` returns a `(text, show)` pair, and the text is
shown only when `show` is true. `repr_value(value)` renders a dataclass
instance as a value tree and returns `str(value)` for anything else.

A value that is not a dataclass instance, or an invalid option, raises
`StructTreeError` (a `ValueError`).

`treeprint.helpers` holds the small functions these use: `is_empty`,
`tag_spec` and `filter_tags`.

## What it does not do

This is a library only: it has no command-line program, and it does not read
directories or files to build trees from them.

## Running the tests

```
pip install .[test]
pytest
```