"""ASCII tree composition and rendering."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class EdgeStyle:
    """The three edge strings used to draw a tree."""

    link: str = "│"
    mid: str = "├──"
    end: str = "└──"


# Module-wide defaults; they may be reassigned to change how every tree renders.
default_edge_style = EdgeStyle()
default_indent_size = 3
default_edge_separator = " "


@dataclass(frozen=True)
class RenderOptions:
    """Rendering settings; fields left as None fall back to the module defaults."""

    edge_link: str | None = None
    edge_mid: str | None = None
    edge_end: str | None = None
    indent_size: int | None = None
    separator: str | None = None

    def resolve(self) -> RenderOptions:
        """Return a copy with every unset field filled from the current defaults."""
        return replace(
            self,
            edge_link=default_edge_style.link if self.edge_link is None else self.edge_link,
            edge_mid=default_edge_style.mid if self.edge_mid is None else self.edge_mid,
            edge_end=default_edge_style.end if self.edge_end is None else self.edge_end,
            indent_size=default_indent_size if self.indent_size is None else self.indent_size,
            separator=default_edge_separator if self.separator is None else self.separator,
        )


@dataclass(eq=False)
class Node:
    """A tree node holding a value, an optional meta value and its children."""

    value: Any = "."
    meta: Any = None
    root: Node | None = field(default=None, repr=False)
    nodes: list[Node] = field(default_factory=list)

    def add_node(self, value: Any) -> Node:
        """Append a leaf holding ``value``; return this node for chaining."""
        self.nodes.append(Node(value=value, root=self))
        return self

    def add_meta_node(self, meta: Any, value: Any) -> Node:
        """Append a leaf with a meta value; return this node for chaining."""
        self.nodes.append(Node(value=value, meta=meta, root=self))
        return self

    def add_branch(self, value: Any) -> Node:
        """Append a child and return it, so nodes can be added one level deeper."""
        child = Node(value=value, root=self)
        self.nodes.append(child)
        return child

    def add_meta_branch(self, meta: Any, value: Any) -> Node:
        """Append a child with a meta value and return it."""
        child = Node(value=value, meta=meta, root=self)
        self.nodes.append(child)
        return child

    def branch(self) -> Node:
        """Detach this node from its parent so it renders as a root."""
        self.root = None
        return self

    def find_by_meta(self, meta: Any) -> Node | None:
        """Depth-first search for a descendant whose meta equals ``meta``."""
        for node in self.nodes:
            if node.meta == meta:
                return node
            found = node.find_by_meta(meta)
            if found is not None:
                return found
        return None

    def find_by_value(self, value: Any) -> Node | None:
        """Find a direct child whose value equals ``value``.

        Deeper levels are searched by meta value, not by value.
        """
        for node in self.nodes:
            if node.value == value:
                return node
            found = node.find_by_meta(value)
            if found is not None:
                return found
        return None

    def find_last_node(self) -> Node | None:
        """Return the last child, or None when there are no children."""
        return self.nodes[-1] if self.nodes else None

    def render(self, options: RenderOptions | None = None) -> str:
        """Render this tree or subtree as text."""
        opts = (options or RenderOptions()).resolve()
        lines: list[str] = []
        ended: frozenset[int] = frozenset()
        if self.root is None:
            if self.meta is not None:
                lines.append(f"[{self.meta}]  {self.value}\n")
            else:
                lines.append(f"{self.value}\n")
        else:
            edge = opts.edge_mid
            if not self.nodes:
                edge = opts.edge_end
                ended = ended | {0}
            lines.append(_format_line(opts, 0, ended, edge, self))
        if self.nodes:
            lines.extend(_format_children(opts, 0, ended, self.nodes))
        return "".join(lines)

    def to_bytes(self, options: RenderOptions | None = None) -> bytes:
        """Render this tree or subtree as UTF-8 bytes."""
        return self.render(options).encode("utf-8")

    def walk(self) -> Iterator[Node]:
        """Yield every descendant, each node before its children."""
        for node in self.nodes:
            yield node
            yield from node.walk()

    def visit_all(self, fn: Callable[[Node], Any]) -> None:
        """Call ``fn`` on every descendant in :meth:`walk` order."""
        for node in self.walk():
            fn(node)

    def __str__(self) -> str:
        return self.render()


def _format_children(
    opts: RenderOptions, level: int, ended: frozenset[int], nodes: list[Node]
) -> Iterator[str]:
    last = len(nodes) - 1
    for position, node in enumerate(nodes):
        edge = opts.edge_mid
        if position == last:
            ended = ended | {level}
            edge = opts.edge_end
        yield _format_line(opts, level, ended, edge, node)
        if node.nodes:
            yield from _format_children(opts, level + 1, ended, node.nodes)


def _format_line(
    opts: RenderOptions, level: int, ended: frozenset[int], edge: str, node: Node
) -> str:
    indent = opts.indent_size
    prefix = "".join(
        " " * (indent + 1) if lvl in ended else opts.edge_link + " " * indent
        for lvl in range(level)
    )
    text = _render_value(opts, level, node)
    if node.meta is not None:
        return f"{prefix}{edge}{opts.separator}[{node.meta}]  {text}\n"
    return f"{prefix}{edge}{opts.separator}{text}\n"


def _render_value(opts: RenderOptions, level: int, node: Node) -> str:
    first, *rest = str(node.value).split("\n")
    if not rest:
        return first
    pad = _padding(opts, level, node)
    return "\n".join([first, *(pad + line for line in rest)])


def _padding(opts: RenderOptions, level: int, node: Node) -> str:
    """Build the prefix for continuation lines of a multi-line value."""
    indent = opts.indent_size
    links = [""] * (level + 1)
    while node.root is not None and level >= 0:
        if node is node.root.find_last_node():
            links[level] = " " * (indent + 1)
        else:
            links[level] = opts.edge_link + " " * indent
        level -= 1
        node = node.root
    return "".join(links)


def new() -> Node:
    """Create an empty tree whose root is shown as ``.``."""
    return Node(value=".")


def new_with_root(root: Any) -> Node:
    """Create an empty tree with the given root value."""
    return Node(value=root)