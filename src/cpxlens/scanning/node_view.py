"""NodeView: the read-only capability interface the complexity core consumes.

The core never touches parser objects directly. Each parser gets one adapter
implementing NodeView; tree-sitter is the only one shipped.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Protocol, Sequence


class NodeView(Protocol):
    """A syntax node seen through the eyes of the complexity core.

    Attributes:
        kind: Grammar node kind (e.g. "if_statement", "&&")
        start: Byte offset of the node start in its file
        end: Byte offset of the node end in its file
        line: 1-indexed line of the node start
    """

    @property
    def kind(self) -> str: ...

    @property
    def start(self) -> int: ...

    @property
    def end(self) -> int: ...

    @property
    def line(self) -> int: ...

    @property
    def parent(self) -> Optional[NodeView]: ...

    @property
    def children(self) -> Sequence[NodeView]: ...

    @property
    def text(self) -> str: ...

    def field(self, name: str) -> Optional[NodeView]: ...

    def same_as(self, other: Optional[NodeView]) -> bool: ...


class TreeSitterNodeView:
    """NodeView over a tree-sitter node.

    ``children`` only lists named nodes: anonymous tokens (punctuation,
    keywords, operators) are reachable through ``field()``.
    """

    __slots__ = ("_node", "_source")

    def __init__(self, node: Any, source: bytes) -> None:
        self._node = node
        self._source = source

    @property
    def kind(self) -> str:
        return self._node.type

    @property
    def start(self) -> int:
        return self._node.start_byte

    @property
    def end(self) -> int:
        return self._node.end_byte

    @property
    def line(self) -> int:
        return self._node.start_point[0] + 1

    @property
    def parent(self) -> Optional[TreeSitterNodeView]:
        parent = self._node.parent
        if parent is None:
            return None
        return TreeSitterNodeView(parent, self._source)

    @property
    def children(self) -> list[TreeSitterNodeView]:
        return [TreeSitterNodeView(child, self._source) for child in self._node.named_children]

    @property
    def text(self) -> str:
        return self._source[self._node.start_byte : self._node.end_byte].decode(
            "utf-8", errors="replace"
        )

    def field(self, name: str) -> Optional[TreeSitterNodeView]:
        child = self._node.child_by_field_name(name)
        if child is None:
            return None
        return TreeSitterNodeView(child, self._source)

    def same_as(self, other: Optional[NodeView]) -> bool:
        if other is None:
            return False
        return self.kind == other.kind and self.start == other.start and self.end == other.end

    def __repr__(self) -> str:
        return f"TreeSitterNodeView({self.kind}@{self.line})"


def iter_views(root: NodeView) -> Iterator[NodeView]:
    """Depth-first, pre-order traversal of ``root`` and its named descendants."""
    stack = [root]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(list(current.children)))
