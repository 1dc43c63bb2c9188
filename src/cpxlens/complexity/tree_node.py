"""Arena of TreeNodes wrapping the syntax subtree of one method.

Nodes reference their parent and children by index in the arena, so the tree
has O(1) navigation both ways without reference cycles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..scanning.node_view import NodeView
from .factors import ComplexityFactors


@dataclass
class TreeNode:
    """One syntax node of a method, with its intrinsic complexity factors.

    Attributes:
        index: Position of the node in its arena
        view: The wrapped syntax node
        parent: Index of the parent node (None for the method root)
        children: Indices of the child nodes, in source order
        factors: Intrinsic factors (this node's own contribution)
        nesting_depth: Number of nesting-sensitive constructs among this node
            and its ancestors inside the method
    """

    index: int
    view: NodeView
    parent: Optional[int] = None
    children: list[int] = field(default_factory=list)
    factors: ComplexityFactors = field(default_factory=ComplexityFactors)
    nesting_depth: int = 0

    @property
    def kind(self) -> str:
        return self.view.kind

    @property
    def is_root(self) -> bool:
        return self.parent is None


class TreeNodeArena:
    """Owns every TreeNode of one method; index 0 is the method node."""

    def __init__(self) -> None:
        self._nodes: list[TreeNode] = []

    @classmethod
    def build(cls, root: NodeView) -> TreeNodeArena:
        """Wrap ``root`` and all its named descendants."""
        arena = cls()
        stack: list[tuple[NodeView, Optional[int]]] = [(root, None)]
        while stack:
            view, parent = stack.pop()
            node = arena.add(view, parent)
            # reversed so children are indexed in source order
            for child in reversed(list(view.children)):
                stack.append((child, node.index))
        return arena

    def add(self, view: NodeView, parent: Optional[int] = None) -> TreeNode:
        node = TreeNode(index=len(self._nodes), view=view, parent=parent)
        self._nodes.append(node)
        if parent is not None:
            self._nodes[parent].children.append(node.index)
        return node

    @property
    def root(self) -> TreeNode:
        return self._nodes[0]

    def parent_of(self, node: TreeNode) -> Optional[TreeNode]:
        if node.parent is None:
            return None
        return self._nodes[node.parent]

    def children_of(self, node: TreeNode) -> list[TreeNode]:
        return [self._nodes[i] for i in node.children]

    def descendants(self, node: Optional[TreeNode] = None) -> Iterator[TreeNode]:
        """Pre-order traversal of the descendants of ``node`` (root by default)."""
        start = node if node is not None else self.root
        stack = list(reversed(start.children))
        while stack:
            current = self._nodes[stack.pop()]
            yield current
            stack.extend(reversed(current.children))

    def __getitem__(self, index: int) -> TreeNode:
        return self._nodes[index]

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)
