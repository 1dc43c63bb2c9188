"""Tree-to-line projection of node factors onto the lines of a method."""

from __future__ import annotations

from ..exceptions import LineLookupError
from ..logging_config import get_logger
from .classifier import NodeClassifier
from .code import Code
from .tree_node import TreeNode, TreeNodeArena

logger = get_logger(__name__)


class LineProjector:
    """Projects the intrinsic factors of a method's nodes onto its code lines.

    Args:
        arena: Nodes of the method, with intrinsic factors assigned
        code: Lines of the method; mutated in place
        classifier: Predicates of the method's grammar
        origin: File offset of the first byte of ``code``
        method_name: Used in error messages only
    """

    def __init__(
        self,
        arena: TreeNodeArena,
        code: Code,
        classifier: NodeClassifier,
        origin: int,
        method_name: str = "",
    ) -> None:
        self.arena = arena
        self.code = code
        self.classifier = classifier
        self.origin = origin
        self.method_name = method_name or "<anonymous>"

    def project(self) -> Code:
        """Run both passes and return the projected code."""
        self._visit(self.arena.root)
        self.code.set_lines_depth_and_nesting(self.arena)
        return self.code

    def anchor(self, node: TreeNode) -> int:
        """Offset, relative to the code, of the line a node is reported on."""
        view = node.view
        # an else block is reported on its 'else' keyword
        if self.classifier.is_else_block(view) and view.parent is not None:
            return view.parent.start - self.origin
        return view.start - self.origin

    def _visit(self, node: TreeNode) -> None:
        for child in self.arena.children_of(node):
            offset = self.anchor(child)
            index = self.code.line_index_at(offset)
            if index is None:
                logger.error(
                    f"Node {child.kind} of {self.method_name} at offset {offset} "
                    f"is outside of the method code ({self.code.length} bytes)"
                )
                raise LineLookupError(self.method_name, offset, self.code.length)
            line = self.code.lines[index]
            line.factors = line.factors.add(child.factors)
            line.tree_nodes.append(child.index)
            self._visit(child)
