"""Source code of a method, split into lines carrying complexity factors."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Optional

from .factors import ComplexityFactors
from .tree_node import TreeNodeArena


@dataclass
class CodeLine:
    """A line of a Code object.

    Attributes:
        issue: 1-indexed number of the line in its method code
        position: Byte offset of the start of the line in its method code
        text: Text of the line, without line terminator
        factors: Complexity factors of the nodes starting on this line
        tree_nodes: Arena indices of the nodes projected onto this line
    """

    issue: int = 0
    position: int = 0
    text: str = ""
    factors: ComplexityFactors = field(default_factory=ComplexityFactors)
    tree_nodes: list[int] = field(default_factory=list)

    @property
    def indentation(self) -> str:
        return self.text[: len(self.text) - len(self.text.lstrip())]

    def set_depth_and_nesting(self, arena: TreeNodeArena) -> None:
        """Re-derive nesting and depth from the parents of the line's nodes.

        A nesting-sensitive node costs its nesting weight once per enclosing
        nesting-sensitive construct; a nested data access costs its depth
        weight times (1 + number of enclosing nesting-sensitive constructs).
        """
        nesting = 0.0
        depth = 0.0
        for index in self.tree_nodes:
            node = arena[index]
            parent = arena.parent_of(node)
            parent_depth = parent.nesting_depth if parent is not None else 0
            if node.factors.nesting > 0:
                nesting += node.factors.nesting * parent_depth
            if node.factors.depth > 0:
                depth += node.factors.depth * (1 + parent_depth)
        self.factors = self.factors.with_values(nesting=nesting, depth=depth)


@dataclass
class Code:
    """Ordered lines of a method, plus their concatenated text."""

    lines: list[CodeLine] = field(default_factory=list)
    text: str = ""
    length: int = 0
    _positions: list[int] = field(default_factory=list, init=False, repr=False, compare=False)

    @classmethod
    def from_source(cls, source: bytes) -> Code:
        """Split ``source`` (utf-8 bytes) into CodeLines."""
        code = cls(length=len(source))
        position = 0
        for issue, raw in enumerate(source.split(b"\n"), start=1):
            text = raw.decode("utf-8", errors="replace").rstrip("\r")
            code.lines.append(CodeLine(issue=issue, position=position, text=text))
            position += len(raw) + 1
        code.set_text_with_lines()
        code._positions = [line.position for line in code.lines]
        return code

    def line_index_at(self, offset: int) -> Optional[int]:
        """Index in ``lines`` of the line containing byte ``offset``, or None."""
        if not self.lines or offset < 0 or offset > self.length:
            return None
        # lines are only ever appended
        if len(self._positions) != len(self.lines):
            self._positions = [line.position for line in self.lines]
        return bisect_right(self._positions, offset) - 1

    def set_lines_depth_and_nesting(self, arena: TreeNodeArena) -> None:
        for line in self.lines:
            line.set_depth_and_nesting(arena)

    def set_text_with_lines(self) -> None:
        self.text = "\n".join(line.text for line in self.lines)

    @staticmethod
    def add_comment(comment: str, line: CodeLine, comment_token: str) -> str:
        """Text of ``line`` preceded by a comment line with the same indentation."""
        return f"{line.indentation}{comment_token} {comment}\n{line.text}"

    @property
    def total(self) -> float:
        return sum(line.factors.total for line in self.lines)
