"""Tests for Code, CodeLine and the tree-to-line projection."""

import pytest

from cpxlens.complexity.code import Code, CodeLine
from cpxlens.complexity.factor_assignment import assign_factors
from cpxlens.complexity.projector import LineProjector
from cpxlens.complexity.tree_node import TreeNodeArena
from cpxlens.config import FactorWeights
from cpxlens.exceptions import LineLookupError, TreeLinkageError


class TestCode:
    """Test splitting and line lookup."""

    def test_from_source_splits_lines(self):
        code = Code.from_source(b"a\nbb\n\nccc")
        assert [line.text for line in code.lines] == ["a", "bb", "", "ccc"]
        assert [line.issue for line in code.lines] == [1, 2, 3, 4]
        assert [line.position for line in code.lines] == [0, 2, 5, 6]
        assert code.text == "a\nbb\n\nccc"

    def test_crlf_is_stripped(self):
        code = Code.from_source(b"a\r\nb")
        assert [line.text for line in code.lines] == ["a", "b"]

    def test_positions_are_bytes(self):
        code = Code.from_source("é\nx".encode())
        assert code.lines[1].position == 3

    def test_line_index_at(self):
        code = Code.from_source(b"a\nbb\n\nccc")
        assert code.line_index_at(0) == 0
        assert code.line_index_at(1) == 0
        assert code.line_index_at(2) == 1
        assert code.line_index_at(5) == 2
        assert code.line_index_at(8) == 3

    def test_line_index_after_appending_lines(self):
        code = Code(length=6)
        code.lines.append(CodeLine(issue=1, position=0, text="ab"))
        assert code.line_index_at(4) == 0
        code.lines.append(CodeLine(issue=2, position=3, text="cd"))
        assert code.line_index_at(4) == 1
        assert code.line_index_at(1) == 0

    def test_line_index_outside(self):
        code = Code.from_source(b"abc")
        assert code.line_index_at(-1) is None
        assert code.line_index_at(100) is None

    def test_add_comment_keeps_indentation(self):
        line = CodeLine(issue=1, position=0, text="    if (a) {")
        assert Code.add_comment("note", line, "//") == "    // note\n    if (a) {"


class TestLineProjector:
    """Test projection of node factors onto lines."""

    def _project(self, t, view, classifier, weights=None):
        arena = TreeNodeArena.build(view)
        assign_factors(arena, classifier, weights or FactorWeights())
        code = Code.from_source(t.source)
        LineProjector(arena, code, classifier, origin=0).project()
        return arena, code

    def test_nodes_recorded_on_their_line(self, classifier, fake_tree):
        t = fake_tree("function f() {\n  while (a) {\n  }\n}")
        loop = t.node("while_statement", t.paren(t.ident("a", line=2), line=2), t.block(line=2), line=2)
        arena, code = self._project(t, t.function("f", t.block(loop)), classifier)
        loop_index = next(n.index for n in arena if n.view is loop)
        assert loop_index in code.lines[1].tree_nodes
        assert loop_index not in code.lines[0].tree_nodes
        assert code.lines[1].factors.basic == 1

    def test_root_is_not_projected(self, classifier, fake_tree):
        t = fake_tree("function f() {}")
        arena, code = self._project(t, t.function("f", t.block()), classifier)
        assert 0 not in code.lines[0].tree_nodes

    def test_nesting_scaled_by_parent_depth(self, classifier, fake_tree):
        t = fake_tree(
            "function f() {\n"
            "  for (;;) {\n"
            "    for (;;) {\n"
            "      for (;;) {\n"
            "      }\n"
            "    }\n"
            "  }\n"
            "}"
        )
        third = t.node("for_statement", t.block(line=4), line=4)
        second = t.node("for_statement", t.block(third, line=3), line=3)
        first = t.node("for_statement", t.block(second, line=2), line=2)
        arena, code = self._project(t, t.function("f", t.block(first)), classifier)
        assert [code.lines[i].factors.nesting for i in (1, 2, 3)] == [0, 1, 2]
        assert code.total == 6

    def test_origin_offsets(self, classifier, fake_tree):
        """Node offsets are relative to the file; the code starts at ``origin``."""
        t = fake_tree("// header\nfunction f() {\n  if (a) {}\n}")
        if_node = t.if_(t.ident("a", line=3), t.block(line=3), line=3)
        view = t.function("f", t.block(if_node, line=2), line=2)
        arena = TreeNodeArena.build(view)
        assign_factors(arena, classifier, FactorWeights())
        origin = t.offset(2, 0)
        code = Code.from_source(t.source[origin:])
        LineProjector(arena, code, classifier, origin=origin).project()
        assert code.lines[1].factors.basic == 1

    def test_offset_outside_code_raises(self, classifier, fake_tree):
        t = fake_tree("function f() {\n}")
        stray = t.node("if_statement")
        stray.start = 500
        arena = TreeNodeArena.build(t.function("f", t.block(stray)))
        assign_factors(arena, classifier, FactorWeights())
        code = Code.from_source(t.source)
        with pytest.raises(LineLookupError) as excinfo:
            LineProjector(arena, code, classifier, origin=0, method_name="f").project()
        assert isinstance(excinfo.value, TreeLinkageError)
        assert excinfo.value.method == "f"
