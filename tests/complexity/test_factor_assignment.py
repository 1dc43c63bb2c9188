"""Tests for the TreeNode arena and the intrinsic factor assignment."""

import pytest

from cpxlens.complexity.factor_assignment import assign_factors, basic_factor
from cpxlens.complexity.tree_node import TreeNodeArena
from cpxlens.config import FactorWeights
from cpxlens.exceptions import TreeLinkageError


class TestTreeNodeArena:
    """Test arena construction and navigation."""

    def test_build_indexes_in_source_order(self, fake_tree):
        t = fake_tree("f(a, b)")
        a, b = t.ident("a"), t.ident("b")
        call = t.call(t.ident("f"), a, b)
        arena = TreeNodeArena.build(call)
        kinds = [node.kind for node in arena]
        assert kinds == ["call_expression", "identifier", "arguments", "identifier", "identifier"]
        assert arena.root.is_root
        assert len(arena) == 5

    def test_parent_and_children(self, fake_tree):
        t = fake_tree("{ a }")
        block = t.block(t.ident("a"))
        arena = TreeNodeArena.build(block)
        child = arena.children_of(arena.root)[0]
        assert child.kind == "identifier"
        assert arena.parent_of(child) is arena.root
        assert arena.parent_of(arena.root) is None

    def test_descendants_excludes_start(self, fake_tree):
        t = fake_tree("{ a }")
        arena = TreeNodeArena.build(t.block(t.block(t.ident("a"))))
        assert [n.index for n in arena.descendants()] == [1, 2]
        assert [n.index for n in arena.descendants(arena[1])] == [2]


class TestBasicFactor:
    """Test the basic factor of single nodes."""

    def test_conditional_and_loop(self, classifier, fake_tree):
        t = fake_tree("x")
        weights = FactorWeights(conditional=2, loop=3)
        assert basic_factor(t.node("if_statement"), classifier, weights) == 2
        assert basic_factor(t.node("ternary_expression"), classifier, weights) == 2
        assert basic_factor(t.node("for_statement"), classifier, weights) == 3

    def test_plain_nodes_cost_nothing(self, classifier, fake_tree):
        t = fake_tree("x")
        assert basic_factor(t.ident("x"), classifier, FactorWeights()) == 0
        assert basic_factor(t.block(), classifier, FactorWeights()) == 0

    def test_else_block_uses_else_weight(self, classifier, fake_tree):
        t = fake_tree("if (a) {} else {}")
        else_block = t.block()
        t.if_(t.ident("a"), t.block(), t.else_(else_block))
        weights = FactorWeights(else_block=0.5)
        assert basic_factor(else_block, classifier, weights) == 0.5


class TestAssignFactors:
    """Test intrinsic factors and running nesting depth."""

    def test_nesting_depth_counts_sensitive_ancestors(self, classifier, fake_tree):
        t = fake_tree("if (a) { while (b) { c } }")
        c = t.ident("c")
        loop = t.node("while_statement", t.block(c))
        outer = t.if_(t.ident("a"), t.block(loop))
        arena = TreeNodeArena.build(t.function("f", t.block(outer)))
        assign_factors(arena, classifier, FactorWeights())
        depths = {node.kind: node.nesting_depth for node in arena if node.view is not c}
        assert depths["if_statement"] == 1
        assert depths["while_statement"] == 2
        leaf = next(node for node in arena if node.view is c)
        assert leaf.nesting_depth == 2

    def test_else_if_does_not_nest(self, classifier, fake_tree):
        t = fake_tree("if (a) {} else if (b) {}")
        nested = t.if_(t.ident("b"), t.block())
        outer = t.if_(t.ident("a"), t.block(), t.else_(nested))
        arena = TreeNodeArena.build(outer)
        assign_factors(arena, classifier, FactorWeights())
        node = next(n for n in arena if n.view is nested)
        assert node.nesting_depth == 0
        assert node.factors.basic == 1
        assert node.factors.nesting == 0

    def test_intrinsic_nesting_is_the_weight(self, classifier, fake_tree):
        t = fake_tree("if (a) {}")
        outer = t.if_(t.ident("a"), t.block())
        arena = TreeNodeArena.build(t.function("f", t.block(outer)))
        assign_factors(arena, classifier, FactorWeights(nesting=3))
        node = next(n for n in arena if n.view is outer)
        assert node.factors.nesting == 3

    def test_zero_nesting_weight_still_counts_depth(self, classifier, fake_tree):
        t = fake_tree("if (a) { if (b) {} }")
        inner = t.if_(t.ident("b"), t.block())
        outer = t.if_(t.ident("a"), t.block(inner))
        arena = TreeNodeArena.build(outer)
        assign_factors(arena, classifier, FactorWeights(nesting=0))
        node = next(n for n in arena if n.view is inner)
        assert node.nesting_depth == 1

    def test_reassignment_starts_from_scratch(self, classifier, fake_tree):
        t = fake_tree("if (a) {}")
        outer = t.if_(t.ident("a"), t.block())
        arena = TreeNodeArena.build(t.function("f", t.block(outer)))
        assign_factors(arena, classifier, FactorWeights())
        assign_factors(arena, classifier, FactorWeights())
        node = next(n for n in arena if n.view is outer)
        assert node.factors.basic == 1
        assert node.nesting_depth == 1

    def test_root_has_no_factors(self, classifier, fake_tree):
        t = fake_tree("function f() {}")
        arena = TreeNodeArena.build(t.function("f", t.block()))
        assign_factors(arena, classifier, FactorWeights())
        assert arena.root.factors.is_zero

    def test_orphan_node_raises(self, classifier, fake_tree):
        t = fake_tree("{ a }")
        arena = TreeNodeArena.build(t.block())
        orphan = arena.add(t.ident("a"), 0)
        orphan.parent = None
        with pytest.raises(TreeLinkageError):
            assign_factors(arena, classifier, FactorWeights(), "f")
