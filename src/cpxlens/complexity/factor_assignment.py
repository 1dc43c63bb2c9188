"""Factor assignment: intrinsic complexity factors of each TreeNode.

Intrinsic factors are what a node costs on its own, before the projector
scales nesting and depth by the node's position in the tree:

    basic        conditional, loop, catch, else, logic door, labelled jump, recursion
    nesting      the nesting weight, on nesting-sensitive constructs
    depth        the depth weight, on nested data accesses
    structural   logic door whose operator differs from its parent's
    aggregation  function or closure declared inside the method
"""

from __future__ import annotations

from ..config import FactorWeights
from ..exceptions import TreeLinkageError
from ..scanning.node_view import NodeView
from .classifier import NodeClassifier
from .factors import ComplexityFactors
from .tree_node import TreeNodeArena


def basic_factor(
    view: NodeView, classifier: NodeClassifier, weights: FactorWeights, method_name: str = ""
) -> float:
    # else first: an else block is a plain block for every other predicate
    if classifier.is_else_block(view):
        return weights.else_block
    if classifier.is_conditional(view):
        return weights.conditional
    if classifier.is_loop(view):
        return weights.loop
    if classifier.is_catch(view):
        return weights.catch
    if classifier.is_logic_door(view):
        return weights.logic_door
    if classifier.is_labelled_jump(view):
        return weights.jump
    if classifier.is_recursion(view, method_name):
        return weights.recursion
    return 0.0


def intrinsic_factors(
    view: NodeView,
    classifier: NodeClassifier,
    weights: FactorWeights,
    method_name: str = "",
) -> ComplexityFactors:
    """Factors of a node that is not the method root."""
    return ComplexityFactors(
        basic=basic_factor(view, classifier, weights, method_name),
        structural=weights.structural if classifier.is_different_logic_door(view) else 0.0,
        nesting=weights.nesting if classifier.is_nesting_sensitive(view) else 0.0,
        depth=weights.depth if classifier.is_nested_data_access(view) else 0.0,
        aggregation=weights.aggregation if classifier.is_function_like(view) else 0.0,
    )


def assign_factors(
    arena: TreeNodeArena,
    classifier: NodeClassifier,
    weights: FactorWeights,
    method_name: str = "",
) -> None:
    """Set intrinsic factors and running nesting depth on every node of ``arena``.

    Nodes are visited parent first, so each node's depth derives from its
    parent's final value. Factors are recomputed from scratch on each call.

    Raises:
        TreeLinkageError: If a node other than the root has no parent
    """
    root = arena.root
    root.factors = ComplexityFactors()
    root.nesting_depth = 0
    for node in arena.descendants():
        parent = arena.parent_of(node)
        if parent is None:
            raise TreeLinkageError(
                method_name or "<anonymous>",
                "node without parent inside method",
                details={"kind": node.kind, "line": str(node.view.line)},
            )
        node.factors = intrinsic_factors(node.view, classifier, weights, method_name)
        increment = 1 if classifier.is_nesting_sensitive(node.view) else 0
        node.nesting_depth = parent.nesting_depth + increment
