"""Cyclomatic complexity: one plus the number of decision points."""

from __future__ import annotations

from .classifier import NodeClassifier
from .tree_node import TreeNodeArena


def cyclomatic_complexity(arena: TreeNodeArena, classifier: NodeClassifier) -> int:
    """Count independent paths through the method held by ``arena``.

    Decision points are ifs, else-ifs, ternaries, loops, case clauses and
    catch clauses anywhere below the method node. Logical operators are not
    counted.
    """
    return 1 + sum(
        1 for node in arena.descendants() if classifier.is_decision_point(node.view)
    )
