"""TreeMethod: evaluation of one method or function declaration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..config import FactorWeights, Thresholds
from ..exceptions import EvaluationStateError
from ..logging_config import get_logger
from ..scanning.languages import SyntaxKinds
from ..scanning.node_view import NodeView
from .classifier import NodeClassifier
from .code import Code, CodeLine
from .cyclomatic import cyclomatic_complexity
from .enums import ComplexityType, MethodStatus
from .factor_assignment import assign_factors
from .factors import ComplexityFactors
from .projector import LineProjector
from .status import classify
from .tree_node import TreeNode, TreeNodeArena

logger = get_logger(__name__)


@dataclass(frozen=True)
class MethodEvaluation:
    """Results of TreeMethod.evaluate().

    Attributes:
        cpx_index: Cognitive complexity index, rounded to 2 decimals
        cyclomatic_cpx: Cyclomatic complexity
        cognitive_status: Status of ``cpx_index``
        cyclomatic_status: Status of ``cyclomatic_cpx``
        factors: Sum of the factors of every line
        displayed_code: Method code annotated with per-line comments
    """

    cpx_index: float
    cyclomatic_cpx: int
    cognitive_status: MethodStatus
    cyclomatic_status: MethodStatus
    factors: ComplexityFactors
    displayed_code: Code

    def value(self, cpx_type: ComplexityType) -> float:
        if cpx_type == ComplexityType.COGNITIVE:
            return self.cpx_index
        return self.cyclomatic_cpx

    def status(self, cpx_type: ComplexityType) -> MethodStatus:
        if cpx_type == ComplexityType.COGNITIVE:
            return self.cognitive_status
        return self.cyclomatic_status


def _number(value: float) -> str:
    return f"{round(value, 2):g}"


def line_comment(factors: ComplexityFactors) -> str:
    """Human readable breakdown of the factors of a line.

    >>> line_comment(ComplexityFactors(basic=1, nesting=2))
    '+3 Complexity index (+1 basic, +2 nesting)'
    """
    parts = [f"+{_number(factors.total_basic)} basic"]
    if factors.total_aggregation:
        parts.append(f"+{_number(factors.total_aggregation)} aggregation")
    if factors.total_nesting:
        parts.append(f"+{_number(factors.total_nesting)} nesting")
    if factors.total_depth:
        parts.append(f"+{_number(factors.total_depth)} depth")
    if factors.total_structural:
        parts.append(f"+{_number(factors.total_structural)} structural")
    return f"+{_number(factors.total)} Complexity index ({', '.join(parts)})"


class TreeMethod:
    """A method (or function) of a TreeFile, evaluated once.

    Args:
        view: The declaration node
        kinds: Syntax kinds of the file's language
        source: Full source of the file, as utf-8 bytes
        filename: Path of the file, for reporting

    The method code starts at the beginning of the first line of the
    declaration, so the displayed code keeps its original indentation.
    """

    def __init__(
        self,
        view: NodeView,
        kinds: SyntaxKinds,
        source: bytes,
        filename: str = "",
    ) -> None:
        self.view = view
        self.kinds = kinds
        self.classifier = NodeClassifier(kinds)
        self.filename = filename
        self.name = self.classifier.method_name(view) or "<anonymous>"
        self.ast_position = view.start
        self.line = view.line
        self.origin = source.rfind(b"\n", 0, view.start) + 1
        self.code = Code.from_source(source[self.origin : view.end])
        self.arena = TreeNodeArena.build(view)
        self._evaluation: Optional[MethodEvaluation] = None

    def __repr__(self) -> str:
        return f"TreeMethod({self.name!r}, {self.filename}:{self.line})"

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    @property
    def is_evaluated(self) -> bool:
        return self._evaluation is not None

    def evaluate(
        self,
        thresholds: Optional[Thresholds] = None,
        weights: Optional[FactorWeights] = None,
    ) -> MethodEvaluation:
        """Compute both complexities and their statuses.

        The first call does the work; later calls return the same
        MethodEvaluation, whatever their arguments.

        Args:
            thresholds: Per-type thresholds; None classifies everything CORRECT
            weights: Factor weights; defaults to FactorWeights()

        Raises:
            TreeLinkageError: If the syntax tree does not match the method code
        """
        if self._evaluation is not None:
            return self._evaluation

        weights = weights or FactorWeights()
        assign_factors(self.arena, self.classifier, weights, self.name)
        LineProjector(self.arena, self.code, self.classifier, self.origin, self.name).project()
        if logger.isEnabledFor(logging.DEBUG):
            self._log_tree()

        factors = ComplexityFactors()
        for line in self.code.lines:
            factors = factors.add(line.factors)
        cpx_index = round(factors.total, 2)
        cyclomatic = cyclomatic_complexity(self.arena, self.classifier)

        cognitive_thresholds = thresholds.cognitive if thresholds is not None else None
        cyclomatic_thresholds = thresholds.cyclomatic if thresholds is not None else None
        self._evaluation = MethodEvaluation(
            cpx_index=cpx_index,
            cyclomatic_cpx=cyclomatic,
            cognitive_status=classify(cpx_index, cognitive_thresholds),
            cyclomatic_status=classify(cyclomatic, cyclomatic_thresholds),
            factors=factors,
            displayed_code=self._displayed_code(),
        )
        return self._evaluation

    @property
    def evaluation(self) -> MethodEvaluation:
        """Results of evaluate().

        Raises:
            EvaluationStateError: If evaluate() has not been called
        """
        if self._evaluation is None:
            raise EvaluationStateError(self.name)
        return self._evaluation

    @property
    def cpx_index(self) -> float:
        return self.evaluation.cpx_index

    @property
    def cyclomatic_cpx(self) -> int:
        return self.evaluation.cyclomatic_cpx

    @property
    def cognitive_status(self) -> MethodStatus:
        return self.evaluation.cognitive_status

    @property
    def cyclomatic_status(self) -> MethodStatus:
        return self.evaluation.cyclomatic_status

    @property
    def displayed_code(self) -> Code:
        return self.evaluation.displayed_code

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _displayed_code(self) -> Code:
        displayed = Code(length=self.code.length)
        for line in self.code.lines:
            text = line.text
            if not line.factors.is_zero:
                text = Code.add_comment(line_comment(line.factors), line, self.kinds.line_comment)
            displayed.lines.append(
                CodeLine(
                    issue=line.issue,
                    position=line.position,
                    text=text,
                    factors=line.factors,
                    tree_nodes=list(line.tree_nodes),
                )
            )
        displayed.set_text_with_lines()
        return displayed

    def _log_tree(self) -> None:
        logger.debug(f"Tree of {self.name} ({self.filename}:{self.line})")
        self._log_node(self.arena.root, 0)

    def _log_node(self, node: TreeNode, indent: int) -> None:
        f = node.factors
        logger.debug(
            f"{'  ' * indent}{node.kind} line={node.view.line} depth={node.nesting_depth} "
            f"basic={f.basic:g} nesting={f.nesting:g} depth={f.depth:g} "
            f"structural={f.structural:g} aggregation={f.aggregation:g}"
        )
        for child in self.arena.children_of(node):
            self._log_node(child, indent + 1)
