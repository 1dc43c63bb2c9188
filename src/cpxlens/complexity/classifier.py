"""Node classifier: pure predicates deciding what each syntax node counts as.

Every scoring decision of the engine goes through a NodeClassifier. The
predicates are total: ``None`` or an unexpected node yields ``False``.
"""

from __future__ import annotations

from typing import Optional

from ..scanning.languages import SyntaxKinds
from ..scanning.node_view import NodeView


class NodeClassifier:
    """Predicates over NodeView for one grammar."""

    def __init__(self, kinds: SyntaxKinds) -> None:
        self.kinds = kinds

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _is(self, node: Optional[NodeView], kinds: frozenset[str]) -> bool:
        return node is not None and node.kind in kinds

    def _field(self, node: Optional[NodeView], name: str) -> Optional[NodeView]:
        if node is None:
            return None
        return node.field(name)

    def operator(self, node: Optional[NodeView]) -> Optional[str]:
        """Operator token of a binary expression, or None."""
        if not self.is_binary(node):
            return None
        token = self._field(node, self.kinds.operator_field)
        return token.kind if token is not None else None

    def method_name(self, node: Optional[NodeView]) -> str:
        """Name of a function or method declaration, '' for anything else."""
        if not self.is_function_or_method(node):
            return ""
        name = self._field(node, self.kinds.name_field)
        return name.text if name is not None else ""

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def is_binary(self, node: Optional[NodeView]) -> bool:
        return self._is(node, self.kinds.binary_kinds)

    def is_logic_door(self, node: Optional[NodeView]) -> bool:
        """True for a logical AND/OR expression."""
        return self.operator(node) in self.kinds.logic_operators

    def is_same_operator(self, node: Optional[NodeView], other: Optional[NodeView]) -> bool:
        first = self.operator(node)
        return first is not None and first == self.operator(other)

    def is_or_between_binaries(self, node: Optional[NodeView]) -> bool:
        """True for ``x || y`` where both operands are binary expressions."""
        if self.operator(node) not in self.kinds.or_operators:
            return False
        return self.is_binary(self._field(node, self.kinds.left_field)) and self.is_binary(
            self._field(node, self.kinds.right_field)
        )

    def is_different_logic_door(self, node: Optional[NodeView]) -> bool:
        """True for a logic door following a different logic door.

        a && b && c => False
        a && b || c => True for the ``&&`` node
        (a && b) || c => False: parentheses separate the two operators
        """
        if node is None or not self.is_logic_door(node):
            return False
        parent = node.parent
        return (
            self.is_binary(parent)
            and not self.is_same_operator(node, parent)
            and not self.is_or_between_binaries(node)
        )

    def is_ternary(self, node: Optional[NodeView]) -> bool:
        return self._is(node, self.kinds.ternary_kinds)

    def is_call(self, node: Optional[NodeView]) -> bool:
        return self._is(node, self.kinds.call_kinds)

    def is_method_identifier(self, node: Optional[NodeView]) -> bool:
        """True for the callee of a call expression: ``foo`` in ``foo(x)``."""
        if node is None:
            return False
        parent = node.parent
        if not self.is_call(parent):
            return False
        return node.same_as(self._field(parent, self.kinds.callee_field))

    def is_receiver_member(self, node: Optional[NodeView]) -> bool:
        """True for ``foo`` in ``self.foo`` or ``this.foo``."""
        if node is None:
            return False
        member = node.parent
        if not self._is(member, self.kinds.member_kinds):
            return False
        receiver = self._field(member, self.kinds.member_object_field)
        if receiver is None or receiver.text not in self.kinds.receiver_names:
            return False
        return node.same_as(self._field(member, self.kinds.member_property_field))

    def is_recursion(self, node: Optional[NodeView], method_name: str) -> bool:
        """True for a call of the method named ``method_name``.

        The callee is either the bare name or the name reached through the
        current instance: ``f(x)``, ``self.f(x)``, ``this.f(x)``.
        """
        if not method_name or node is None:
            return False
        if self._is(node, self.kinds.identifier_kinds) and self.is_method_identifier(node):
            return node.text == method_name
        if self.is_receiver_member(node) and self.is_method_identifier(node.parent):
            return node.text == method_name
        return False

    def is_element_access(self, node: Optional[NodeView]) -> bool:
        return self._is(node, self.kinds.subscript_kinds)

    def is_array_of_array(self, node: Optional[NodeView]) -> bool:
        """True for ``a[i]`` inside ``a[i][j]``: an element access accessed again."""
        if not self.is_element_access(node):
            return False
        parent = node.parent
        if not self.is_element_access(parent):
            return False
        return node.same_as(self._field(parent, self.kinds.subscript_object_field))

    def is_array_index(self, node: Optional[NodeView]) -> bool:
        """True for ``i`` in ``a[i]``."""
        if node is None:
            return False
        parent = node.parent
        if not self.is_element_access(parent):
            return False
        return node.same_as(self._field(parent, self.kinds.subscript_index_field))

    def is_nested_data_access(self, node: Optional[NodeView]) -> bool:
        """True for ``a[i]`` in ``a[i][j]`` and for ``b[i]`` in ``a[b[i]]``."""
        return self.is_array_of_array(node) or (
            self.is_array_index(node) and self.is_element_access(node)
        )

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def is_function_or_method(self, node: Optional[NodeView]) -> bool:
        return self._is(node, self.kinds.function_kinds)

    def is_closure(self, node: Optional[NodeView]) -> bool:
        return self._is(node, self.kinds.closure_kinds)

    def is_function_like(self, node: Optional[NodeView]) -> bool:
        return self.is_function_or_method(node) or self.is_closure(node)

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def is_block(self, node: Optional[NodeView]) -> bool:
        return self._is(node, self.kinds.block_kinds)

    def is_if(self, node: Optional[NodeView]) -> bool:
        return self._is(node, self.kinds.if_kinds)

    def is_else_if(self, node: Optional[NodeView]) -> bool:
        """True for ``elif`` clauses and for an ``if`` that is the body of an ``else``."""
        if self._is(node, self.kinds.else_if_kinds):
            return True
        return self.is_if(node) and self._is(node.parent, self.kinds.else_clause_kinds)

    def is_else_block(self, node: Optional[NodeView]) -> bool:
        """True for the block of the ``else`` branch of an ``if``."""
        if not self.is_block(node):
            return False
        clause = node.parent
        if not self._is(clause, self.kinds.else_clause_kinds):
            return False
        return self.is_if(clause.parent)

    def is_conditional(self, node: Optional[NodeView]) -> bool:
        return (
            self.is_if(node)
            or self.is_else_if(node)
            or self.is_ternary(node)
            or self.is_switch(node)
        )

    def is_loop(self, node: Optional[NodeView]) -> bool:
        return self._is(node, self.kinds.loop_kinds)

    def is_catch(self, node: Optional[NodeView]) -> bool:
        return self._is(node, self.kinds.catch_kinds)

    def is_switch(self, node: Optional[NodeView]) -> bool:
        return self._is(node, self.kinds.switch_kinds)

    def is_labelled_jump(self, node: Optional[NodeView]) -> bool:
        """True for ``break label`` / ``continue label``."""
        if not self._is(node, self.kinds.jump_kinds):
            return False
        return self._field(node, self.kinds.jump_label_field) is not None

    # ------------------------------------------------------------------
    # Complexity roles
    # ------------------------------------------------------------------

    def is_nesting_sensitive(self, node: Optional[NodeView]) -> bool:
        """Constructs whose weight grows with the number of enclosing ones.

        An else-if continues its ``if`` instead of opening a new level.
        """
        if self.is_else_if(node):
            return False
        return (
            self.is_if(node)
            or self.is_ternary(node)
            or self.is_switch(node)
            or self.is_loop(node)
            or self.is_catch(node)
        )

    def is_decision_point(self, node: Optional[NodeView]) -> bool:
        """Nodes adding one independent path to the cyclomatic complexity."""
        return (
            self.is_if(node)
            or self.is_else_if(node)
            or self.is_ternary(node)
            or self.is_loop(node)
            or self._is(node, self.kinds.case_kinds)
            or self.is_catch(node)
        )
