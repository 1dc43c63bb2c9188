"""Syntax kinds per language — the only place that names parser node kinds.

Adding a new language:
  1. Install its tree-sitter grammar and register it in treesitter_parser.
  2. Add a SyntaxKinds entry to LANGUAGES below.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class SyntaxKinds:
    """Everything the node classifier needs to know about a grammar."""

    name: str
    extensions: tuple[str, ...]
    line_comment: str

    # Declarations
    function_kinds: frozenset[str] = frozenset()
    closure_kinds: frozenset[str] = frozenset()
    name_field: str = "name"

    # Expressions
    binary_kinds: frozenset[str] = frozenset()
    logic_operators: frozenset[str] = frozenset()
    or_operators: frozenset[str] = frozenset()
    left_field: str = "left"
    right_field: str = "right"
    operator_field: str = "operator"
    ternary_kinds: frozenset[str] = frozenset()
    call_kinds: frozenset[str] = frozenset()
    callee_field: str = "function"
    identifier_kinds: frozenset[str] = frozenset({"identifier"})

    # Member access on the current instance: self.foo, this.foo
    member_kinds: frozenset[str] = frozenset()
    member_object_field: str = "object"
    member_property_field: str = "property"
    receiver_names: frozenset[str] = frozenset()

    # Element access: a[i]
    subscript_kinds: frozenset[str] = frozenset()
    subscript_object_field: str = "object"
    subscript_index_field: str = "index"

    # Statements
    if_kinds: frozenset[str] = frozenset()
    else_if_kinds: frozenset[str] = frozenset()
    else_clause_kinds: frozenset[str] = frozenset()
    block_kinds: frozenset[str] = frozenset()
    loop_kinds: frozenset[str] = frozenset()
    catch_kinds: frozenset[str] = frozenset()
    switch_kinds: frozenset[str] = frozenset()
    case_kinds: frozenset[str] = frozenset()
    jump_kinds: frozenset[str] = frozenset()
    jump_label_field: str = "label"

    def matches_path(self, path: str) -> bool:
        return Path(path).suffix.lower() in self.extensions


_JS_LIKE = dict(
    line_comment="//",
    function_kinds=frozenset(
        {
            "function_declaration",
            "generator_function_declaration",
            "method_definition",
        }
    ),
    closure_kinds=frozenset(
        {"arrow_function", "function", "function_expression", "generator_function"}
    ),
    binary_kinds=frozenset(
        {"binary_expression", "assignment_expression", "augmented_assignment_expression"}
    ),
    logic_operators=frozenset({"&&", "||"}),
    or_operators=frozenset({"||"}),
    ternary_kinds=frozenset({"ternary_expression"}),
    call_kinds=frozenset({"call_expression"}),
    member_kinds=frozenset({"member_expression"}),
    receiver_names=frozenset({"this"}),
    subscript_kinds=frozenset({"subscript_expression"}),
    subscript_object_field="object",
    subscript_index_field="index",
    if_kinds=frozenset({"if_statement"}),
    else_clause_kinds=frozenset({"else_clause"}),
    block_kinds=frozenset({"statement_block"}),
    loop_kinds=frozenset(
        {"for_statement", "for_in_statement", "while_statement", "do_statement"}
    ),
    catch_kinds=frozenset({"catch_clause"}),
    switch_kinds=frozenset({"switch_statement"}),
    case_kinds=frozenset({"switch_case"}),
    jump_kinds=frozenset({"break_statement", "continue_statement"}),
)


LANGUAGES = {
    "python": SyntaxKinds(
        name="python",
        extensions=(".py",),
        line_comment="#",
        function_kinds=frozenset({"function_definition"}),
        closure_kinds=frozenset({"lambda"}),
        binary_kinds=frozenset(
            {
                "boolean_operator",
                "binary_operator",
                "comparison_operator",
                "assignment",
                "augmented_assignment",
            }
        ),
        logic_operators=frozenset({"and", "or"}),
        or_operators=frozenset({"or"}),
        ternary_kinds=frozenset({"conditional_expression"}),
        call_kinds=frozenset({"call"}),
        member_kinds=frozenset({"attribute"}),
        member_property_field="attribute",
        receiver_names=frozenset({"self", "cls"}),
        subscript_kinds=frozenset({"subscript"}),
        subscript_object_field="value",
        subscript_index_field="subscript",
        if_kinds=frozenset({"if_statement"}),
        else_if_kinds=frozenset({"elif_clause"}),
        else_clause_kinds=frozenset({"else_clause"}),
        block_kinds=frozenset({"block"}),
        loop_kinds=frozenset({"for_statement", "while_statement"}),
        catch_kinds=frozenset({"except_clause", "except_group_clause"}),
        switch_kinds=frozenset({"match_statement"}),
        case_kinds=frozenset({"case_clause"}),
    ),
    "javascript": SyntaxKinds(name="javascript", extensions=(".js", ".jsx", ".mjs", ".cjs"), **_JS_LIKE),
    "typescript": SyntaxKinds(name="typescript", extensions=(".ts", ".mts", ".cts"), **_JS_LIKE),
    "tsx": SyntaxKinds(name="tsx", extensions=(".tsx",), **_JS_LIKE),
}


def language_for_path(path: str, enabled: Optional[list[str]] = None) -> Optional[str]:
    """Name of the language handling ``path``, or None."""
    for name, kinds in LANGUAGES.items():
        if enabled is not None and name not in enabled:
            continue
        if kinds.matches_path(path):
            return name
    return None
