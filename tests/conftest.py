"""Shared test fixtures for cpxlens tests."""

from typing import Optional

import pytest

from cpxlens.complexity.classifier import NodeClassifier
from cpxlens.scanning.languages import LANGUAGES
from cpxlens.scanning.treesitter_parser import TreeSitterParser


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


# ---------------------------------------------------------------------------
# In-memory syntax trees
# ---------------------------------------------------------------------------


class FakeNode:
    """In-memory NodeView.

    ``fields`` may name nodes that are not children (anonymous tokens such
    as operators), like tree-sitter's child_by_field_name.
    """

    def __init__(self, kind, children=(), fields=None, text="", start=0, end=None, line=1):
        self.kind = kind
        self._children = list(children)
        self._fields = dict(fields or {})
        self.text = text
        self.start = start
        self.end = start if end is None else end
        self.line = line
        self.parent = None
        for child in self._children + list(self._fields.values()):
            child.parent = self

    @property
    def children(self):
        return self._children

    def field(self, name):
        return self._fields.get(name)

    def same_as(self, other):
        return other is self

    def __repr__(self):
        return f"FakeNode({self.kind}@{self.line})"


class FakeTreeBuilder:
    """Builds FakeNode trees with JavaScript node kinds over a piece of source.

    Nodes are placed with ``line`` (1-indexed) and ``col``; without ``col``
    a node starts at the first non-blank character of its line.
    """

    def __init__(self, source: str):
        self.text = source
        self.source = source.encode()
        self._lines = source.split("\n")
        self._starts = [0]
        for line in self._lines[:-1]:
            self._starts.append(self._starts[-1] + len(line.encode()) + 1)

    def offset(self, line: int, col: Optional[int] = None) -> int:
        text = self._lines[line - 1]
        if col is None:
            col = len(text) - len(text.lstrip())
        return self._starts[line - 1] + col

    def node(self, kind, *children, line=1, col=None, fields=None, text=""):
        return FakeNode(
            kind, children, fields=fields, text=text, start=self.offset(line, col), line=line
        )

    def ident(self, name, line=1, col=None):
        return self.node("identifier", line=line, col=col, text=name)

    def binary(self, operator, left, right, line=1, col=None):
        return self.node(
            "binary_expression",
            left,
            right,
            line=line,
            col=col,
            fields={"left": left, "right": right, "operator": FakeNode(operator)},
        )

    def paren(self, expression, line=1, col=None):
        return self.node("parenthesized_expression", expression, line=line, col=col)

    def block(self, *statements, line=1, col=None):
        return self.node("statement_block", *statements, line=line, col=col)

    def if_(self, condition, consequence, alternative=None, line=1, col=None):
        children = [self.paren(condition, line=line, col=col), consequence]
        if alternative is not None:
            children.append(alternative)
        return self.node(
            "if_statement",
            *children,
            line=line,
            col=col,
            fields={"consequence": consequence, "alternative": alternative}
            if alternative is not None
            else {"consequence": consequence},
        )

    def else_(self, body, line=1, col=None):
        return self.node("else_clause", body, line=line, col=col)

    def call(self, callee, *arguments, line=1, col=None):
        args = self.node("arguments", *arguments, line=line, col=col)
        return self.node(
            "call_expression", callee, args, line=line, col=col, fields={"function": callee}
        )

    def subscript(self, obj, index, line=1, col=None):
        return self.node(
            "subscript_expression",
            obj,
            index,
            line=line,
            col=col,
            fields={"object": obj, "index": index},
        )

    def statement(self, expression, line=1, col=None):
        return self.node("expression_statement", expression, line=line, col=col)

    def function(self, name, body, line=1):
        name_node = self.ident(name, line=line)
        return FakeNode(
            "function_declaration",
            [name_node, body],
            fields={"name": name_node, "body": body},
            start=self.offset(line),
            end=len(self.source),
            line=line,
        )


@pytest.fixture
def js_kinds():
    """Syntax kinds of JavaScript."""
    return LANGUAGES["javascript"]


@pytest.fixture
def classifier(js_kinds):
    """NodeClassifier for JavaScript kinds."""
    return NodeClassifier(js_kinds)


@pytest.fixture
def fake_tree():
    """Factory of FakeTreeBuilder over a source string."""
    return FakeTreeBuilder


@pytest.fixture(scope="session")
def ts_parser():
    """Shared tree-sitter parser (may support no language at all)."""
    return TreeSitterParser()
