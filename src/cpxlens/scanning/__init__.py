"""Parsing layer: tree-sitter wrapper, per-language kinds and the NodeView adapter."""

from .languages import LANGUAGES, SyntaxKinds, language_for_path
from .node_view import NodeView, TreeSitterNodeView, iter_views
from .treesitter_parser import (
    TREE_SITTER_AVAILABLE,
    TreeSitterParser,
    get_supported_languages,
)

__all__ = [
    "LANGUAGES",
    "SyntaxKinds",
    "language_for_path",
    "NodeView",
    "TreeSitterNodeView",
    "iter_views",
    "TREE_SITTER_AVAILABLE",
    "TreeSitterParser",
    "get_supported_languages",
]
