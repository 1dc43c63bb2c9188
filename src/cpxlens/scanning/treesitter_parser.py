"""Tree-sitter parser wrapper.

Provides a unified interface for tree-sitter parsing across languages.
Handles missing tree-sitter dependency gracefully.

Usage:
    if TREE_SITTER_AVAILABLE:
        parser = TreeSitterParser()
        tree = parser.parse(code_bytes, "python")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..logging_config import get_logger

logger = get_logger(__name__)

# Try to import tree-sitter
TREE_SITTER_AVAILABLE = False
_tree_sitter_module: Any = None
_language_modules: dict[str, Any] = {}

try:
    import tree_sitter as _tree_sitter_module  # type: ignore[no-redef]

    TREE_SITTER_AVAILABLE = True

    # Try to import language grammars
    try:
        import tree_sitter_python

        _language_modules["python"] = tree_sitter_python
    except ImportError:
        pass

    try:
        import tree_sitter_javascript

        _language_modules["javascript"] = tree_sitter_javascript
    except ImportError:
        pass

    try:
        import tree_sitter_typescript

        _language_modules["typescript"] = tree_sitter_typescript
        # TSX is bundled with tree-sitter-typescript, store it separately
        _language_modules["tsx"] = tree_sitter_typescript
    except ImportError:
        pass

except ImportError:
    TREE_SITTER_AVAILABLE = False


if TYPE_CHECKING:
    # Type stubs for tree-sitter (for type checking only)
    class Node:
        type: str
        is_named: bool
        start_byte: int
        end_byte: int
        start_point: tuple[int, int]
        parent: Node | None
        children: list[Node]
        named_children: list[Node]

        def child_by_field_name(self, name: str) -> Node | None: ...

    class Tree:
        root_node: Node


def get_supported_languages() -> list[str]:
    """Get list of languages with installed grammars."""
    if not TREE_SITTER_AVAILABLE:
        return []
    return list(_language_modules.keys())


class TreeSitterParser:
    """Wrapper around tree-sitter for multi-language parsing.

    Handles missing dependencies gracefully. Check TREE_SITTER_AVAILABLE
    before using, or check if parse() returns None.
    """

    def __init__(self) -> None:
        """Initialize parser with available languages."""
        self._parsers: dict[str, Any] = {}

        if not TREE_SITTER_AVAILABLE:
            return

        for lang_name, lang_module in _language_modules.items():
            try:
                # Some modules use language_<name>() instead of language()
                lang_fn = getattr(lang_module, f"language_{lang_name}", None)
                if lang_fn is None:
                    lang_fn = getattr(lang_module, "language", None)
                if lang_fn is None:
                    continue

                raw_lang = lang_fn()
                # tree-sitter >= 0.23 returns PyCapsule; wrap in Language()
                lang_obj = _tree_sitter_module.Language(raw_lang)
                self._parsers[lang_name] = _tree_sitter_module.Parser(lang_obj)
            except (AttributeError, TypeError, ValueError) as e:
                logger.debug(f"Skipping {lang_name} grammar: {e}")

    def parse(self, code: bytes, language: str) -> Tree | None:
        """Parse code and return syntax tree.

        Args:
            code: Source code as bytes
            language: Language name (e.g., "python")

        Returns:
            Tree object if successful, None if language not supported
            or tree-sitter not available
        """
        if not TREE_SITTER_AVAILABLE:
            return None

        parser = self._parsers.get(language)
        if parser is None:
            return None

        result: Tree | None = parser.parse(code)
        return result

    def is_language_supported(self, language: str) -> bool:
        """Check if a language is supported."""
        return language in self._parsers
