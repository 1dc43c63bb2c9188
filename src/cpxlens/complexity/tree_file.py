"""TreeFile: the evaluated methods of one source file, and their statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from ..config import AnalysisConfig
from ..exceptions import FileAccessError, TreeLinkageError
from ..logging_config import get_logger
from ..scanning.languages import LANGUAGES, SyntaxKinds, language_for_path
from ..scanning.node_view import NodeView, TreeSitterNodeView, iter_views
from ..scanning.treesitter_parser import TREE_SITTER_AVAILABLE, TreeSitterParser
from .classifier import NodeClassifier
from .stats import Stats
from .tree_method import TreeMethod

logger = get_logger(__name__)


@dataclass
class MethodFailure:
    """A method whose evaluation was aborted by a malformed syntax tree."""

    name: str
    line: int
    reason: str


@dataclass
class TreeFile:
    """A source file with its methods.

    Attributes:
        path: Path of the file
        language: Language name (key of LANGUAGES)
        relative_path: Path relative to the analysed root, posix style
        methods: Successfully evaluated methods, in source order
        failures: Methods whose evaluation failed
        stats: Statistics of the evaluated methods
    """

    path: Path
    language: str
    relative_path: str = ""
    methods: list[TreeMethod] = field(default_factory=list)
    failures: list[MethodFailure] = field(default_factory=list)
    stats: Stats = field(default_factory=Stats)

    @property
    def name(self) -> str:
        return self.path.name


def relative_path(path: Path, root: Optional[Path]) -> str:
    """Posix path of ``path`` relative to ``root`` ('' for the root itself)."""
    if root is None:
        return path.as_posix()
    try:
        relative = Path(path).resolve().relative_to(Path(root).resolve())
    except ValueError:
        return path.as_posix()
    return "" if relative == Path(".") else relative.as_posix()


class TreeFileService:
    """Builds TreeFiles: parsing, method discovery, evaluation and statistics.

    Args:
        config: Thresholds, weights, enabled languages and size limit
        parser: Shared tree-sitter parser (one is created if omitted)
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        parser: Optional[TreeSitterParser] = None,
    ) -> None:
        self.config = config or AnalysisConfig()
        self.parser = parser or TreeSitterParser()

    def generate_tree(self, path: Path, root: Optional[Path] = None) -> Optional[TreeFile]:
        """TreeFile of the file at ``path``, or None if it cannot be analysed.

        Raises:
            FileAccessError: If the file cannot be read
        """
        path = Path(path)
        language = language_for_path(str(path), self.config.languages)
        if language is None:
            logger.debug(f"Skipping {path}: no enabled language for this extension")
            return None

        try:
            size = path.stat().st_size
            if size > self.config.max_file_size_bytes:
                logger.warning(
                    f"Skipping {path}: {size} bytes exceeds the "
                    f"{self.config.max_file_size_mb} MB limit"
                )
                return None
            source = path.read_bytes()
        except OSError as e:
            raise FileAccessError(path, str(e))

        return self.generate_from_source(source, language, path, relative_path(path, root))

    def generate_from_source(
        self,
        source: bytes,
        language: str,
        path: Optional[Path] = None,
        relative: str = "",
    ) -> Optional[TreeFile]:
        """TreeFile of in-memory ``source`` written in ``language``."""
        path = Path(path) if path is not None else Path("<memory>")
        kinds = LANGUAGES.get(language)
        if kinds is None or not self.parser.is_language_supported(language):
            if not TREE_SITTER_AVAILABLE:
                logger.warning(f"Skipping {path}: tree-sitter is not installed")
            else:
                logger.warning(f"Skipping {path}: no {language} grammar installed")
            return None

        tree_file = TreeFile(path=path, language=language, relative_path=relative)
        if source.strip():
            tree = self.parser.parse(source, language)
            if tree is None:
                logger.warning(f"Skipping {path}: parsing returned no tree")
                return None
            root = TreeSitterNodeView(tree.root_node, source)
            if tree.root_node.has_error:
                logger.debug(f"{path} has syntax errors; results may be partial")
            for view in self.find_methods(root, kinds):
                self.evaluate_method(tree_file, TreeMethod(view, kinds, source, str(path)))
        tree_file.stats = self.calculate_stats(tree_file)
        return tree_file

    @staticmethod
    def find_methods(root: NodeView, kinds: SyntaxKinds) -> Iterator[NodeView]:
        """Method and function declarations at any depth, in source order."""
        classifier = NodeClassifier(kinds)
        for view in iter_views(root):
            if classifier.is_function_or_method(view):
                yield view

    def evaluate_method(self, tree_file: TreeFile, method: TreeMethod) -> None:
        """Evaluate ``method`` and attach it (or its failure) to ``tree_file``."""
        try:
            method.evaluate(self.config.thresholds, self.config.weights)
        except TreeLinkageError as e:
            logger.warning(f"Skipping method {method.name} of {tree_file.path}: {e}")
            tree_file.failures.append(MethodFailure(method.name, method.line, e.reason))
            return
        tree_file.methods.append(method)

    @staticmethod
    def calculate_stats(tree_file: TreeFile) -> Stats:
        stats = Stats(number_of_files=1, subject=tree_file.relative_path)
        for method in tree_file.methods:
            stats.increment_method(method.evaluation)
        return stats.finalize()
