"""TreeFolder: recursive aggregation of files and subfolders."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Union

from ..config import AnalysisConfig
from ..exceptions import FileAccessError, InvalidPathError
from ..logging_config import get_logger
from .stats import Stats
from .tree_file import TreeFile, TreeFileService, relative_path
from .tree_method import TreeMethod

logger = get_logger(__name__)


@dataclass
class TreeFolder:
    """A folder with its analysed files and subfolders."""

    path: Path
    relative_path: str = ""
    files: list[TreeFile] = field(default_factory=list)
    subfolders: list[TreeFolder] = field(default_factory=list)
    stats: Stats = field(default_factory=Stats)

    @property
    def name(self) -> str:
        return self.path.name

    def all_files(self) -> Iterator[TreeFile]:
        yield from self.files
        for subfolder in self.subfolders:
            yield from subfolder.all_files()

    def all_methods(self) -> Iterator[TreeMethod]:
        for tree_file in self.all_files():
            yield from tree_file.methods


class TreeFolderService:
    """Walks a folder, builds its TreeFiles and aggregates their statistics.

    Args:
        config: Analysis configuration; its ignore rules drive the walk
        file_service: Builder of TreeFiles (one is created if omitted)
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        file_service: Optional[TreeFileService] = None,
    ) -> None:
        self.config = config or AnalysisConfig()
        self.file_service = file_service or TreeFileService(self.config)
        self.ignore_rules = self.config.ignore_rules

    def generate_tree(
        self, path: Optional[Union[str, Path]], root: Optional[Path] = None
    ) -> Optional[TreeFolder]:
        """TreeFolder of ``path``, with statistics.

        A file path gives a folder holding that single file.

        Raises:
            InvalidPathError: If ``path`` does not exist
        """
        if not path:
            logger.error("No path to analyse")
            return None
        path = Path(path)
        if not path.exists():
            raise InvalidPathError(path, "does not exist")

        if path.is_file():
            folder = TreeFolder(path=path.parent)
            self._add_file(folder, path, path.parent)
            folder.stats = self.calculate_stats(folder)
            return folder

        root = root or path
        folder = TreeFolder(path=path, relative_path=relative_path(path, root))
        for entry in sorted(path.iterdir()):
            if self.ignore_rules.is_ignored(entry, root):
                logger.debug(f"Ignoring {entry}")
                continue
            if entry.is_dir():
                folder.subfolders.append(self.generate_tree(entry, root))
            elif entry.is_file():
                self._add_file(folder, entry, root)
        folder.stats = self.calculate_stats(folder)
        return folder

    def _add_file(self, folder: TreeFolder, path: Path, root: Path) -> None:
        try:
            tree_file = self.file_service.generate_tree(path, root)
        except FileAccessError as e:
            logger.warning(str(e))
            return
        if tree_file is not None:
            folder.files.append(tree_file)

    def calculate_stats(self, folder: TreeFolder) -> Stats:
        """Point-wise sum of the statistics of the files and subfolders of ``folder``.

        Subfolder statistics are taken as they are, so they must be computed first.
        """
        stats = Stats(subject=folder.relative_path)
        for tree_file in folder.files:
            stats = stats.add(tree_file.stats)
        for subfolder in folder.subfolders:
            stats = stats.add(subfolder.stats)
        return stats.finalize()

    @staticmethod
    def route_to_file(folder: TreeFolder, tree_file: TreeFile) -> Optional[str]:
        """Relative link from ``folder`` to a file inside it or inside one of its subfolders."""
        if folder is None or tree_file is None:
            return None
        try:
            relative = tree_file.path.resolve().relative_to(folder.path.resolve())
        except ValueError:
            logger.warning(f"The file {tree_file.name} is not inside the folder {folder.path}")
            return None
        return f"./{relative.as_posix()}"

    @staticmethod
    def route_to_subfolder(folder: TreeFolder, subfolder: TreeFolder) -> Optional[str]:
        """Relative link from ``folder`` to one of its subfolders, at any depth."""
        if folder is None or subfolder is None:
            return None
        if subfolder.path.resolve() == folder.path.resolve():
            return None
        try:
            relative = subfolder.path.resolve().relative_to(folder.path.resolve())
        except ValueError:
            logger.warning(f"The folder {subfolder.path} is not a subfolder of {folder.path}")
            return None
        return f"./{relative.as_posix()}"
