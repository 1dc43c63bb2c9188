"""Public API for cpxlens.

Example:
    >>> from cpxlens import analyze
    >>>
    >>> folder = analyze("/path/to/code")
    >>> folder.stats.number_of_methods
    42
    >>> for method in folder.all_methods():
    ...     print(method.name, method.cpx_index, method.cognitive_status)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .complexity.tree_folder import TreeFolder, TreeFolderService
from .config import load_config
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def analyze(
    path: Union[str, Path] = ".",
    config_file: Optional[Path] = None,
    **overrides,
) -> Optional[TreeFolder]:
    """Analyze a file or a folder and return its TreeFolder.

    Steps:
    1. Load configuration (auto-discover TOML + apply overrides) and set up logging
    2. Walk the folder, honouring the exclude patterns
    3. Evaluate every method of every supported file
    4. Aggregate statistics per file and per folder

    Args:
        path: File or folder to analyze (default: current directory)
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g., verbose=True, languages=["python"])

    Returns:
        The root TreeFolder; a file path gives a folder holding that file only

    Raises:
        ConfigurationError: If configuration is invalid
        InvalidPathError: If path doesn't exist
    """
    config = load_config(config_file=config_file, **overrides)
    setup_logging(config.verbosity, config.log_file)
    logger.debug(f"Configuration loaded: {config.verbosity} mode")

    logger.info(f"Starting analysis of {path}")

    folder = TreeFolderService(config).generate_tree(path)
    if folder is not None:
        logger.info(
            f"Analyzed {folder.stats.number_of_methods} methods "
            f"in {folder.stats.number_of_files} files"
        )
    return folder
