"""Exception hierarchy for cpxlens."""

from .analysis import (
    AnalysisError,
    EvaluationStateError,
    FileAccessError,
    LineLookupError,
    TreeLinkageError,
)
from .base import CpxLensError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "CpxLensError",
    "AnalysisError",
    "FileAccessError",
    "TreeLinkageError",
    "LineLookupError",
    "EvaluationStateError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
