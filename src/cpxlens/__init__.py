"""
cpxlens - Cognitive and Cyclomatic Complexity per Method

Scores every method of a codebase with cognitive complexity (control flow
weighted by nesting) and cyclomatic complexity (independent paths), then
rolls the results up into per-file and per-folder statistics.
"""

__version__ = "0.3.0"

from .api import analyze
from .complexity import (
    ComplexityFactors,
    ComplexityType,
    MethodStatus,
    Stats,
    TreeFile,
    TreeFolder,
    TreeMethod,
)
from .config import AnalysisConfig, load_config

__all__ = [
    "analyze",  # Main entry point
    "AnalysisConfig",
    "load_config",
    "ComplexityFactors",
    "ComplexityType",
    "MethodStatus",
    "Stats",
    "TreeFile",
    "TreeFolder",
    "TreeMethod",
]
