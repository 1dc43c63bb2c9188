"""Complexity engine: per-method cognitive and cyclomatic complexity.

Pipeline for one method:
    TreeNodeArena.build      wrap the declaration subtree
    assign_factors           intrinsic factors and running nesting depth
    LineProjector.project    factors onto code lines, then nesting/depth per line
    TreeMethod.evaluate      index, cyclomatic count, statuses, displayed code

TreeFileService and TreeFolderService roll methods up into Stats.
"""

from .enums import ComplexityType, MethodStatus
from .factors import ComplexityFactors
from .stats import Bar, Barchart, ComplexitiesByStatus, RepartitionByStatus, Stats, percent
from .status import classify
from .tree_file import MethodFailure, TreeFile, TreeFileService
from .tree_folder import TreeFolder, TreeFolderService
from .tree_method import MethodEvaluation, TreeMethod

__all__ = [
    "ComplexityType",
    "MethodStatus",
    "ComplexityFactors",
    "Bar",
    "Barchart",
    "ComplexitiesByStatus",
    "RepartitionByStatus",
    "Stats",
    "percent",
    "classify",
    "MethodFailure",
    "TreeFile",
    "TreeFileService",
    "TreeFolder",
    "TreeFolderService",
    "MethodEvaluation",
    "TreeMethod",
]
