"""Analysis-related exceptions: file access and malformed method trees."""

from pathlib import Path
from typing import Optional

from .base import CpxLensError


class AnalysisError(CpxLensError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class TreeLinkageError(AnalysisError):
    """Raised when a method's syntax tree is inconsistent with its source code.

    This is an invariant violation: it aborts the evaluation of one method,
    never the whole run.
    """

    def __init__(self, method: str, reason: str, details: Optional[dict] = None):
        merged = {"method": method, "reason": reason}
        merged.update(details or {})
        super().__init__(f"Malformed syntax tree in method '{method}'", details=merged)
        self.method = method
        self.reason = reason


class LineLookupError(TreeLinkageError):
    """Raised when a node offset does not fall inside any line of its method."""

    def __init__(self, method: str, offset: int, code_length: int):
        super().__init__(
            method,
            "node offset outside of method code",
            details={"offset": str(offset), "code_length": str(code_length)},
        )
        self.offset = offset
        self.code_length = code_length


class EvaluationStateError(AnalysisError):
    """Raised when evaluation results are read before evaluate() ran."""

    def __init__(self, method: str):
        super().__init__(
            f"Method '{method}' has not been evaluated",
            details={"method": method},
        )
        self.method = method
