"""Base formatter interface for cpxlens output rendering."""

from abc import ABC, abstractmethod

from ..complexity.tree_folder import TreeFolder


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, folder: TreeFolder) -> None:
        """Render the analysis of ``folder`` to the terminal."""

    @abstractmethod
    def format(self, folder: TreeFolder) -> str:
        """Return formatted string representation of the analysis."""
