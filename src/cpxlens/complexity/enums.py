"""Enumerations shared by the complexity engine."""

from enum import Enum
from functools import total_ordering


class ComplexityType(Enum):
    """The two complexity scores computed per method."""

    COGNITIVE = "cognitive"
    CYCLOMATIC = "cyclomatic"


@total_ordering
class MethodStatus(Enum):
    """Status of a method for one complexity type.

    Statuses are totally ordered by severity: CORRECT < WARNING < ERROR.
    """

    CORRECT = "CORRECT"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MethodStatus):
            return NotImplemented
        return self.severity < other.severity


_SEVERITY = {
    MethodStatus.CORRECT: 0,
    MethodStatus.WARNING: 1,
    MethodStatus.ERROR: 2,
}

