"""Statistics of files and folders: histograms and repartitions by status.

Every aggregate here adds point-wise, so folder statistics are the sum of
the statistics of their files and subfolders, in any order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from .enums import ComplexityType, MethodStatus
from .tree_method import MethodEvaluation


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def percent(numerator: float, denominator: float) -> float:
    """``numerator / denominator`` as a percentage with one decimal, 0 if ``denominator`` is 0."""
    if not denominator:
        return 0
    return math.floor(numerator * 1000 / denominator + 0.5) / 10


@dataclass(frozen=True)
class Bar:
    """Number of methods ``y`` having complexity ``x``."""

    x: int
    y: int


@dataclass
class Barchart:
    """Histogram of the complexities of a set of methods, sorted by ``x``."""

    cpx_type: ComplexityType = ComplexityType.COGNITIVE
    data: list[Bar] = field(default_factory=list)

    def add_result(self, value: float) -> None:
        """Count one more method at ``value``, rounded half up."""
        x = round_half_up(value)
        for i, bar in enumerate(self.data):
            if bar.x == x:
                self.data[i] = Bar(x, bar.y + 1)
                return
        self.data.append(Bar(x, 1))
        self.data.sort(key=lambda bar: bar.x)

    def concat(self, other: Optional[Barchart]) -> Barchart:
        """New chart with the heights of both charts summed per ``x``."""
        heights: dict[int, int] = {bar.x: bar.y for bar in self.data}
        if other is not None:
            for bar in other.data:
                heights[bar.x] = heights.get(bar.x, 0) + bar.y
        return Barchart(self.cpx_type, [Bar(x, y) for x, y in sorted(heights.items())])

    def plug_chart_holes(self) -> Barchart:
        """New chart with a zero-height bar for every missing ``x`` in ``0..max``."""
        if not self.data:
            return Barchart(self.cpx_type, [])
        heights = {bar.x: bar.y for bar in self.data}
        top = max(heights)
        return Barchart(self.cpx_type, [Bar(x, heights.get(x, 0)) for x in range(top + 1)])

    @property
    def sum_of_complexities(self) -> int:
        return sum(bar.x * bar.y for bar in self.data)

    @property
    def total_count(self) -> int:
        return sum(bar.y for bar in self.data)

    def to_dict(self) -> list[dict[str, int]]:
        return [{"x": bar.x, "y": bar.y} for bar in self.data]


@dataclass
class RepartitionByStatus:
    """Number (or percentage) of methods per status."""

    correct: float = 0
    warning: float = 0
    error: float = 0

    def add(self, other: Optional[RepartitionByStatus]) -> RepartitionByStatus:
        if other is None:
            return RepartitionByStatus(self.correct, self.warning, self.error)
        return RepartitionByStatus(
            correct=self.correct + other.correct,
            warning=self.warning + other.warning,
            error=self.error + other.error,
        )

    def increment(self, status: MethodStatus) -> None:
        if status == MethodStatus.ERROR:
            self.error += 1
        elif status == MethodStatus.WARNING:
            self.warning += 1
        else:
            self.correct += 1

    @property
    def total(self) -> float:
        return self.correct + self.warning + self.error

    def to_dict(self) -> dict[str, float]:
        return {"correct": self.correct, "warning": self.warning, "error": self.error}


@dataclass
class ComplexitiesByStatus:
    """A RepartitionByStatus for each complexity type."""

    cognitive: RepartitionByStatus = field(default_factory=RepartitionByStatus)
    cyclomatic: RepartitionByStatus = field(default_factory=RepartitionByStatus)

    def for_type(self, cpx_type: ComplexityType) -> RepartitionByStatus:
        return getattr(self, cpx_type.value)

    def add(self, other: Optional[ComplexitiesByStatus]) -> ComplexitiesByStatus:
        if other is None:
            return ComplexitiesByStatus(self.cognitive.add(None), self.cyclomatic.add(None))
        return ComplexitiesByStatus(
            cognitive=self.cognitive.add(other.cognitive),
            cyclomatic=self.cyclomatic.add(other.cyclomatic),
        )

    def to_dict(self) -> dict[str, dict[str, float]]:
        return {"cognitive": self.cognitive.to_dict(), "cyclomatic": self.cyclomatic.to_dict()}


@dataclass
class Stats:
    """Statistics of a file or of a folder.

    Attributes:
        number_of_files: Files analysed
        number_of_methods: Methods evaluated
        number_of_methods_by_status: Methods per status, per complexity type
        percents_by_status: Same as percentages, filled by set_percentages()
        barchart_cognitive: Histogram of the cognitive complexities
        barchart_cyclomatic: Histogram of the cyclomatic complexities
        total_cognitive_complexity: Filled by cumulate_complexities()
        total_cyclomatic_complexity: Filled by cumulate_complexities()
        subject: Path of the file or folder, relative to the analysed root
    """

    number_of_files: int = 0
    number_of_methods: int = 0
    number_of_methods_by_status: ComplexitiesByStatus = field(default_factory=ComplexitiesByStatus)
    percents_by_status: ComplexitiesByStatus = field(default_factory=ComplexitiesByStatus)
    barchart_cognitive: Barchart = field(
        default_factory=lambda: Barchart(ComplexityType.COGNITIVE)
    )
    barchart_cyclomatic: Barchart = field(
        default_factory=lambda: Barchart(ComplexityType.CYCLOMATIC)
    )
    total_cognitive_complexity: float = 0
    total_cyclomatic_complexity: float = 0
    subject: str = ""

    def barchart(self, cpx_type: ComplexityType) -> Barchart:
        if cpx_type == ComplexityType.COGNITIVE:
            return self.barchart_cognitive
        return self.barchart_cyclomatic

    def increment_method(self, evaluation: MethodEvaluation) -> None:
        """Count one evaluated method, for both complexity types."""
        self.number_of_methods += 1
        for cpx_type in ComplexityType:
            self.barchart(cpx_type).add_result(evaluation.value(cpx_type))
            self.number_of_methods_by_status.for_type(cpx_type).increment(
                evaluation.status(cpx_type)
            )

    def add(self, other: Optional[Stats]) -> Stats:
        """Point-wise sum; the subject and percentages of ``self`` are kept."""
        if other is None:
            other = Stats()
        return Stats(
            number_of_files=self.number_of_files + other.number_of_files,
            number_of_methods=self.number_of_methods + other.number_of_methods,
            number_of_methods_by_status=self.number_of_methods_by_status.add(
                other.number_of_methods_by_status
            ),
            percents_by_status=self.percents_by_status.add(None),
            barchart_cognitive=self.barchart_cognitive.concat(other.barchart_cognitive),
            barchart_cyclomatic=self.barchart_cyclomatic.concat(other.barchart_cyclomatic),
            total_cognitive_complexity=self.total_cognitive_complexity
            + other.total_cognitive_complexity,
            total_cyclomatic_complexity=self.total_cyclomatic_complexity
            + other.total_cyclomatic_complexity,
            subject=self.subject,
        )

    def set_percentages(self) -> None:
        for cpx_type in ComplexityType:
            counts = self.number_of_methods_by_status.for_type(cpx_type)
            setattr(
                self.percents_by_status,
                cpx_type.value,
                RepartitionByStatus(
                    correct=percent(counts.correct, self.number_of_methods),
                    warning=percent(counts.warning, self.number_of_methods),
                    error=percent(counts.error, self.number_of_methods),
                ),
            )

    def plug_chart_holes(self) -> Stats:
        self.barchart_cognitive = self.barchart_cognitive.plug_chart_holes()
        self.barchart_cyclomatic = self.barchart_cyclomatic.plug_chart_holes()
        return self

    def cumulate_complexities(self) -> None:
        self.total_cognitive_complexity = self.barchart_cognitive.sum_of_complexities
        self.total_cyclomatic_complexity = self.barchart_cyclomatic.sum_of_complexities

    def finalize(self) -> Stats:
        """Fill the derived fields once every method or child has been added."""
        self.cumulate_complexities()
        self.set_percentages()
        return self.plug_chart_holes()

    def to_dict(self) -> dict:
        return {
            "subject": self.subject,
            "number_of_files": self.number_of_files,
            "number_of_methods": self.number_of_methods,
            "number_of_methods_by_status": self.number_of_methods_by_status.to_dict(),
            "percents_by_status": self.percents_by_status.to_dict(),
            "total_cognitive_complexity": self.total_cognitive_complexity,
            "total_cyclomatic_complexity": self.total_cyclomatic_complexity,
            "barchart_cognitive": self.barchart_cognitive.to_dict(),
            "barchart_cyclomatic": self.barchart_cyclomatic.to_dict(),
        }
