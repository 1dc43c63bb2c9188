"""Complexity factors: the per-node and per-line contributions to cognitive complexity."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Optional


@dataclass(frozen=True)
class ComplexityFactors:
    """Contribution of a node (or of a line) to the cognitive complexity index.

    Attributes:
        basic: Base score of control-flow constructs and logic doors
        structural: Score of logic doors mixing different operators
        nesting: Extra score of nesting-sensitive constructs, scaled by depth
        depth: Score of nested data accesses, scaled by depth
        aggregation: Score of functions declared inside the method

    Instances are values: ``add`` never mutates and ``add(None)`` returns an
    equal instance.
    """

    basic: float = 0.0
    structural: float = 0.0
    nesting: float = 0.0
    depth: float = 0.0
    aggregation: float = 0.0

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ValueError(f"{f.name} must be non-negative")

    def add(self, other: Optional[ComplexityFactors]) -> ComplexityFactors:
        if other is None:
            return replace(self)
        return ComplexityFactors(
            basic=self.basic + other.basic,
            structural=self.structural + other.structural,
            nesting=self.nesting + other.nesting,
            depth=self.depth + other.depth,
            aggregation=self.aggregation + other.aggregation,
        )

    def with_values(self, **changes: float) -> ComplexityFactors:
        return replace(self, **changes)

    @property
    def total(self) -> float:
        return self.basic + self.structural + self.nesting + self.depth + self.aggregation

    @property
    def total_basic(self) -> float:
        return round(self.basic, 2)

    @property
    def total_structural(self) -> float:
        return round(self.structural, 2)

    @property
    def total_nesting(self) -> float:
        return round(self.nesting, 2)

    @property
    def total_depth(self) -> float:
        return round(self.depth, 2)

    @property
    def total_aggregation(self) -> float:
        return round(self.aggregation, 2)

    @property
    def is_zero(self) -> bool:
        return self.total == 0

