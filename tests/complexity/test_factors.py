"""Tests for the complexity factor model."""

import pytest

from cpxlens.complexity.enums import MethodStatus
from cpxlens.complexity.factors import ComplexityFactors


class TestComplexityFactors:
    """Test ComplexityFactors value semantics."""

    def test_defaults_are_zero(self):
        """A new instance has every field at zero."""
        factors = ComplexityFactors()
        assert factors.total == 0
        assert factors.is_zero

    def test_total_sums_every_category(self):
        """total is the sum of the five categories."""
        factors = ComplexityFactors(basic=1, structural=2, nesting=3, depth=0.5, aggregation=1)
        assert factors.total == pytest.approx(7.5)

    def test_negative_field_rejected(self):
        """Negative values raise ValueError."""
        with pytest.raises(ValueError, match="nesting"):
            ComplexityFactors(nesting=-1)

    def test_add_does_not_mutate(self):
        """add() returns a new instance."""
        a = ComplexityFactors(basic=1)
        b = ComplexityFactors(nesting=2)
        c = a.add(b)
        assert a == ComplexityFactors(basic=1)
        assert b == ComplexityFactors(nesting=2)
        assert c == ComplexityFactors(basic=1, nesting=2)

    def test_add_is_commutative(self):
        a = ComplexityFactors(basic=1, depth=0.5)
        b = ComplexityFactors(structural=1, aggregation=2)
        assert a.add(b) == b.add(a)

    def test_add_is_associative(self):
        a = ComplexityFactors(basic=1)
        b = ComplexityFactors(nesting=2, depth=0.5)
        c = ComplexityFactors(structural=1, basic=3)
        assert a.add(b).add(c) == a.add(b.add(c))

    def test_add_none_is_identity(self):
        """add(None) returns an equal instance."""
        a = ComplexityFactors(basic=2, structural=1)
        assert a.add(None) == a

    def test_reporting_totals_rounded(self):
        """total_* breakdowns are rounded to two decimals."""
        factors = ComplexityFactors(depth=1 / 3, nesting=2 / 3)
        assert factors.total_depth == 0.33
        assert factors.total_nesting == 0.67

    def test_with_values(self):
        factors = ComplexityFactors(basic=1, nesting=5)
        assert factors.with_values(nesting=2) == ComplexityFactors(basic=1, nesting=2)


class TestMethodStatus:
    """Test the total order of statuses."""

    def test_order(self):
        assert MethodStatus.CORRECT < MethodStatus.WARNING < MethodStatus.ERROR

    def test_max(self):
        assert max(MethodStatus.WARNING, MethodStatus.ERROR, MethodStatus.CORRECT) == (
            MethodStatus.ERROR
        )

    def test_comparison_with_other_type(self):
        with pytest.raises(TypeError):
            MethodStatus.CORRECT < 1
