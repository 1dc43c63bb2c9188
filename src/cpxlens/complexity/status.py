"""Threshold classification of complexity values."""

from __future__ import annotations

from typing import Optional

from ..config import ComplexityThresholds
from .enums import MethodStatus


def classify(value: float, thresholds: Optional[ComplexityThresholds]) -> MethodStatus:
    """Status of a complexity value.

    ``value <= warning`` is CORRECT, ``value > error`` is ERROR, anything in
    between is WARNING. Without thresholds every value is CORRECT.
    """
    if thresholds is None:
        return MethodStatus.CORRECT
    if value <= thresholds.warning_threshold:
        return MethodStatus.CORRECT
    if value > thresholds.error_threshold:
        return MethodStatus.ERROR
    return MethodStatus.WARNING
