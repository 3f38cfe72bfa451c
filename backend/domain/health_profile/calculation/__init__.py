"""Calculation services for health profile."""

from .metric_calculator import IDEAL_BMI, MIN_DAILY_CALORIES, MetricCalculator

__all__ = [
    "IDEAL_BMI",
    "MIN_DAILY_CALORIES",
    "MetricCalculator",
]
