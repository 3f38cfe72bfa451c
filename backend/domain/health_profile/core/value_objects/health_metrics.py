"""Derived health metric value objects."""

from dataclasses import dataclass

from .bmi_status import BmiStatus


@dataclass(frozen=True)
class BmiResult:
    """Body Mass Index with its classification band."""

    value: float
    status: BmiStatus


@dataclass(frozen=True)
class HealthMetrics:
    """Full set of metrics derived from a profile's inputs.

    Values stay in floating point; rounding to whole kcal happens only
    when they are written onto a HealthProfile.

    Attributes:
        bmi: Body Mass Index and band
        ideal_weight: Weight (kg) at BMI 22 for the given height
        bmr: Basal Metabolic Rate (kcal/day)
        tdee: Total Daily Energy Expenditure (kcal/day)
        goal_calories: Goal-adjusted daily target, floored at 1200 kcal
    """

    bmi: BmiResult
    ideal_weight: float
    bmr: float
    tdee: float
    goal_calories: float

    def is_complete(self) -> bool:
        """True when every value a completed profile requires is positive."""
        return (
            self.bmi.value > 0
            and self.bmr > 0
            and self.tdee > 0
            and self.goal_calories > 0
        )
