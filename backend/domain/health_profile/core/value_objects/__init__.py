"""Value objects for health profile domain."""

from .activity_level import ActivityLevel
from .bmi_status import BmiStatus
from .gender import Gender
from .health_metrics import BmiResult, HealthMetrics
from .onboarding_step import OnboardingState, OnboardingStep
from .weight_goal import WeightGoal

__all__ = [
    "ActivityLevel",
    "BmiStatus",
    "BmiResult",
    "Gender",
    "HealthMetrics",
    "OnboardingState",
    "OnboardingStep",
    "WeightGoal",
]
