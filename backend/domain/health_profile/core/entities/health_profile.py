"""HealthProfile entity - aggregate root for an account's health data."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..exceptions.domain_errors import InvalidProfileDataError
from ..value_objects.activity_level import ActivityLevel
from ..value_objects.bmi_status import BmiStatus
from ..value_objects.gender import Gender
from ..value_objects.health_metrics import HealthMetrics
from ..value_objects.onboarding_step import OnboardingState, OnboardingStep
from ..value_objects.weight_goal import WeightGoal


def to_kcal(value: float) -> int:
    """Round a kcal value to the whole number stored on the profile."""
    return int(round(value))


@dataclass
class HealthProfile:
    """Health profile aggregate root, one per account.

    Holds the onboarding inputs (name, body stats, goals), the metrics
    derived from them and the onboarding progress.

    Invariants:
    - current_onboarding_step is within 1-4
    - while onboarding is incomplete derived metrics may be zero or stale
    - once onboarding is completed BMI, BMR, TDEE and goal calories are
      positive and recomputed on every input-affecting change

    Attributes:
        account_id: Owning account (one-to-one)
        bmi_value .. goal_calories: Derived outputs, never hand-edited
        onboarding_completed: Whether the wizard reached completion
        current_onboarding_step: Last committed wizard step (1-4)
        active: False once the owning account is deactivated
    """

    account_id: str
    first_name: str = ""
    last_name: str = ""
    nickname: Optional[str] = None
    gender: Gender = Gender.MALE
    height_cm: float = 0.0
    weight_kg: float = 0.0
    age: int = 0
    birth_date: Optional[date] = None
    activity_level: ActivityLevel = ActivityLevel.SEDENTARY
    weight_goal: WeightGoal = WeightGoal.MAINTAIN
    target_weight_kg: float = 0.0
    bmi_value: float = 0.0
    bmi_status: Optional[BmiStatus] = None
    ideal_weight: float = 0.0
    bmr: int = 0
    tdee: int = 0
    goal_calories: int = 0
    onboarding_completed: bool = False
    current_onboarding_step: int = OnboardingStep.NAME.value
    active: bool = True
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        self.validate_invariants()

    def validate_invariants(self) -> None:
        """Validate domain invariants.

        Raises:
            InvalidProfileDataError: If any invariant is violated
        """
        if not self.account_id or not str(self.account_id).strip():
            raise InvalidProfileDataError("Account ID cannot be empty")

        if self.current_onboarding_step not in {step.value for step in OnboardingStep}:
            raise InvalidProfileDataError(
                f"Onboarding step must be 1-4, got {self.current_onboarding_step}"
            )

        if self.onboarding_completed:
            if self.bmi_value <= 0 or self.bmr <= 0 or self.tdee <= 0:
                raise InvalidProfileDataError(
                    "Completed profile must have positive BMI, BMR and TDEE"
                )
            if self.goal_calories <= 0:
                raise InvalidProfileDataError(
                    f"Goal calories must be positive, got {self.goal_calories}"
                )

    @property
    def state(self) -> OnboardingState:
        return OnboardingState.from_progress(
            self.current_onboarding_step, self.onboarding_completed
        )

    def has_body_stats(self) -> bool:
        """True when height, weight and age are all present."""
        return self.height_cm > 0 and self.weight_kg > 0 and self.age > 0

    def record_name_step(
        self, first_name: str, last_name: str, nickname: Optional[str] = None
    ) -> None:
        """Merge step 1 fields, leaving every other field untouched."""
        self.first_name = first_name.strip()
        self.last_name = last_name.strip()
        self.nickname = nickname.strip() if nickname and nickname.strip() else None
        self._touch_step(OnboardingStep.NAME)

    def record_stats_step(
        self,
        gender: Gender,
        height_cm: float,
        weight_kg: float,
        age: int,
        birth_date: Optional[date],
        activity_level: ActivityLevel,
    ) -> None:
        """Merge step 2 fields."""
        self.gender = gender
        self.height_cm = height_cm
        self.weight_kg = weight_kg
        self.age = age
        self.birth_date = birth_date
        self.activity_level = activity_level
        self._touch_step(OnboardingStep.STATS)

    def record_goals_step(self, target_weight_kg: float, weight_goal: WeightGoal) -> None:
        """Merge step 3 fields."""
        self.target_weight_kg = target_weight_kg
        self.weight_goal = weight_goal
        self._touch_step(OnboardingStep.GOALS)

    def apply_metrics(self, metrics: HealthMetrics) -> None:
        """Write derived metrics, rounding kcal values to whole numbers."""
        self.bmi_value = metrics.bmi.value
        self.bmi_status = metrics.bmi.status
        self.ideal_weight = metrics.ideal_weight
        self.bmr = to_kcal(metrics.bmr)
        self.tdee = to_kcal(metrics.tdee)
        self.goal_calories = to_kcal(metrics.goal_calories)
        self.updated_at = datetime.utcnow()

    def complete_onboarding(self, metrics: HealthMetrics) -> None:
        """Apply final metrics and mark the wizard as completed.

        Raises:
            InvalidProfileDataError: If the metrics are not all positive
        """
        self.apply_metrics(metrics)
        self.onboarding_completed = True
        self.current_onboarding_step = OnboardingStep.RESULTS.value
        self.validate_invariants()

    def revise_weight(self, weight_kg: float, metrics: HealthMetrics) -> None:
        """Replace the weight together with the metrics derived from it."""
        self.weight_kg = weight_kg
        self.apply_metrics(metrics)
        self.validate_invariants()

    def revise_goal(self, weight_goal: WeightGoal, metrics: HealthMetrics) -> None:
        """Replace the weight goal together with the metrics derived from it."""
        self.weight_goal = weight_goal
        self.apply_metrics(metrics)
        self.validate_invariants()

    def retire(self) -> None:
        """Logically retire the profile (owning account deactivated)."""
        if not self.active:
            return
        self.active = False
        self.updated_at = datetime.utcnow()

    def reinstate(self) -> None:
        """Undo retire() when the owning account is reactivated."""
        if self.active:
            return
        self.active = True
        self.updated_at = datetime.utcnow()

    def _touch_step(self, step: OnboardingStep) -> None:
        self.current_onboarding_step = step.value
        self.updated_at = datetime.utcnow()

    def __str__(self) -> str:
        return (
            f"HealthProfile {self.account_id} - step {self.current_onboarding_step} - "
            f"completed={self.onboarding_completed} - target {self.goal_calories} kcal"
        )
