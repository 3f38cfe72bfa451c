"""In-memory form state for the onboarding wizard."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from domain.health_profile.core.entities.health_profile import HealthProfile
from domain.health_profile.core.value_objects.activity_level import ActivityLevel
from domain.health_profile.core.value_objects.gender import Gender
from domain.health_profile.core.value_objects.health_metrics import HealthMetrics
from domain.health_profile.core.value_objects.weight_goal import WeightGoal
from domain.shared.validation import ValidationResult


def _number_text(value: float) -> str:
    """Render a stored number back into form text; zero means "not entered"."""
    return f"{value:g}" if value > 0 else ""


@dataclass
class OnboardingForm:
    """Wizard inputs as the user typed them.

    Numeric fields stay raw text until validation so that bad input can be
    re-displayed with a field message.
    """

    first_name: str = ""
    last_name: str = ""
    nickname: str = ""
    gender: Gender = Gender.MALE
    height: str = ""
    weight: str = ""
    birth_date: Optional[date] = None
    activity_level: ActivityLevel = ActivityLevel.SEDENTARY
    target_weight: str = ""
    weight_goal: WeightGoal = WeightGoal.MAINTAIN

    @staticmethod
    def from_profile(profile: HealthProfile) -> "OnboardingForm":
        """Rebuild form state from whatever the stored profile already holds."""
        form = OnboardingForm(
            first_name=profile.first_name,
            last_name=profile.last_name,
            nickname=profile.nickname or "",
            height=_number_text(profile.height_cm),
            weight=_number_text(profile.weight_kg),
            birth_date=profile.birth_date,
            target_weight=_number_text(profile.target_weight_kg),
        )
        # Enum inputs only count once their step has been committed
        if profile.current_onboarding_step >= 2 or profile.onboarding_completed:
            form.gender = profile.gender
            form.activity_level = profile.activity_level
        if profile.current_onboarding_step >= 3 or profile.onboarding_completed:
            form.weight_goal = profile.weight_goal
        return form


@dataclass
class OnboardingStepResult:
    """Outcome of a step commit or finalization.

    Attributes:
        step: Wizard step the outcome belongs to (1-4)
        failures: Field failures; empty when the step was persisted
        profile: Stored profile after the write, None when nothing was written
        metrics: Metrics computed for the results step, when available
    """

    step: int
    failures: ValidationResult = field(default_factory=ValidationResult)
    profile: Optional[HealthProfile] = None
    metrics: Optional[HealthMetrics] = None

    @property
    def succeeded(self) -> bool:
        return self.failures.is_valid and self.profile is not None


@dataclass
class ResumedOnboarding:
    """State handed back to the wizard when a user returns."""

    account_id: str
    form: OnboardingForm
    current_step: int
    completed: bool
    metrics: Optional[HealthMetrics] = None
