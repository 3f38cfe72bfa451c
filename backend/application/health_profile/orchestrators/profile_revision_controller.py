"""ProfileRevisionController - post-onboarding weight and goal edits."""

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from domain.food_log.core.ports.repository import IDailyLogRepository
from domain.health_profile.calculation.metric_calculator import MetricCalculator
from domain.health_profile.core.entities.health_profile import HealthProfile
from domain.health_profile.core.exceptions.domain_errors import (
    OnboardingNotCompletedError,
    ProfileNotFoundError,
)
from domain.health_profile.core.ports.repository import IHealthProfileRepository
from domain.health_profile.core.rules.onboarding_rules import validate_weight
from domain.health_profile.core.value_objects.health_metrics import HealthMetrics
from domain.health_profile.core.value_objects.weight_goal import WeightGoal
from domain.shared.ports.transaction_manager import ITransactionManager
from domain.shared.validation import ValidationResult

logger = logging.getLogger(__name__)


@dataclass
class RevisionResult:
    """Result of a profile revision.

    Attributes:
        failures: Field failures; when present nothing was written
        profile: Updated profile
        deleted_entries: Food log entries removed by the reset
    """

    failures: ValidationResult = field(default_factory=ValidationResult)
    profile: Optional[HealthProfile] = None
    deleted_entries: int = 0

    @property
    def succeeded(self) -> bool:
        return self.failures.is_valid and self.profile is not None


class ProfileRevisionController:
    """
    Applies edits that change the caloric target of a completed profile.

    Every edit recomputes the derived metrics and clears the account's
    food log, since existing entries were recorded against the old target.

    With a transaction manager the profile write and the log reset commit
    together. Without one the log is cleared first so a failed profile
    write can never leave a new target next to stale entries.
    """

    def __init__(
        self,
        profiles: IHealthProfileRepository,
        logs: IDailyLogRepository,
        transaction_manager: Optional[ITransactionManager] = None,
        calculator: Optional[MetricCalculator] = None,
    ):
        self._profiles = profiles
        self._logs = logs
        self._transaction_manager = transaction_manager
        self._calculator = calculator or MetricCalculator()

    async def change_weight(
        self, account_id: str, new_weight: Union[float, str]
    ) -> RevisionResult:
        """
        Replace the weight, keeping height, age, gender, activity and goal.

        Raises:
            ProfileNotFoundError: If the account has no profile
            OnboardingNotCompletedError: If onboarding is not completed
        """
        failures = ValidationResult()
        message = validate_weight(str(new_weight))
        if message is not None:
            failures.add("weight", message)
            return RevisionResult(failures=failures)
        weight_kg = float(str(new_weight).strip())

        profile = await self._load_completed(account_id)
        metrics = self._recompute(profile, weight_kg=weight_kg)
        profile.revise_weight(weight_kg, metrics)

        deleted = await self._persist_with_reset(profile)
        logger.info(
            "Weight revised",
            extra={
                "account_id": account_id,
                "weight_kg": weight_kg,
                "goal_calories": profile.goal_calories,
                "deleted_entries": deleted,
            },
        )
        return RevisionResult(profile=profile, deleted_entries=deleted)

    async def change_goal(
        self, account_id: str, new_goal: Union[WeightGoal, str]
    ) -> RevisionResult:
        """
        Replace the weight goal; weight and BMR stay as they are.

        Raw labels are resolved like MetricCalculator does, unrecognized
        ones to MAINTAIN.

        Raises:
            ProfileNotFoundError: If the account has no profile
            OnboardingNotCompletedError: If onboarding is not completed
        """
        new_goal = WeightGoal.parse(new_goal)
        profile = await self._load_completed(account_id)
        metrics = self._recompute(profile, weight_goal=new_goal)
        profile.revise_goal(new_goal, metrics)

        deleted = await self._persist_with_reset(profile)
        logger.info(
            "Weight goal revised",
            extra={
                "account_id": account_id,
                "weight_goal": new_goal.value,
                "goal_calories": profile.goal_calories,
                "deleted_entries": deleted,
            },
        )
        return RevisionResult(profile=profile, deleted_entries=deleted)

    async def _load_completed(self, account_id: str) -> HealthProfile:
        profile = await self._profiles.load_profile(account_id)
        if profile is None:
            raise ProfileNotFoundError(account_id)
        if not profile.onboarding_completed:
            raise OnboardingNotCompletedError(account_id)
        return profile

    def _recompute(
        self,
        profile: HealthProfile,
        weight_kg: Optional[float] = None,
        weight_goal: Optional[WeightGoal] = None,
    ) -> HealthMetrics:
        return self._calculator.calculate_all(
            weight_kg if weight_kg is not None else profile.weight_kg,
            profile.height_cm,
            profile.age,
            profile.gender,
            profile.activity_level,
            weight_goal or profile.weight_goal,
        )

    async def _persist_with_reset(self, profile: HealthProfile) -> int:
        if self._transaction_manager is not None:
            async with self._transaction_manager.atomic():
                await self._profiles.save_profile(profile)
                return await self._logs.delete_all_entries(profile.account_id)

        deleted = await self._logs.delete_all_entries(profile.account_id)
        await self._profiles.save_profile(profile)
        return deleted
