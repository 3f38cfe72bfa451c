"""OnboardingStateMachine - drives the four-step onboarding wizard."""

import logging
from copy import deepcopy
from dataclasses import replace
from datetime import date
from typing import Callable, Optional

from domain.health_profile.calculation.metric_calculator import MetricCalculator
from domain.health_profile.core.entities.health_profile import HealthProfile
from domain.health_profile.core.exceptions.domain_errors import (
    OnboardingAlreadyCompletedError,
    ProfileNotFoundError,
)
from domain.health_profile.core.ports.repository import IHealthProfileRepository
from domain.health_profile.core.rules.onboarding_rules import (
    age_on,
    parse_number,
    validate_goals_step,
    validate_name_step,
    validate_stats_step,
)
from domain.health_profile.core.value_objects.bmi_status import BmiStatus
from domain.health_profile.core.value_objects.health_metrics import (
    BmiResult,
    HealthMetrics,
)
from domain.health_profile.core.value_objects.onboarding_step import OnboardingStep
from domain.shared.validation import ValidationResult

from .onboarding_form import OnboardingForm, OnboardingStepResult, ResumedOnboarding

logger = logging.getLogger(__name__)


class OnboardingStateMachine:
    """
    Orchestrates the onboarding wizard.

    Flow:
    1. Name     - first/last name, optional nickname
    2. Stats    - gender, height, weight, birth date, activity level
    3. Goals    - target weight and weekly weight goal
    4. Results  - derived metrics; finalize() marks the profile completed

    Each commit merges only its own step's fields into the stored profile
    and records the step number. Validation failures are returned in the
    OnboardingStepResult, never raised.
    """

    def __init__(
        self,
        repository: IHealthProfileRepository,
        calculator: Optional[MetricCalculator] = None,
        today: Callable[[], date] = date.today,
    ):
        self._repository = repository
        self._calculator = calculator or MetricCalculator()
        self._today = today

    async def resume(self, account_id: str) -> ResumedOnboarding:
        """
        Load the stored profile and rebuild the wizard state from it.

        When height, weight and age are all present the metrics are
        recomputed so the results step shows current numbers.

        Raises:
            ProfileNotFoundError: If the account has no profile
        """
        profile = await self._load(account_id)

        if profile.onboarding_completed:
            return ResumedOnboarding(
                account_id=account_id,
                form=OnboardingForm.from_profile(profile),
                current_step=profile.current_onboarding_step,
                completed=True,
                metrics=self._stored_metrics(profile),
            )

        metrics = None
        if profile.has_body_stats():
            metrics = self._calculator.calculate_all(
                profile.weight_kg,
                profile.height_cm,
                profile.age,
                profile.gender,
                profile.activity_level,
                profile.weight_goal,
            )

        logger.debug(
            "Onboarding resumed",
            extra={
                "account_id": account_id,
                "step": profile.current_onboarding_step,
                "recomputed": metrics is not None,
            },
        )
        return ResumedOnboarding(
            account_id=account_id,
            form=OnboardingForm.from_profile(profile),
            current_step=profile.current_onboarding_step,
            completed=False,
            metrics=metrics,
        )

    def validate_step(self, step: OnboardingStep, form: OnboardingForm) -> ValidationResult:
        """Validate the fields of a single step; the results step has none."""
        if step is OnboardingStep.NAME:
            return validate_name_step(form.first_name, form.last_name)
        if step is OnboardingStep.STATS:
            return validate_stats_step(form.height, form.weight, form.birth_date, self._today())
        if step is OnboardingStep.GOALS:
            return validate_goals_step(form.target_weight)
        return ValidationResult()

    def validate_all(self, form: OnboardingForm) -> ValidationResult:
        result = ValidationResult()
        for step in (OnboardingStep.NAME, OnboardingStep.STATS, OnboardingStep.GOALS):
            result.merge(self.validate_step(step, form))
        return result

    async def commit_name(self, account_id: str, form: OnboardingForm) -> OnboardingStepResult:
        """Persist step 1 fields."""
        failures = self.validate_step(OnboardingStep.NAME, form)
        if not failures.is_valid:
            return OnboardingStepResult(step=OnboardingStep.NAME.value, failures=failures)

        profile = await self._load_incomplete(account_id)
        profile.record_name_step(form.first_name, form.last_name, form.nickname)
        return await self._save_step(profile, OnboardingStep.NAME)

    async def commit_stats(self, account_id: str, form: OnboardingForm) -> OnboardingStepResult:
        """Persist step 2 fields; age is derived from the birth date."""
        failures = self.validate_step(OnboardingStep.STATS, form)
        if not failures.is_valid:
            return OnboardingStepResult(step=OnboardingStep.STATS.value, failures=failures)

        profile = await self._load_incomplete(account_id)
        profile.record_stats_step(
            gender=form.gender,
            height_cm=self._number(form.height),
            weight_kg=self._number(form.weight),
            age=self._age(form),
            birth_date=form.birth_date,
            activity_level=form.activity_level,
        )
        return await self._save_step(profile, OnboardingStep.STATS)

    async def commit_goals(self, account_id: str, form: OnboardingForm) -> OnboardingStepResult:
        """Persist step 3 fields."""
        failures = self.validate_step(OnboardingStep.GOALS, form)
        if not failures.is_valid:
            return OnboardingStepResult(step=OnboardingStep.GOALS.value, failures=failures)

        profile = await self._load_incomplete(account_id)
        profile.record_goals_step(self._number(form.target_weight), form.weight_goal)
        return await self._save_step(profile, OnboardingStep.GOALS)

    def calculate_results(self, form: OnboardingForm) -> Optional[HealthMetrics]:
        """
        Compute the results-step metrics from the form.

        Returns:
            HealthMetrics, or None while height, weight or birth date is
            missing or unparseable
        """
        height = parse_number(form.height)
        weight = parse_number(form.weight)
        if height is None or weight is None or form.birth_date is None:
            return None
        return self._calculator.calculate_all(
            weight,
            height,
            self._age(form),
            form.gender,
            form.activity_level,
            form.weight_goal,
        )

    async def finalize(self, account_id: str, form: OnboardingForm) -> OnboardingStepResult:
        """
        Recompute every metric from the full input set and complete onboarding.

        Nothing is written when any step fails validation or a derived
        value is not positive. On a completed profile the call is only
        accepted when it reproduces the stored profile exactly; later
        changes go through ProfileRevisionController so the food log
        reset is not skipped.

        Raises:
            ProfileNotFoundError: If the account has no profile
            OnboardingAlreadyCompletedError: If the profile is completed and
                the inputs differ from the stored ones
        """
        step = OnboardingStep.RESULTS.value
        failures = self.validate_all(form)
        if not failures.is_valid:
            return OnboardingStepResult(step=step, failures=failures)

        metrics = self.calculate_results(form)
        if metrics is None or metrics.bmi.value <= 0 or metrics.goal_calories <= 0:
            failures.add("metrics", "Unable to calculate your health metrics")
            return OnboardingStepResult(step=step, failures=failures, metrics=metrics)

        stored = await self._load(account_id)
        profile = deepcopy(stored)
        profile.record_name_step(form.first_name, form.last_name, form.nickname)
        profile.record_stats_step(
            gender=form.gender,
            height_cm=self._number(form.height),
            weight_kg=self._number(form.weight),
            age=self._age(form),
            birth_date=form.birth_date,
            activity_level=form.activity_level,
        )
        profile.record_goals_step(self._number(form.target_weight), form.weight_goal)
        profile.complete_onboarding(metrics)

        if stored.onboarding_completed:
            if replace(profile, updated_at=stored.updated_at) != stored:
                raise OnboardingAlreadyCompletedError(account_id)
            return OnboardingStepResult(step=step, profile=stored, metrics=metrics)

        await self._repository.save_profile(profile)

        logger.info(
            "Onboarding completed",
            extra={
                "account_id": account_id,
                "bmr": profile.bmr,
                "tdee": profile.tdee,
                "goal_calories": profile.goal_calories,
            },
        )
        return OnboardingStepResult(step=step, profile=profile, metrics=metrics)

    async def advance_to(self, account_id: str, step: OnboardingStep) -> bool:
        """
        Record forward navigation; moving backward writes nothing.

        Returns:
            True if the stored step was moved forward
        """
        profile = await self._load(account_id)
        if profile.onboarding_completed or step.value <= profile.current_onboarding_step:
            return False
        await self._repository.set_onboarding_step(account_id, step.value)
        return True

    async def _load(self, account_id: str) -> HealthProfile:
        profile = await self._repository.load_profile(account_id)
        if profile is None:
            raise ProfileNotFoundError(account_id)
        return profile

    async def _load_incomplete(self, account_id: str) -> HealthProfile:
        profile = await self._load(account_id)
        if profile.onboarding_completed:
            raise OnboardingAlreadyCompletedError(account_id)
        return profile

    async def _save_step(
        self, profile: HealthProfile, step: OnboardingStep
    ) -> OnboardingStepResult:
        await self._repository.save_profile(profile)
        logger.info(
            "Onboarding step committed",
            extra={"account_id": profile.account_id, "step": step.value},
        )
        return OnboardingStepResult(step=step.value, profile=profile)

    def _age(self, form: OnboardingForm) -> int:
        if form.birth_date is None:
            return 0
        return age_on(form.birth_date, self._today())

    @staticmethod
    def _number(raw: str) -> float:
        value = parse_number(raw)
        return value if value is not None else 0.0

    @staticmethod
    def _stored_metrics(profile: HealthProfile) -> HealthMetrics:
        status = profile.bmi_status or BmiStatus.from_bmi(profile.bmi_value)
        return HealthMetrics(
            bmi=BmiResult(value=profile.bmi_value, status=status),
            ideal_weight=profile.ideal_weight,
            bmr=float(profile.bmr),
            tdee=float(profile.tdee),
            goal_calories=float(profile.goal_calories),
        )
