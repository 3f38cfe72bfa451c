"""Tests for OnboardingStateMachine."""

from datetime import date

import pytest
import pytest_asyncio

from application.health_profile.orchestrators import OnboardingForm, OnboardingStateMachine
from domain.health_profile.core.exceptions.domain_errors import (
    OnboardingAlreadyCompletedError,
    ProfileNotFoundError,
)
from domain.health_profile.core.factories.profile_factory import HealthProfileFactory
from domain.health_profile.core.value_objects import (
    ActivityLevel,
    Gender,
    OnboardingStep,
    WeightGoal,
)
from infrastructure.persistence.in_memory import InMemoryHealthProfileRepository

TODAY = date(2024, 6, 15)
ACCOUNT_ID = "acc-1"


@pytest_asyncio.fixture
async def repository():
    repo = InMemoryHealthProfileRepository()
    await repo.save_profile(HealthProfileFactory.create_default(ACCOUNT_ID))
    return repo


@pytest.fixture
def machine(repository):
    return OnboardingStateMachine(repository, today=lambda: TODAY)


@pytest.fixture
def form():
    return OnboardingForm(
        first_name="Jane",
        last_name="Doe",
        nickname="JD",
        gender=Gender.FEMALE,
        height="165",
        weight="60",
        birth_date=date(1994, 1, 10),
        activity_level=ActivityLevel.LIGHT,
        target_weight="55",
        weight_goal=WeightGoal.LOSE_0_5_KG,
    )


@pytest.mark.asyncio
async def test_commit_name_persists_step_one(machine, repository, form):
    result = await machine.commit_name(ACCOUNT_ID, form)

    assert result.succeeded
    stored = await repository.load_profile(ACCOUNT_ID)
    assert stored.first_name == "Jane"
    assert stored.nickname == "JD"
    assert stored.current_onboarding_step == 1


@pytest.mark.asyncio
async def test_invalid_step_returns_failures_without_writing(machine, repository, form):
    form.first_name = " "

    result = await machine.commit_name(ACCOUNT_ID, form)

    assert not result.succeeded
    assert result.failures.message_for("first_name") == "First name is required"
    stored = await repository.load_profile(ACCOUNT_ID)
    assert stored.first_name == ""


@pytest.mark.asyncio
async def test_resume_after_step_two_restores_fields(machine, form):
    await machine.commit_name(ACCOUNT_ID, form)
    await machine.commit_stats(ACCOUNT_ID, form)

    resumed = await machine.resume(ACCOUNT_ID)

    assert resumed.current_step == 2
    assert resumed.completed is False
    assert resumed.form.first_name == "Jane"
    assert resumed.form.last_name == "Doe"
    assert resumed.form.gender is Gender.FEMALE
    assert resumed.form.height == "165"
    assert resumed.form.weight == "60"
    assert resumed.form.birth_date == date(1994, 1, 10)
    assert resumed.form.activity_level is ActivityLevel.LIGHT
    # Step 3 fields untouched
    assert resumed.form.target_weight == ""
    assert resumed.form.weight_goal is WeightGoal.MAINTAIN


@pytest.mark.asyncio
async def test_resume_with_body_stats_recomputes_metrics(machine, form):
    await machine.commit_stats(ACCOUNT_ID, form)

    resumed = await machine.resume(ACCOUNT_ID)

    # age 30 on TODAY: 10*60 + 6.25*165 - 5*30 - 161
    assert resumed.metrics is not None
    assert resumed.metrics.bmr == 1320.25


@pytest.mark.asyncio
async def test_resume_without_body_stats_has_no_metrics(machine, form):
    await machine.commit_name(ACCOUNT_ID, form)

    resumed = await machine.resume(ACCOUNT_ID)

    assert resumed.metrics is None
    assert resumed.form.height == ""


@pytest.mark.asyncio
async def test_resume_unknown_account_raises(machine):
    with pytest.raises(ProfileNotFoundError):
        await machine.resume("missing")


@pytest.mark.asyncio
async def test_commit_stats_merges_without_clobbering_goals(machine, repository, form):
    await machine.commit_goals(ACCOUNT_ID, form)

    await machine.commit_stats(ACCOUNT_ID, form)

    stored = await repository.load_profile(ACCOUNT_ID)
    assert stored.target_weight_kg == 55.0
    assert stored.weight_goal is WeightGoal.LOSE_0_5_KG
    assert stored.age == 30
    assert stored.current_onboarding_step == 2


@pytest.mark.asyncio
async def test_stats_rejects_underage_birth_date(machine, form):
    form.birth_date = date(2012, 1, 1)

    result = await machine.commit_stats(ACCOUNT_ID, form)

    assert result.failures.message_for("birth_date") == (
        "You must be at least 13 years old to use this app"
    )


@pytest.mark.asyncio
async def test_finalize_completes_profile(machine, repository, form):
    result = await machine.finalize(ACCOUNT_ID, form)

    assert result.succeeded
    stored = await repository.load_profile(ACCOUNT_ID)
    assert stored.onboarding_completed is True
    assert stored.current_onboarding_step == 4
    # 1320.25 * 1.375 - 500 = 1315.34
    assert stored.bmr == 1320
    assert stored.goal_calories == 1315
    assert stored.first_name == "Jane"


@pytest.mark.asyncio
async def test_finalize_twice_is_idempotent(machine, repository, form):
    first = await machine.finalize(ACCOUNT_ID, form)
    first_profile = await repository.load_profile(ACCOUNT_ID)

    second = await machine.finalize(ACCOUNT_ID, form)
    second_profile = await repository.load_profile(ACCOUNT_ID)

    assert first.metrics == second.metrics
    assert first_profile.bmr == second_profile.bmr
    assert first_profile.tdee == second_profile.tdee
    assert first_profile.goal_calories == second_profile.goal_calories
    assert first_profile.bmi_value == second_profile.bmi_value


@pytest.mark.asyncio
async def test_finalize_completed_profile_with_new_inputs_raises(machine, repository, form):
    await machine.finalize(ACCOUNT_ID, form)
    form.weight = "80"

    with pytest.raises(OnboardingAlreadyCompletedError):
        await machine.finalize(ACCOUNT_ID, form)

    stored = await repository.load_profile(ACCOUNT_ID)
    assert stored.weight_kg == 60.0
    assert stored.goal_calories == 1315


@pytest.mark.asyncio
async def test_finalize_with_invalid_inputs_writes_nothing(machine, repository, form):
    form.height = "abc"

    result = await machine.finalize(ACCOUNT_ID, form)

    assert not result.succeeded
    assert result.failures.message_for("height") is not None
    stored = await repository.load_profile(ACCOUNT_ID)
    assert stored.onboarding_completed is False


@pytest.mark.asyncio
async def test_commit_after_completion_raises(machine, form):
    await machine.finalize(ACCOUNT_ID, form)

    with pytest.raises(OnboardingAlreadyCompletedError):
        await machine.commit_name(ACCOUNT_ID, form)


@pytest.mark.asyncio
async def test_resume_completed_returns_stored_metrics(machine, form):
    await machine.finalize(ACCOUNT_ID, form)

    resumed = await machine.resume(ACCOUNT_ID)

    assert resumed.completed is True
    assert resumed.metrics.bmr == 1320.0
    assert resumed.metrics.goal_calories == 1315.0


@pytest.mark.asyncio
async def test_advance_to_only_moves_forward(machine, repository):
    assert await machine.advance_to(ACCOUNT_ID, OnboardingStep.GOALS) is True
    assert await machine.advance_to(ACCOUNT_ID, OnboardingStep.STATS) is False

    stored = await repository.load_profile(ACCOUNT_ID)
    assert stored.current_onboarding_step == 3


@pytest.mark.asyncio
async def test_calculate_results_needs_body_stats(machine, form):
    form.weight = ""

    assert machine.calculate_results(form) is None


@pytest.mark.asyncio
async def test_validate_results_step_has_no_fields(machine):
    assert machine.validate_step(OnboardingStep.RESULTS, OnboardingForm()).is_valid
