"""Tests for GetDailySummaryQueryHandler."""

from datetime import date

import pytest
import pytest_asyncio

from application.food_log.queries import GetDailySummaryQuery, GetDailySummaryQueryHandler
from domain.food_log.core.entities.daily_log_entry import DailyLogEntry
from domain.food_log.core.value_objects.meal_type import MealType
from domain.health_profile.core.exceptions.domain_errors import ProfileNotFoundError
from domain.health_profile.core.factories.profile_factory import HealthProfileFactory
from infrastructure.persistence.in_memory import (
    InMemoryDailyLogRepository,
    InMemoryHealthProfileRepository,
)

TODAY = date(2024, 6, 15)
ACCOUNT_ID = "acc-1"


@pytest_asyncio.fixture
async def profiles():
    repo = InMemoryHealthProfileRepository()
    profile = HealthProfileFactory.create_default(ACCOUNT_ID)
    profile.goal_calories = 2000
    await repo.save_profile(profile)
    return repo


@pytest.fixture
def logs():
    return InMemoryDailyLogRepository()


@pytest.fixture
def handler(profiles, logs):
    return GetDailySummaryQueryHandler(logs, profiles, today=lambda: TODAY)


async def log(logs, calories, day=TODAY, account_id=ACCOUNT_ID):
    await logs.add_entry(DailyLogEntry.create(account_id, day, "Meal", calories, MealType.LUNCH))


@pytest.mark.asyncio
async def test_sums_todays_entries(handler, logs):
    await log(logs, 500)
    await log(logs, 300)
    await log(logs, 900, day=date(2024, 6, 14))
    await log(logs, 700, account_id="acc-2")

    summary = await handler.handle(GetDailySummaryQuery(account_id=ACCOUNT_ID))

    assert summary.day == TODAY
    assert summary.goal_calories == 2000
    assert summary.consumed_calories == 800
    assert summary.remaining_calories == 1200
    assert summary.progress == pytest.approx(0.4)
    assert summary.entry_count == 2


@pytest.mark.asyncio
async def test_explicit_day(handler, logs):
    await log(logs, 900, day=date(2024, 6, 14))

    summary = await handler.handle(GetDailySummaryQuery(ACCOUNT_ID, day=date(2024, 6, 14)))

    assert summary.consumed_calories == 900


@pytest.mark.asyncio
async def test_over_goal_caps_progress_and_goes_negative(handler, logs):
    await log(logs, 1500)
    await log(logs, 1000)

    summary = await handler.handle(GetDailySummaryQuery(ACCOUNT_ID))

    assert summary.remaining_calories == -500
    assert summary.progress == 1.0


@pytest.mark.asyncio
async def test_no_goal_means_zero_progress(profiles, logs):
    await profiles.save_profile(HealthProfileFactory.create_default("fresh"))
    await log(logs, 400, account_id="fresh")
    handler = GetDailySummaryQueryHandler(logs, profiles, today=lambda: TODAY)

    summary = await handler.handle(GetDailySummaryQuery("fresh"))

    assert summary.goal_calories == 0
    assert summary.remaining_calories == -400
    assert summary.progress == 0.0


@pytest.mark.asyncio
async def test_empty_day(handler):
    summary = await handler.handle(GetDailySummaryQuery(ACCOUNT_ID))

    assert summary.consumed_calories == 0
    assert summary.remaining_calories == 2000
    assert summary.progress == 0.0
    assert summary.entries == []


@pytest.mark.asyncio
async def test_missing_profile_raises(handler):
    with pytest.raises(ProfileNotFoundError):
        await handler.handle(GetDailySummaryQuery("missing"))
