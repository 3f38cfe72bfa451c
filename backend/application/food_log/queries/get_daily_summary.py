"""Get daily summary query - calories eaten against the daily goal."""

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Optional
import logging

from domain.food_log.core.entities.daily_log_entry import DailyLogEntry
from domain.food_log.core.ports.repository import IDailyLogRepository
from domain.health_profile.core.exceptions.domain_errors import ProfileNotFoundError
from domain.health_profile.core.ports.repository import IHealthProfileRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailySummary:
    """
    Dashboard totals for one account and day.

    Attributes:
        account_id: Owning account
        day: Day summarized
        goal_calories: Daily target from the health profile (0 if not set)
        consumed_calories: Sum of the day's logged entries
        remaining_calories: goal - consumed, negative when over target
        progress: consumed / goal clamped to [0, 1]; 0 when there is no goal
        entries: The day's entries, ordered as stored
    """

    account_id: str
    day: date
    goal_calories: int
    consumed_calories: int
    remaining_calories: int
    progress: float
    entries: list[DailyLogEntry] = field(default_factory=list)

    @property
    def entry_count(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class GetDailySummaryQuery:
    """
    Query: Get the dashboard summary for a day.

    Attributes:
        account_id: Account whose log is summarized
        day: Day to summarize (if None, defaults to today in handler)
    """

    account_id: str
    day: Optional[date] = None


class GetDailySummaryQueryHandler:
    """Handler for GetDailySummaryQuery."""

    def __init__(
        self,
        logs: IDailyLogRepository,
        profiles: IHealthProfileRepository,
        today: Callable[[], date] = date.today,
    ):
        self._logs = logs
        self._profiles = profiles
        self._today = today

    async def handle(self, query: GetDailySummaryQuery) -> DailySummary:
        """
        Execute query and compare the day's intake with the goal.

        Raises:
            ProfileNotFoundError: If the account has no profile
        """
        day = query.day or self._today()

        profile = await self._profiles.load_profile(query.account_id)
        if profile is None:
            raise ProfileNotFoundError(query.account_id)

        entries = await self._logs.list_entries(query.account_id, day)
        goal = max(profile.goal_calories, 0)
        consumed = sum(e.calories for e in entries)

        summary = DailySummary(
            account_id=query.account_id,
            day=day,
            goal_calories=goal,
            consumed_calories=consumed,
            remaining_calories=goal - consumed,
            progress=self.progress(consumed, goal),
            entries=entries,
        )

        logger.info(
            "Daily summary calculated",
            extra={
                "account_id": query.account_id,
                "day": day.isoformat(),
                "consumed_calories": consumed,
                "entry_count": len(entries),
            },
        )

        return summary

    @staticmethod
    def progress(consumed: int, goal: int) -> float:
        if goal <= 0:
            return 0.0
        return min(max(consumed / goal, 0.0), 1.0)
