"""DailyLogEntry entity - one food item logged by an account on a day."""

from dataclasses import dataclass
from datetime import date
from uuid import uuid4

from ..exceptions.log_errors import InvalidLogEntryError
from ..value_objects.meal_type import MealType


@dataclass(frozen=True)
class DailyLogEntry:
    """Food log entry.

    Entries are only ever created by the user and bulk-deleted when the
    owning account's caloric target changes.

    Attributes:
        entry_id: Unique entry identifier
        account_id: Owning account
        day: Calendar day the food was eaten
        food_name: Free-text food name (non-blank)
        calories: Energy in kcal (positive)
        meal_type: Breakfast, lunch, dinner or snack
    """

    entry_id: str
    account_id: str
    day: date
    food_name: str
    calories: int
    meal_type: MealType

    def __post_init__(self) -> None:
        if not self.account_id or not self.account_id.strip():
            raise InvalidLogEntryError("Account ID cannot be empty")
        if not self.food_name or not self.food_name.strip():
            raise InvalidLogEntryError("Food name cannot be empty")
        if self.calories <= 0:
            raise InvalidLogEntryError(f"Calories must be positive, got {self.calories}")

    @staticmethod
    def create(
        account_id: str,
        day: date,
        food_name: str,
        calories: int,
        meal_type: MealType,
    ) -> "DailyLogEntry":
        """Create a new entry with a generated id."""
        return DailyLogEntry(
            entry_id=str(uuid4()),
            account_id=account_id,
            day=day,
            food_name=food_name.strip(),
            calories=calories,
            meal_type=meal_type,
        )
