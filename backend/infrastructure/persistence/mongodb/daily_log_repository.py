"""MongoDB implementation of IDailyLogRepository."""

from datetime import date
from typing import Any, Dict, Optional

from domain.food_log.core.entities.daily_log_entry import DailyLogEntry
from domain.food_log.core.ports.repository import IDailyLogRepository
from domain.food_log.core.value_objects.meal_type import MealType

from .base import MongoBaseRepository


class MongoDailyLogRepository(
    MongoBaseRepository[DailyLogEntry],
    IDailyLogRepository,
):
    """MongoDB implementation of the food log repository."""

    @property
    def collection_name(self) -> str:
        return "daily_logs"

    def to_document(self, entity: DailyLogEntry) -> Dict[str, Any]:
        return {
            "_id": entity.entry_id,
            "account_id": entity.account_id,
            "day": entity.day.isoformat(),
            "food_name": entity.food_name,
            "calories": entity.calories,
            "meal_type": entity.meal_type.value,
        }

    def from_document(self, doc: Dict[str, Any]) -> DailyLogEntry:
        return DailyLogEntry(
            entry_id=doc["_id"],
            account_id=doc["account_id"],
            day=date.fromisoformat(doc["day"]),
            food_name=doc["food_name"],
            calories=doc["calories"],
            meal_type=MealType(doc["meal_type"]),
        )

    async def add_entry(self, entry: DailyLogEntry) -> None:
        await self._insert_one(self.to_document(entry))

    async def list_entries(
        self, account_id: str, day: Optional[date] = None
    ) -> list[DailyLogEntry]:
        filter_dict: Dict[str, Any] = {"account_id": account_id}
        if day is not None:
            filter_dict["day"] = day.isoformat()
        docs = await self._find_many(filter_dict, sort=[("day", 1)])
        return [self.from_document(doc) for doc in docs]

    async def delete_all_entries(self, account_id: str) -> int:
        return await self._delete_many({"account_id": account_id})

    async def delete_entry(self, entry_id: str) -> bool:
        return await self._delete_one({"_id": entry_id}) > 0
