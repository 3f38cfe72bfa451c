"""MongoDB implementation of IHealthProfileRepository."""

from datetime import datetime
from typing import Any, Dict, Optional

from domain.health_profile.core.entities.health_profile import HealthProfile
from domain.health_profile.core.exceptions.domain_errors import ProfileNotFoundError
from domain.health_profile.core.ports.repository import IHealthProfileRepository
from domain.health_profile.core.value_objects.activity_level import ActivityLevel
from domain.health_profile.core.value_objects.bmi_status import BmiStatus
from domain.health_profile.core.value_objects.gender import Gender
from domain.health_profile.core.value_objects.weight_goal import WeightGoal

from .base import MongoBaseRepository


class MongoHealthProfileRepository(
    MongoBaseRepository[HealthProfile],
    IHealthProfileRepository,
):
    """MongoDB implementation of health profile repository.

    One document per account, keyed by account id.
    """

    @property
    def collection_name(self) -> str:
        return "health_profiles"

    def to_document(self, entity: HealthProfile) -> Dict[str, Any]:
        profile = entity
        return {
            "_id": profile.account_id,
            "account_id": profile.account_id,
            "first_name": profile.first_name,
            "last_name": profile.last_name,
            "nickname": profile.nickname,
            "gender": profile.gender.value,
            "height_cm": profile.height_cm,
            "weight_kg": profile.weight_kg,
            "age": profile.age,
            "birth_date": self.date_to_str(profile.birth_date),
            "activity_level": profile.activity_level.value,
            "weight_goal": profile.weight_goal.value,
            "target_weight_kg": profile.target_weight_kg,
            "metrics": {
                "bmi_value": profile.bmi_value,
                "bmi_status": profile.bmi_status.value if profile.bmi_status else None,
                "ideal_weight": profile.ideal_weight,
                "bmr": profile.bmr,
                "tdee": profile.tdee,
                "goal_calories": profile.goal_calories,
            },
            "onboarding_completed": profile.onboarding_completed,
            "current_onboarding_step": profile.current_onboarding_step,
            "active": profile.active,
            "created_at": profile.created_at,
            "updated_at": profile.updated_at,
        }

    def from_document(self, doc: Dict[str, Any]) -> HealthProfile:
        metrics = doc.get("metrics", {})
        bmi_status = metrics.get("bmi_status")
        return HealthProfile(
            account_id=doc["account_id"],
            first_name=doc.get("first_name", ""),
            last_name=doc.get("last_name", ""),
            nickname=doc.get("nickname"),
            gender=Gender(doc["gender"]),
            height_cm=doc.get("height_cm", 0.0),
            weight_kg=doc.get("weight_kg", 0.0),
            age=doc.get("age", 0),
            birth_date=self.str_to_date(doc.get("birth_date")),
            activity_level=ActivityLevel(doc["activity_level"]),
            weight_goal=WeightGoal(doc["weight_goal"]),
            target_weight_kg=doc.get("target_weight_kg", 0.0),
            bmi_value=metrics.get("bmi_value", 0.0),
            bmi_status=BmiStatus(bmi_status) if bmi_status else None,
            ideal_weight=metrics.get("ideal_weight", 0.0),
            bmr=metrics.get("bmr", 0),
            tdee=metrics.get("tdee", 0),
            goal_calories=metrics.get("goal_calories", 0),
            onboarding_completed=doc.get("onboarding_completed", False),
            current_onboarding_step=doc.get("current_onboarding_step", 1),
            active=doc.get("active", True),
            created_at=doc["created_at"],
            updated_at=doc["updated_at"],
        )

    async def load_profile(self, account_id: str) -> Optional[HealthProfile]:
        doc = await self._find_one({"_id": account_id})
        return self.from_document(doc) if doc else None

    async def save_profile(self, profile: HealthProfile) -> None:
        await self._replace_one({"_id": profile.account_id}, self.to_document(profile))

    async def set_onboarding_step(self, account_id: str, step: int) -> None:
        profile = await self._require(account_id)
        profile.current_onboarding_step = step
        await self._set_fields(profile, {"current_onboarding_step": step})

    async def mark_onboarding_complete(self, account_id: str) -> None:
        profile = await self._require(account_id)
        profile.onboarding_completed = True
        await self._set_fields(profile, {"onboarding_completed": True})

    async def _require(self, account_id: str) -> HealthProfile:
        profile = await self.load_profile(account_id)
        if profile is None:
            raise ProfileNotFoundError(account_id)
        return profile

    async def _set_fields(self, profile: HealthProfile, fields: Dict[str, Any]) -> None:
        # Nothing is written unless the changed profile is still valid
        profile.validate_invariants()
        fields["updated_at"] = datetime.utcnow()
        matched = await self._update_one({"_id": profile.account_id}, {"$set": fields})
        if matched == 0:
            raise ProfileNotFoundError(profile.account_id)
