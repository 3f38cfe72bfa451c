"""In-memory implementation of IHealthProfileRepository."""

from copy import deepcopy
from datetime import datetime
from typing import Optional

from domain.health_profile.core.entities.health_profile import HealthProfile
from domain.health_profile.core.exceptions.domain_errors import ProfileNotFoundError
from domain.health_profile.core.ports.repository import IHealthProfileRepository


class InMemoryHealthProfileRepository(IHealthProfileRepository):
    """
    In-memory implementation of health profile repository.

    Uses a dictionary keyed by account id. Suitable for testing and
    development. Data is lost when the application stops.
    """

    def __init__(self) -> None:
        self._profiles: dict[str, HealthProfile] = {}

    async def load_profile(self, account_id: str) -> Optional[HealthProfile]:
        """
        Load profile by account id.

        Returns:
            Deep copy of profile if found, None otherwise
        """
        profile = self._profiles.get(account_id)
        return deepcopy(profile) if profile else None

    async def save_profile(self, profile: HealthProfile) -> None:
        # Deep copy to prevent external mutations
        self._profiles[profile.account_id] = deepcopy(profile)

    async def set_onboarding_step(self, account_id: str, step: int) -> None:
        profile = self._require(account_id)
        profile.current_onboarding_step = step
        self._store_validated(profile)

    async def mark_onboarding_complete(self, account_id: str) -> None:
        profile = self._require(account_id)
        profile.onboarding_completed = True
        self._store_validated(profile)

    def _require(self, account_id: str) -> HealthProfile:
        """Working copy of a stored profile."""
        profile = self._profiles.get(account_id)
        if profile is None:
            raise ProfileNotFoundError(account_id)
        return deepcopy(profile)

    def _store_validated(self, profile: HealthProfile) -> None:
        # Stored state only changes once the copy passes validation
        profile.validate_invariants()
        profile.updated_at = datetime.utcnow()
        self._profiles[profile.account_id] = profile

    def snapshot(self) -> dict[str, HealthProfile]:
        """Copy of the current state, for transaction rollback."""
        return deepcopy(self._profiles)

    def restore(self, state: dict[str, HealthProfile]) -> None:
        self._profiles = state

    def clear(self) -> None:
        """
        Clear all profiles from memory.

        Useful for test cleanup.
        """
        self._profiles.clear()

    def count(self) -> int:
        return len(self._profiles)
