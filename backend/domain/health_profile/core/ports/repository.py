"""IHealthProfileRepository port - repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.health_profile import HealthProfile


class IHealthProfileRepository(ABC):
    """Port for health profile persistence, keyed by account id.

    Adapters raise PersistenceError when the underlying store fails.
    """

    @abstractmethod
    async def load_profile(self, account_id: str) -> Optional[HealthProfile]:
        """Load the profile owned by an account.

        Args:
            account_id: Account identifier

        Returns:
            Optional[HealthProfile]: Profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def save_profile(self, profile: HealthProfile) -> None:
        """Save profile (upsert by account id).

        Args:
            profile: Profile to save
        """
        pass

    @abstractmethod
    async def set_onboarding_step(self, account_id: str, step: int) -> None:
        """Persist only the current onboarding step.

        Args:
            account_id: Account identifier
            step: Step number (1-4)
        """
        pass

    @abstractmethod
    async def mark_onboarding_complete(self, account_id: str) -> None:
        """Persist only the onboarding-completed flag.

        Args:
            account_id: Account identifier
        """
        pass
