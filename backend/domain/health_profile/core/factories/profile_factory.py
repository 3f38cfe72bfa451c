"""HealthProfileFactory - factory for creating profiles."""

from ..entities.health_profile import HealthProfile
from ..value_objects.onboarding_step import OnboardingStep


class HealthProfileFactory:
    """Factory for creating HealthProfile entities."""

    @staticmethod
    def create_default(account_id: str) -> HealthProfile:
        """Create the empty profile attached to a freshly registered account.

        All inputs carry their defaults, derived metrics are zero and the
        wizard starts at step 1.

        Args:
            account_id: Owning account identifier

        Returns:
            HealthProfile: New profile, not yet persisted
        """
        return HealthProfile(
            account_id=account_id,
            onboarding_completed=False,
            current_onboarding_step=OnboardingStep.NAME.value,
        )
