"""Domain exceptions for health profile."""


class HealthProfileDomainError(Exception):
    """Base exception for health profile domain errors."""

    pass


class InvalidProfileDataError(HealthProfileDomainError):
    """Raised when a profile would violate its invariants."""

    pass


class ProfileNotFoundError(HealthProfileDomainError):
    """Raised when no profile exists for an account."""

    def __init__(self, account_id: str):
        super().__init__(f"Health profile not found for account: {account_id}")
        self.account_id = account_id


class OnboardingAlreadyCompletedError(HealthProfileDomainError):
    """Raised when an onboarding step is committed on a completed profile.

    Post-onboarding edits go through the profile revision flow so that
    derived metrics and the food log stay consistent.
    """

    def __init__(self, account_id: str):
        super().__init__(f"Onboarding already completed for account: {account_id}")
        self.account_id = account_id


class OnboardingNotCompletedError(HealthProfileDomainError):
    """Raised when a revision is attempted before onboarding finished."""

    def __init__(self, account_id: str):
        super().__init__(f"Onboarding not completed for account: {account_id}")
        self.account_id = account_id
