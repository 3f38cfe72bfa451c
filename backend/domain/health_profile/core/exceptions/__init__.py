"""Domain exceptions for health profile."""

from .domain_errors import (
    HealthProfileDomainError,
    InvalidProfileDataError,
    OnboardingAlreadyCompletedError,
    OnboardingNotCompletedError,
    ProfileNotFoundError,
)

__all__ = [
    "HealthProfileDomainError",
    "InvalidProfileDataError",
    "OnboardingAlreadyCompletedError",
    "OnboardingNotCompletedError",
    "ProfileNotFoundError",
]
