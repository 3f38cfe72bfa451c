"""Health profile orchestrators."""

from .onboarding_form import OnboardingForm, OnboardingStepResult, ResumedOnboarding
from .onboarding_state_machine import OnboardingStateMachine
from .profile_revision_controller import ProfileRevisionController, RevisionResult

__all__ = [
    "OnboardingForm",
    "OnboardingStateMachine",
    "OnboardingStepResult",
    "ProfileRevisionController",
    "ResumedOnboarding",
    "RevisionResult",
]
