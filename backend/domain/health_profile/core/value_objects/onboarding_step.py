"""Onboarding wizard steps and states."""

from enum import Enum, IntEnum


class OnboardingStep(IntEnum):
    """The four onboarding wizard steps, numbered as persisted."""

    NAME = 1
    STATS = 2
    GOALS = 3
    RESULTS = 4


class OnboardingState(str, Enum):
    """State of the onboarding state machine.

    Linear: STEP1_NAME -> STEP2_STATS -> STEP3_GOALS -> STEP4_RESULTS
    -> COMPLETED (terminal).
    """

    STEP1_NAME = "step1_name"
    STEP2_STATS = "step2_stats"
    STEP3_GOALS = "step3_goals"
    STEP4_RESULTS = "step4_results"
    COMPLETED = "completed"

    @classmethod
    def from_progress(cls, current_step: int, completed: bool) -> "OnboardingState":
        """Derive the state from persisted progress fields."""
        if completed:
            return cls.COMPLETED
        states = {
            OnboardingStep.NAME: cls.STEP1_NAME,
            OnboardingStep.STATS: cls.STEP2_STATS,
            OnboardingStep.GOALS: cls.STEP3_GOALS,
            OnboardingStep.RESULTS: cls.STEP4_RESULTS,
        }
        return states[OnboardingStep(current_step)]
