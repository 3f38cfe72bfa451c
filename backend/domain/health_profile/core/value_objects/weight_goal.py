"""WeightGoal value object - weekly weight change target."""

from enum import Enum
from typing import Union


class WeightGoal(str, Enum):
    """User's weekly weight goal with its fixed daily calorie delta."""

    LOSE_1_KG = "lose_1kg"
    LOSE_0_5_KG = "lose_0.5kg"
    LOSE_0_25_KG = "lose_0.25kg"
    MAINTAIN = "maintain"
    GAIN_0_25_KG = "gain_0.25kg"
    GAIN_0_5_KG = "gain_0.5kg"
    GAIN_1_KG = "gain_1kg"

    def calorie_delta(self) -> int:
        """Daily kcal adjustment applied to TDEE.

        Example:
            >>> WeightGoal.LOSE_0_5_KG.calorie_delta()
            -500
        """
        deltas = {
            WeightGoal.LOSE_1_KG: -1000,
            WeightGoal.LOSE_0_5_KG: -500,
            WeightGoal.LOSE_0_25_KG: -250,
            WeightGoal.MAINTAIN: 0,
            WeightGoal.GAIN_0_25_KG: 250,
            WeightGoal.GAIN_0_5_KG: 500,
            WeightGoal.GAIN_1_KG: 1000,
        }
        return deltas[self]

    @classmethod
    def parse(cls, label: Union["WeightGoal", str, None]) -> "WeightGoal":
        """Resolve a raw label, defaulting to MAINTAIN when unrecognized.

        Both values ("lose_0.5kg") and member names ("LOSE_0_5_KG") are
        accepted, case-insensitively.
        """
        if isinstance(label, WeightGoal):
            return label
        if label is None:
            return cls.MAINTAIN
        normalized = label.strip()
        for goal in cls:
            if normalized.lower() == goal.value or normalized.upper() == goal.name:
                return goal
        return cls.MAINTAIN
