"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum
from typing import Union


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation.

    - SEDENTARY: Little or no exercise (office job)
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - ACTIVE: Hard exercise 6-7 days/week
    - VERY_ACTIVE: Very hard exercise + physical job
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    def pal_multiplier(self) -> float:
        """Get PAL (Physical Activity Level) multiplier.

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        multipliers = {
            ActivityLevel.SEDENTARY: 1.2,
            ActivityLevel.LIGHT: 1.375,
            ActivityLevel.MODERATE: 1.55,
            ActivityLevel.ACTIVE: 1.725,
            ActivityLevel.VERY_ACTIVE: 1.9,
        }
        return multipliers[self]

    def description(self) -> str:
        descriptions = {
            ActivityLevel.SEDENTARY: "Little or no exercise",
            ActivityLevel.LIGHT: "Light exercise 1-3 days/week",
            ActivityLevel.MODERATE: "Moderate exercise 3-5 days/week",
            ActivityLevel.ACTIVE: "Hard exercise 6-7 days/week",
            ActivityLevel.VERY_ACTIVE: "Very hard exercise + physical job",
        }
        return descriptions[self]

    @classmethod
    def parse(cls, label: Union["ActivityLevel", str, None]) -> "ActivityLevel":
        """Resolve a raw label, defaulting to MODERATE when unrecognized.

        Accepts "very active", "very-active" and "veryactive" spellings.

        Example:
            >>> ActivityLevel.parse("Very Active")
            <ActivityLevel.VERY_ACTIVE: 'very_active'>
            >>> ActivityLevel.parse("couch")
            <ActivityLevel.MODERATE: 'moderate'>
        """
        if isinstance(label, ActivityLevel):
            return label
        if label is None:
            return cls.MODERATE
        normalized = label.strip().lower().replace("-", "_").replace(" ", "_")
        if normalized == "veryactive":
            normalized = "very_active"
        try:
            return cls(normalized)
        except ValueError:
            return cls.MODERATE
