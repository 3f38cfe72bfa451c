"""BmiStatus value object - BMI classification band."""

from enum import Enum


class BmiStatus(str, Enum):
    """BMI category.

    - UNDERWEIGHT: BMI < 18.5
    - NORMAL: 18.5 <= BMI < 25
    - OVERWEIGHT: 25 <= BMI < 30
    - OBESE: BMI >= 30
    """

    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"

    @classmethod
    def from_bmi(cls, bmi_value: float) -> "BmiStatus":
        if bmi_value < 18.5:
            return cls.UNDERWEIGHT
        elif bmi_value < 25.0:
            return cls.NORMAL
        elif bmi_value < 30.0:
            return cls.OVERWEIGHT
        else:
            return cls.OBESE
