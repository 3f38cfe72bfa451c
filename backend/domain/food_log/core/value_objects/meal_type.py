"""MealType value object."""

from enum import Enum


class MealType(str, Enum):
    """Meal a food log entry belongs to."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
