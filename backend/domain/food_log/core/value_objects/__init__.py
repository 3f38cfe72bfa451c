"""Value objects for food log domain."""

from .meal_type import MealType

__all__ = ["MealType"]
