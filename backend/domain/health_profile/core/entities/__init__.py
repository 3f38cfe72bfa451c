"""Entities for health profile domain."""

from .health_profile import HealthProfile, to_kcal

__all__ = ["HealthProfile", "to_kcal"]
