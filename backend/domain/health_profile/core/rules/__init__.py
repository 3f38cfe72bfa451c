"""Validation rules for health profile inputs."""

from .onboarding_rules import (
    age_on,
    parse_number,
    validate_birth_date,
    validate_goals_step,
    validate_name_step,
    validate_stats_step,
)

__all__ = [
    "age_on",
    "parse_number",
    "validate_birth_date",
    "validate_goals_step",
    "validate_name_step",
    "validate_stats_step",
]
