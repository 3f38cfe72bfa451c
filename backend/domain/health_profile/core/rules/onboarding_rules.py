"""Field rules for each onboarding step.

Every function returns a ValidationResult; none of them raise on bad
input, so the wizard can re-display per-field messages.
"""

import math
from datetime import date
from typing import Optional

from domain.shared.validation import ValidationResult

MIN_HEIGHT_CM = 100.0
MAX_HEIGHT_CM = 250.0
MIN_WEIGHT_KG = 30.0
MAX_WEIGHT_KG = 300.0
MIN_AGE_YEARS = 13


def parse_number(raw: Optional[str]) -> Optional[float]:
    """Parse user-entered text as a finite float, None when it is not one."""
    if raw is None:
        return None
    try:
        value = float(str(raw).strip())
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def age_on(birth_date: date, today: date) -> int:
    """Completed years between birth_date and today."""
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def validate_name_step(first_name: str, last_name: str) -> ValidationResult:
    """Step 1: first and last name are required, nickname is optional."""
    result = ValidationResult()
    if not first_name or not first_name.strip():
        result.add("first_name", "First name is required")
    if not last_name or not last_name.strip():
        result.add("last_name", "Last name is required")
    return result


def validate_height(raw: Optional[str]) -> Optional[str]:
    height = parse_number(raw)
    if height is None:
        return "Enter valid height in cm"
    if height < MIN_HEIGHT_CM:
        return "Height must be at least 100 cm"
    if height > MAX_HEIGHT_CM:
        return "Height must be at most 250 cm"
    return None


def validate_weight(raw: Optional[str]) -> Optional[str]:
    weight = parse_number(raw)
    if weight is None:
        return "Enter valid weight in kg"
    if weight < MIN_WEIGHT_KG:
        return "Weight must be at least 30 kg"
    if weight > MAX_WEIGHT_KG:
        return "Weight must be at most 300 kg"
    return None


def validate_birth_date(birth_date: Optional[date], today: date) -> Optional[str]:
    """Reject missing, same-day and future dates, and ages under 13."""
    if birth_date is None:
        return "Please select your birth date"
    if birth_date >= today:
        return "Please enter a valid date"
    if age_on(birth_date, today) < MIN_AGE_YEARS:
        return "You must be at least 13 years old to use this app"
    return None


def validate_stats_step(
    height: Optional[str],
    weight: Optional[str],
    birth_date: Optional[date],
    today: date,
) -> ValidationResult:
    """Step 2: height 100-250 cm, weight 30-300 kg, age at least 13."""
    result = ValidationResult()
    for field_name, message in (
        ("height", validate_height(height)),
        ("weight", validate_weight(weight)),
        ("birth_date", validate_birth_date(birth_date, today)),
    ):
        if message is not None:
            result.add(field_name, message)
    return result


def validate_goals_step(target_weight: Optional[str]) -> ValidationResult:
    """Step 3: target weight must be a positive number."""
    result = ValidationResult()
    value = parse_number(target_weight)
    if value is None or value <= 0:
        result.add("target_weight", "Enter valid target weight in kg")
    return result
