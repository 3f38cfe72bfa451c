"""Gender value object - selects the Mifflin-St Jeor sex constant."""

from enum import Enum
from typing import Union


class Gender(str, Enum):
    """Gender used by the BMR formula.

    Only "male" selects the male constant (+5). Every other label,
    including unrecognized ones, resolves to FEMALE (-161).
    """

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, label: Union["Gender", str, None]) -> "Gender":
        """Resolve a raw label to a Gender.

        Example:
            >>> Gender.parse("Male")
            <Gender.MALE: 'male'>
            >>> Gender.parse("other")
            <Gender.FEMALE: 'female'>
        """
        if isinstance(label, Gender):
            return label
        if label is not None and label.strip().lower() == "male":
            return cls.MALE
        return cls.FEMALE
