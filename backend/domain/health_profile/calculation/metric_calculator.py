"""MetricCalculator - BMI, BMR, TDEE, ideal weight and goal calories."""

from typing import Union

from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.bmi_status import BmiStatus
from ..core.value_objects.gender import Gender
from ..core.value_objects.health_metrics import BmiResult, HealthMetrics
from ..core.value_objects.weight_goal import WeightGoal

# Safety floor for any daily target, whatever goal is requested.
MIN_DAILY_CALORIES = 1200.0

# Midpoint of the normal BMI band.
IDEAL_BMI = 22.0


class MetricCalculator:
    """Pure, deterministic health metric calculations.

    Every method is total for well-formed numeric inputs and keeps full
    floating point precision, so chained calls (bmr -> tdee ->
    goal_calories) do not compound rounding error.

    BMR uses the Mifflin-St Jeor equation:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    Any gender other than male uses the female constant.

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    @staticmethod
    def bmr(
        weight_kg: float,
        height_cm: float,
        age_years: int,
        gender: Union[Gender, str],
    ) -> float:
        """Calculate Basal Metabolic Rate in kcal/day.

        Example:
            >>> MetricCalculator.bmr(60.0, 165.0, 30, Gender.FEMALE)
            1320.25
        """
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age_years
        if Gender.parse(gender) is Gender.MALE:
            return base + 5
        return base - 161

    @staticmethod
    def tdee(bmr: float, activity_level: Union[ActivityLevel, str]) -> float:
        """Calculate TDEE = BMR × PAL multiplier.

        Unrecognized activity labels use the moderate multiplier.
        """
        return bmr * ActivityLevel.parse(activity_level).pal_multiplier()

    @staticmethod
    def goal_calories(tdee: float, weight_goal: Union[WeightGoal, str]) -> float:
        """Apply the goal delta to TDEE, floored at MIN_DAILY_CALORIES.

        Example:
            >>> MetricCalculator.goal_calories(1500.0, WeightGoal.LOSE_1_KG)
            1200.0
        """
        target = tdee + WeightGoal.parse(weight_goal).calorie_delta()
        return max(target, MIN_DAILY_CALORIES)

    @staticmethod
    def bmi(weight_kg: float, height_cm: float) -> BmiResult:
        """Calculate BMI = weight / height(m)² with its band.

        A non-positive height yields a BMI of 0.0 instead of raising.
        """
        height_m = height_cm / 100.0
        if height_m <= 0:
            return BmiResult(value=0.0, status=BmiStatus.UNDERWEIGHT)
        value = weight_kg / (height_m**2)
        return BmiResult(value=value, status=BmiStatus.from_bmi(value))

    @staticmethod
    def ideal_weight(height_cm: float) -> float:
        """Weight (kg) at the ideal BMI for the given height."""
        height_m = height_cm / 100.0
        return IDEAL_BMI * (height_m**2)

    def calculate_all(
        self,
        weight_kg: float,
        height_cm: float,
        age_years: int,
        gender: Union[Gender, str],
        activity_level: Union[ActivityLevel, str],
        weight_goal: Union[WeightGoal, str],
    ) -> HealthMetrics:
        """Calculate every derived metric from one input set."""
        bmr = self.bmr(weight_kg, height_cm, age_years, gender)
        tdee = self.tdee(bmr, activity_level)
        return HealthMetrics(
            bmi=self.bmi(weight_kg, height_cm),
            ideal_weight=self.ideal_weight(height_cm),
            bmr=bmr,
            tdee=tdee,
            goal_calories=self.goal_calories(tdee, weight_goal),
        )
