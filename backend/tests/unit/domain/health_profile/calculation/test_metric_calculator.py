"""Unit tests for MetricCalculator."""

import pytest

from domain.health_profile.calculation.metric_calculator import (
    MIN_DAILY_CALORIES,
    MetricCalculator,
)
from domain.health_profile.core.value_objects import (
    ActivityLevel,
    BmiStatus,
    Gender,
    WeightGoal,
)


class TestBMR:
    """Test BMR calculation using Mifflin-St Jeor formula."""

    def test_bmr_male(self):
        # Expected: 10*80 + 6.25*180 - 5*30 + 5 = 1780
        assert MetricCalculator.bmr(80.0, 180.0, 30, Gender.MALE) == 1780.0

    def test_bmr_female(self):
        # Expected: 10*60 + 6.25*165 - 5*30 - 161 = 1320.25
        assert MetricCalculator.bmr(60.0, 165.0, 30, Gender.FEMALE) == 1320.25

    def test_bmr_accepts_raw_labels_case_insensitively(self):
        assert MetricCalculator.bmr(80.0, 180.0, 30, "MALE") == 1780.0
        assert MetricCalculator.bmr(60.0, 165.0, 30, "female") == 1320.25

    @pytest.mark.parametrize("label", ["other", "", "unknown", "m"])
    def test_unrecognized_gender_uses_female_formula(self, label):
        expected = MetricCalculator.bmr(60.0, 165.0, 30, Gender.FEMALE)

        assert MetricCalculator.bmr(60.0, 165.0, 30, label) == expected

    def test_sex_constant_difference(self):
        male = MetricCalculator.bmr(70.0, 170.0, 40, Gender.MALE)
        female = MetricCalculator.bmr(70.0, 170.0, 40, Gender.FEMALE)

        assert male - female == 166.0


class TestTDEE:
    @pytest.mark.parametrize(
        "level,multiplier",
        [
            (ActivityLevel.SEDENTARY, 1.2),
            (ActivityLevel.LIGHT, 1.375),
            (ActivityLevel.MODERATE, 1.55),
            (ActivityLevel.ACTIVE, 1.725),
            (ActivityLevel.VERY_ACTIVE, 1.9),
        ],
    )
    def test_tdee_multipliers(self, level, multiplier):
        assert MetricCalculator.tdee(1000.0, level) == pytest.approx(1000.0 * multiplier)

    def test_unrecognized_activity_uses_moderate(self):
        assert MetricCalculator.tdee(1000.0, "marathon") == pytest.approx(1550.0)

    def test_very_active_spellings(self):
        assert MetricCalculator.tdee(1000.0, "very-active") == pytest.approx(1900.0)
        assert MetricCalculator.tdee(1000.0, "Very Active") == pytest.approx(1900.0)


class TestGoalCalories:
    def test_maintain_keeps_tdee(self):
        assert MetricCalculator.goal_calories(2500.0, WeightGoal.MAINTAIN) == 2500.0

    def test_deltas_applied(self):
        assert MetricCalculator.goal_calories(2500.0, WeightGoal.LOSE_0_5_KG) == 2000.0
        assert MetricCalculator.goal_calories(2500.0, WeightGoal.GAIN_1_KG) == 3500.0
        assert MetricCalculator.goal_calories(2500.0, WeightGoal.LOSE_0_25_KG) == 2250.0

    def test_floor_applies_to_aggressive_deficit(self):
        assert MetricCalculator.goal_calories(1500.0, WeightGoal.LOSE_1_KG) == MIN_DAILY_CALORIES

    def test_unrecognized_goal_uses_maintain(self):
        assert MetricCalculator.goal_calories(2100.0, "shred") == 2100.0

    def test_goal_calories_never_below_floor_across_valid_inputs(self):
        """Every valid input combination stays at or above 1200 kcal."""
        for weight in (30.0, 45.0, 70.0, 120.0, 300.0):
            for height in (100.0, 150.0, 175.0, 250.0):
                for age in (13, 40, 90):
                    for gender in ("male", "female", "nonbinary"):
                        bmr = MetricCalculator.bmr(weight, height, age, gender)
                        for level in ActivityLevel:
                            tdee = MetricCalculator.tdee(bmr, level)
                            for goal in WeightGoal:
                                assert MetricCalculator.goal_calories(tdee, goal) >= 1200


class TestBMIAndIdealWeight:
    def test_bmi_normal(self):
        result = MetricCalculator.bmi(70.0, 175.0)

        assert result.value == pytest.approx(22.857, abs=0.001)
        assert result.status == BmiStatus.NORMAL

    @pytest.mark.parametrize(
        "bmi,status",
        [
            (18.49, BmiStatus.UNDERWEIGHT),
            (18.5, BmiStatus.NORMAL),
            (24.99, BmiStatus.NORMAL),
            (25.0, BmiStatus.OVERWEIGHT),
            (29.99, BmiStatus.OVERWEIGHT),
            (30.0, BmiStatus.OBESE),
        ],
    )
    def test_bmi_band_boundaries(self, bmi, status):
        assert BmiStatus.from_bmi(bmi) == status

    def test_bmi_with_zero_height_does_not_raise(self):
        result = MetricCalculator.bmi(70.0, 0.0)

        assert result.value == 0.0

    def test_ideal_weight(self):
        assert MetricCalculator.ideal_weight(175.0) == pytest.approx(67.375)


class TestCalculateAll:
    def test_full_chain(self):
        metrics = MetricCalculator().calculate_all(
            80.0, 180.0, 30, Gender.MALE, ActivityLevel.MODERATE, WeightGoal.LOSE_0_5_KG
        )

        assert metrics.bmr == 1780.0
        assert metrics.tdee == pytest.approx(2759.0)
        assert metrics.goal_calories == pytest.approx(2259.0)
        assert metrics.is_complete()

    def test_same_inputs_give_identical_metrics(self):
        calculator = MetricCalculator()
        args = (63.4, 171.3, 27, Gender.FEMALE, ActivityLevel.LIGHT, WeightGoal.GAIN_0_25_KG)

        assert calculator.calculate_all(*args) == calculator.calculate_all(*args)
