"""Unit tests for health profile value objects."""

import pytest

from domain.health_profile.core.value_objects import (
    ActivityLevel,
    Gender,
    OnboardingState,
    WeightGoal,
)


class TestGender:
    def test_parse_male_case_insensitive(self):
        assert Gender.parse(" MALE ") is Gender.MALE

    @pytest.mark.parametrize("label", ["female", "other", None, ""])
    def test_parse_falls_back_to_female(self, label):
        assert Gender.parse(label) is Gender.FEMALE


class TestActivityLevel:
    def test_parse_known_value(self):
        assert ActivityLevel.parse("light") is ActivityLevel.LIGHT

    def test_parse_veryactive(self):
        assert ActivityLevel.parse("veryactive") is ActivityLevel.VERY_ACTIVE

    def test_parse_default(self):
        assert ActivityLevel.parse(None) is ActivityLevel.MODERATE

    def test_every_level_has_description(self):
        for level in ActivityLevel:
            assert level.description()


class TestWeightGoal:
    def test_deltas_are_symmetric(self):
        assert WeightGoal.LOSE_1_KG.calorie_delta() == -WeightGoal.GAIN_1_KG.calorie_delta()
        assert WeightGoal.LOSE_0_5_KG.calorie_delta() == -WeightGoal.GAIN_0_5_KG.calorie_delta()

    def test_parse_by_value_and_name(self):
        assert WeightGoal.parse("lose_0.5kg") is WeightGoal.LOSE_0_5_KG
        assert WeightGoal.parse("gain_1_kg") is WeightGoal.GAIN_1_KG

    def test_parse_default(self):
        assert WeightGoal.parse("bulk") is WeightGoal.MAINTAIN


class TestOnboardingState:
    def test_state_from_progress(self):
        assert OnboardingState.from_progress(2, False) is OnboardingState.STEP2_STATS
        assert OnboardingState.from_progress(4, True) is OnboardingState.COMPLETED
