"""Tests for suggested calorie targets and BMI."""

import pytest

from nutrition_analytics.domain.users import DailyTargets
from nutrition_analytics.services.targets import calculate_bmi, calculate_daily_calories
from tests.conftest import make_profile


def _male(**overrides):
    values = {
        "age": 30,
        "gender": "male",
        "height_cm": 180,
        "weight_kg": 80,
        "activity_level": "moderate",
    }
    values.update(overrides)
    return make_profile(**values)


def test_mifflin_st_jeor_for_maintenance() -> None:
    assert calculate_daily_calories(_male()) == 2759


def test_goal_adjusts_calories() -> None:
    assert calculate_daily_calories(_male(goal="lose-weight")) == 2259
    assert calculate_daily_calories(_male(goal="build-muscle")) == 3159


def test_female_sedentary_gain() -> None:
    profile = make_profile(
        goal="gain-weight",
        age=25,
        gender="female",
        height_cm=165,
        weight_kg=60,
        activity_level="sedentary",
    )

    assert calculate_daily_calories(profile) == 1914


def test_unknown_activity_uses_moderate_multiplier() -> None:
    assert calculate_daily_calories(_male(activity_level="couch")) == 2759


def test_incomplete_profile_falls_back_to_target() -> None:
    profile = make_profile(targets=DailyTargets(calories=1850), age=30)

    assert calculate_daily_calories(profile) == 1850


@pytest.mark.parametrize(
    ("height_cm", "weight_kg", "expected"),
    [(180, 80, 24.7), (165, 60, 22.0), (None, 80, None), (180, None, None)],
)
def test_bmi(height_cm, weight_kg, expected) -> None:
    profile = make_profile(height_cm=height_cm, weight_kg=weight_kg)

    assert calculate_bmi(profile) == expected
