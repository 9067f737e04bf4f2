"""Suggested daily targets from a user's body profile."""

from types import MappingProxyType

from nutrition_analytics.domain.users import UserProfile
from nutrition_analytics.services.rounding import round_half_up

ACTIVITY_MULTIPLIERS = MappingProxyType(
    {
        "sedentary": 1.2,
        "light": 1.375,
        "moderate": 1.55,
        "active": 1.725,
        "very-active": 1.9,
    }
)
DEFAULT_ACTIVITY_MULTIPLIER = 1.55

GOAL_ADJUSTMENTS = MappingProxyType(
    {
        "lose-weight": -500,
        "maintain": 0,
        "gain-weight": 300,
        "build-muscle": 400,
    }
)


def calculate_daily_calories(profile: UserProfile) -> int:
    """Mifflin-St Jeor estimate adjusted for activity and goal.

    Falls back to the configured calorie target when the profile lacks age,
    gender, height or weight.
    """
    if not (profile.age and profile.gender and profile.height_cm and profile.weight_kg):
        return round_half_up(profile.targets.calories)

    bmr = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age
    bmr += 5 if profile.gender == "male" else -161
    tdee = bmr * ACTIVITY_MULTIPLIERS.get(
        profile.activity_level, DEFAULT_ACTIVITY_MULTIPLIER
    )
    tdee += GOAL_ADJUSTMENTS.get(profile.goal, 0)
    return round_half_up(tdee)


def calculate_bmi(profile: UserProfile) -> float | None:
    """Body mass index rounded to one decimal, if height and weight are known."""
    if not profile.weight_kg or not profile.height_cm:
        return None
    height_m = profile.height_cm / 100
    return round_half_up(profile.weight_kg / (height_m * height_m) * 10) / 10
