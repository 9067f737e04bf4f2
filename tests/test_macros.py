"""Tests for macro distribution analysis."""

from datetime import UTC, date, datetime

import pytest

from nutrition_analytics.domain.stats import MacroTotals
from nutrition_analytics.services.macros import (
    MacroService,
    analyze_macros,
    period_window,
)
from tests.conftest import InMemoryMealRepository, make_meal


def test_analyze_macros_uses_calorie_factors() -> None:
    breakdown = analyze_macros(
        MacroTotals(calories=999, protein_g=30, carbs_g=50, fat_g=20)
    )

    assert breakdown.calories_from_protein == 120
    assert breakdown.calories_from_carbs == 200
    assert breakdown.calories_from_fat == 180
    assert breakdown.total_macro_calories == 500
    assert (breakdown.protein_pct, breakdown.carbs_pct, breakdown.fat_pct) == (
        24,
        40,
        36,
    )


@pytest.mark.parametrize(
    ("protein", "carbs", "fat"),
    [(10, 10, 10), (33, 71, 12.5), (1, 0, 0), (120, 260, 70), (7, 3, 2)],
)
def test_distribution_sums_to_about_100(protein, carbs, fat) -> None:
    breakdown = analyze_macros(
        MacroTotals(calories=0, protein_g=protein, carbs_g=carbs, fat_g=fat)
    )

    total = breakdown.protein_pct + breakdown.carbs_pct + breakdown.fat_pct
    assert 99 <= total <= 101


def test_distribution_is_zero_without_macros() -> None:
    breakdown = analyze_macros(
        MacroTotals(calories=500, protein_g=0, carbs_g=0, fat_g=0)
    )

    assert breakdown.protein_pct == 0
    assert breakdown.carbs_pct == 0
    assert breakdown.fat_pct == 0
    assert breakdown.total_macro_calories == 0


def test_period_window_week_starts_on_sunday() -> None:
    assert period_window(date(2024, 3, 13), "week") == (
        date(2024, 3, 10),
        date(2024, 3, 16),
    )
    assert period_window(date(2024, 3, 10), "week") == (
        date(2024, 3, 10),
        date(2024, 3, 16),
    )


def test_period_window_month_handles_leap_year() -> None:
    assert period_window(date(2024, 2, 10), "month") == (
        date(2024, 2, 1),
        date(2024, 2, 29),
    )


def test_macro_service_week_breakdown(user_id) -> None:
    repo = InMemoryMealRepository()
    repo.add(
        make_meal(
            user_id,
            datetime(2024, 3, 10, 9, tzinfo=UTC),
            calories=400,
            protein_g=25,
            carbs_g=25,
            fat_g=0,
        )
    )
    repo.add(
        make_meal(
            user_id,
            datetime(2024, 3, 16, 20, tzinfo=UTC),
            calories=300,
            protein_g=0,
            carbs_g=0,
            fat_g=0,
        )
    )
    repo.add(make_meal(user_id, datetime(2024, 3, 17, 9, tzinfo=UTC), calories=900))

    report = MacroService(repo).get_breakdown(user_id, date(2024, 3, 13), "week")

    assert report.period == "week"
    assert report.start == date(2024, 3, 10)
    assert report.end == date(2024, 3, 16)
    assert report.totals.total_calories == 700
    assert report.breakdown.protein_pct == 50
    assert report.breakdown.carbs_pct == 50
    assert report.breakdown.fat_pct == 0


def test_macro_service_unknown_period_is_day(user_id) -> None:
    report = MacroService(InMemoryMealRepository()).get_breakdown(
        user_id, date(2024, 3, 13), "decade"
    )

    assert report.period == "day"
    assert report.start == report.end == date(2024, 3, 13)
    assert report.totals.meal_count == 0


def test_half_percentages_round_up() -> None:
    breakdown = analyze_macros(
        MacroTotals(calories=0, protein_g=1, carbs_g=7, fat_g=0)
    )

    assert breakdown.protein_pct == 13
    assert breakdown.carbs_pct == 88
    assert breakdown.fat_pct == 0
