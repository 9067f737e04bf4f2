"""Tests for dashboard views."""

import asyncio
from datetime import UTC, date, datetime, timedelta
from uuid import uuid4

from nutrition_analytics.services.dashboard import (
    DashboardService,
    meal_type_distribution,
)
from nutrition_analytics.services.summary import SummaryService
from tests.conftest import NOW, make_meal


def _service(meal_repository, user_repository, **kwargs) -> DashboardService:
    return DashboardService(
        meal_repository=meal_repository,
        user_repository=user_repository,
        summary_service=SummaryService(meal_repository),
        **kwargs,
    )


def test_today_progress_and_remaining(
    user_id, meal_repository, user_repository
) -> None:
    meal_repository.add(
        make_meal(
            user_id,
            NOW.replace(hour=8),
            calories=1000,
            protein_g=25,
            carbs_g=100,
            fat_g=30,
            fiber_g=5,
        )
    )

    today = _service(meal_repository, user_repository).get_today(user_id, NOW)

    assert today is not None
    assert today.day == date(2024, 3, 13)
    assert today.consumed.meal_count == 1
    assert today.progress == {
        "calories": 50,
        "protein": 50,
        "carbs": 40,
        "fat": 46,
        "fiber": 20,
    }
    assert today.remaining["calories"] == 1000
    assert today.remaining["fiber"] == 20


def test_today_overshoot_keeps_raw_progress(
    user_id, meal_repository, user_repository
) -> None:
    meal_repository.add(make_meal(user_id, NOW.replace(hour=8), calories=3000))

    today = _service(meal_repository, user_repository).get_today(user_id, NOW)

    assert today is not None
    assert today.progress["calories"] == 150
    assert today.remaining["calories"] == 0


def test_weekly_overview(user_id, meal_repository, user_repository) -> None:
    meal_repository.add(make_meal(user_id, NOW.replace(hour=8), calories=1800))
    meal_repository.add(make_meal(user_id, datetime(2024, 3, 10, 12, tzinfo=UTC)))
    meal_repository.add(make_meal(user_id, datetime(2024, 3, 10, 19, tzinfo=UTC)))
    meal_repository.add(make_meal(user_id, datetime(2024, 3, 6, 12, tzinfo=UTC)))

    overview = _service(meal_repository, user_repository).get_weekly_overview(
        user_id, NOW
    )

    assert overview is not None
    assert [day.day for day in overview.days] == [
        date(2024, 3, 7) + timedelta(days=offset) for offset in range(7)
    ]
    assert overview.days_tracked == 2
    assert overview.total_meals == 3
    assert overview.total_calories == 2800
    assert overview.avg_calories_per_day == 1400
    assert overview.weekly_target == 14000
    assert overview.weekly_progress == 20
    assert overview.days[-1].percentage == 90


def test_meal_type_distribution_sorted_by_count(user_id) -> None:
    meals = [
        make_meal(user_id, NOW, meal_type="lunch", calories=400),
        make_meal(user_id, NOW, meal_type="snack", calories=150),
        make_meal(user_id, NOW, meal_type="lunch", calories=600),
        make_meal(user_id, NOW, meal_type="lunch", calories=500),
    ]

    shares = meal_type_distribution(meals)

    assert [(s.meal_type, s.count, s.percentage) for s in shares] == [
        ("lunch", 3, 75),
        ("snack", 1, 25),
    ]
    assert shares[0].total_calories == 1500
    assert shares[0].avg_calories == 500


def test_meal_distribution_window(user_id, meal_repository, user_repository) -> None:
    meal_repository.add(make_meal(user_id, NOW, meal_type="dinner"))
    meal_repository.add(
        make_meal(user_id, NOW - timedelta(days=3), meal_type="breakfast")
    )

    service = _service(meal_repository, user_repository)

    assert [s.meal_type for s in service.get_meal_distribution(user_id, NOW, 1)] == [
        "dinner"
    ]
    assert len(service.get_meal_distribution(user_id, NOW, 7)) == 2


def test_dashboard_combines_views(user_id, meal_repository, user_repository) -> None:
    for offset in range(7):
        meal_repository.add(
            make_meal(
                user_id,
                NOW.replace(hour=8) - timedelta(days=offset * 2),
                calories=1200,
            )
        )
    meal_repository.add(make_meal(user_id, NOW.replace(hour=9), calories=1300))

    dashboard = asyncio.run(
        _service(meal_repository, user_repository, recent_meals_limit=3).get_dashboard(
            user_id, NOW
        )
    )

    assert dashboard is not None
    assert dashboard.user.id == user_id
    assert dashboard.today.total_calories == 2500
    assert dashboard.progress["calories"]["percentage"] == 100
    assert dashboard.progress["calories"]["remaining"] == 0
    assert "remaining" not in dashboard.progress["protein"]
    assert [point.day for point in dashboard.weekly_chart] == [
        date(2024, 3, 7),
        date(2024, 3, 9),
        date(2024, 3, 11),
        date(2024, 3, 13),
    ]
    assert len(dashboard.recent_meals) == 3
    assert dashboard.recent_meals[0].calories == 1300
    assert dashboard.meal_types[0].meal_type == "lunch"


def test_dashboard_unknown_user(meal_repository, user_repository) -> None:
    service = _service(meal_repository, user_repository)

    assert asyncio.run(service.get_dashboard(uuid4(), NOW)) is None
