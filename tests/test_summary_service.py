"""Tests for daily summaries."""

from datetime import UTC, date, datetime, timedelta
from uuid import uuid4

from nutrition_analytics.services.summary import SummaryService
from tests.conftest import InMemoryMealRepository, make_meal


def test_summarize_empty_day_returns_zeros(user_id) -> None:
    service = SummaryService(InMemoryMealRepository())

    summary = service.summarize(user_id, date(2024, 3, 13))

    assert summary.day == date(2024, 3, 13)
    assert summary.meal_count == 0
    assert summary.total_calories == 0
    assert summary.total_protein_g == 0
    assert summary.total_carbs_g == 0
    assert summary.total_fat_g == 0
    assert summary.total_fiber_g == 0
    assert summary.total_sugar_g == 0
    assert summary.total_sodium_mg == 0


def test_summarize_sums_only_that_day(user_id) -> None:
    repo = InMemoryMealRepository()
    day_start = datetime(2024, 3, 13, tzinfo=UTC)
    repo.add(make_meal(user_id, day_start, calories=300, protein_g=10))
    repo.add(
        make_meal(
            user_id, day_start + timedelta(hours=23, minutes=59), calories=450
        )
    )
    repo.add(make_meal(user_id, day_start - timedelta(minutes=1), calories=900))
    repo.add(make_meal(user_id, day_start + timedelta(days=1), calories=700))

    summary = SummaryService(repo).summarize(user_id, date(2024, 3, 13))

    assert summary.meal_count == 2
    assert summary.total_calories == 750
    assert summary.total_protein_g == 30
    assert summary.total_sodium_mg == 800


def test_summarize_ignores_other_users(user_id) -> None:
    repo = InMemoryMealRepository()
    repo.add(make_meal(uuid4(), datetime(2024, 3, 13, 9, tzinfo=UTC)))

    summary = SummaryService(repo).summarize(user_id, date(2024, 3, 13))

    assert summary.meal_count == 0


def test_summarize_uses_server_timezone_day_boundary(user_id) -> None:
    repo = InMemoryMealRepository()
    # 03:00 UTC is still the previous evening in New York.
    repo.add(make_meal(user_id, datetime(2024, 3, 13, 3, tzinfo=UTC), calories=400))

    service = SummaryService(repo, timezone_name="America/New_York")

    assert service.summarize(user_id, date(2024, 3, 12)).total_calories == 400
    assert service.summarize(user_id, date(2024, 3, 13)).meal_count == 0


def test_summarize_with_meals_returns_records(user_id) -> None:
    repo = InMemoryMealRepository()
    meal = repo.add(make_meal(user_id, datetime(2024, 3, 13, 8, tzinfo=UTC)))

    summary, meals = SummaryService(repo).summarize_with_meals(
        user_id, date(2024, 3, 13)
    )

    assert summary.meal_count == 1
    assert meals == [meal]
