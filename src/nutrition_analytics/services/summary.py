"""Daily nutrition summaries."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, date
from uuid import UUID
from zoneinfo import ZoneInfo

from nutrition_analytics.domain.meals import MealRecord
from nutrition_analytics.domain.stats import DailySummary
from nutrition_analytics.services.clock import day_bounds, local_day
from nutrition_analytics.services.meals import MealRepository


@dataclass
class SummaryService:
    """Service for computing a user's totals for one day."""

    repository: MealRepository
    timezone_name: str = "UTC"

    def summarize(self, user_id: UUID, day: date) -> DailySummary:
        """Return the day's totals; an empty day yields zeros."""
        summary, _ = self.summarize_with_meals(user_id, day)
        return summary

    def summarize_with_meals(
        self, user_id: UUID, day: date
    ) -> tuple[DailySummary, list[MealRecord]]:
        """Return the day's totals and the meals behind them."""
        tz = ZoneInfo(self.timezone_name)
        start, end = day_bounds(day, tz)
        meals = self.repository.list_meals(
            user_id, start.astimezone(UTC), end.astimezone(UTC)
        )
        return aggregate_day(day, meals, tz), meals


def aggregate_day(
    day: date, meals: Iterable[MealRecord], tz: ZoneInfo
) -> DailySummary:
    """Sum the meals that fall on the given calendar day."""
    return aggregate_meals(
        day, (meal for meal in meals if local_day(meal.consumed_at, tz) == day)
    )


def aggregate_meals(day: date, meals: Iterable[MealRecord]) -> DailySummary:
    """Sum every meal into a single summary labelled with ``day``."""
    calories = protein = carbs = fat = fiber = sugar = sodium = 0.0
    count = 0
    for meal in meals:
        calories += meal.calories
        protein += meal.protein_g
        carbs += meal.carbs_g
        fat += meal.fat_g
        fiber += meal.fiber_g
        sugar += meal.sugar_g
        sodium += meal.sodium_mg
        count += 1
    return DailySummary(
        day=day,
        total_calories=calories,
        total_protein_g=protein,
        total_carbs_g=carbs,
        total_fat_g=fat,
        total_fiber_g=fiber,
        total_sugar_g=sugar,
        total_sodium_mg=sodium,
        meal_count=count,
    )
