"""Weekly eating-pattern insights."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID
from zoneinfo import ZoneInfo

from nutrition_analytics.domain.meals import MealRecord
from nutrition_analytics.domain.recommendations import Insight, WeeklyInsights
from nutrition_analytics.domain.users import DailyTargets
from nutrition_analytics.services.meals import MealRepository
from nutrition_analytics.services.rounding import round_half_up
from nutrition_analytics.services.trends import group_by_day
from nutrition_analytics.services.users import UserRepository

NOT_ENOUGH_DATA = "Not enough data for weekly insights. Keep logging your meals!"


@dataclass
class WeeklyInsightService:
    """Summarizes the past seven days into observations."""

    meal_repository: MealRepository
    user_repository: UserRepository
    timezone_name: str = "UTC"

    def get_insights(self, user_id: UUID, now: datetime) -> WeeklyInsights | None:
        """Return weekly insights, or None for unknown users."""
        user = self.user_repository.get_user(user_id)
        if user is None:
            return None
        tz = ZoneInfo(self.timezone_name)
        local_now = now.astimezone(tz)
        week_start = (local_now - timedelta(days=7)).replace(
            hour=0, minute=0, second=0, microsecond=0
        )
        meals = self.meal_repository.list_meals(
            user_id, week_start.astimezone(UTC), local_now.astimezone(UTC)
        )
        return build_weekly_insights(meals, user.targets, tz)


def build_weekly_insights(
    meals: Iterable[MealRecord], targets: DailyTargets, tz: ZoneInfo
) -> WeeklyInsights:
    """Average tracked days and derive insights against targets."""
    days = list(group_by_day(meals, tz).values())
    tracked = len(days)
    if tracked == 0:
        return WeeklyInsights(
            days_tracked=0,
            avg_calories=0,
            avg_protein_g=0,
            avg_meals_per_day=0,
            insights=[],
            message=NOT_ENOUGH_DATA,
        )

    avg_calories = round_half_up(sum(day.calories for day in days) / tracked)
    avg_protein = round_half_up(sum(day.protein_g for day in days) / tracked)
    avg_meals = round_half_up(sum(day.meal_count for day in days) / tracked)
    insights: list[Insight] = []

    if abs(avg_calories - targets.calories) <= targets.calories * 0.1:
        insights.append(
            Insight(
                kind="positive",
                title="Consistent Calorie Intake",
                message=f"You averaged {avg_calories} calories/day, right on target!",
                icon="🎯",
            )
        )
    elif avg_calories < targets.calories * 0.8:
        insights.append(
            Insight(
                kind="warning",
                title="Under-eating Trend",
                message=(
                    f"You averaged {avg_calories} calories/day, below your "
                    f"{targets.calories:.0f} target."
                ),
                icon="⚠️",
            )
        )

    if avg_protein >= targets.protein_g * 0.9:
        insights.append(
            Insight(
                kind="positive",
                title="Great Protein Intake",
                message=f"Averaged {avg_protein}g protein daily - well done!",
                icon="💪",
            )
        )

    if tracked >= 6:
        insights.append(
            Insight(
                kind="positive",
                title="Excellent Consistency",
                message=f"You tracked meals on {tracked}/7 days this week!",
                icon="🌟",
            )
        )
    elif tracked <= 3:
        insights.append(
            Insight(
                kind="suggestion",
                title="Track More Consistently",
                message="Try to log meals every day for better insights and progress.",
                icon="📝",
            )
        )

    if avg_meals < 3:
        insights.append(
            Insight(
                kind="suggestion",
                title="Low Meal Frequency",
                message=(
                    "Consider spreading calories across 3-4 meals for better energy."
                ),
                icon="🍽️",
            )
        )

    return WeeklyInsights(
        days_tracked=tracked,
        avg_calories=avg_calories,
        avg_protein_g=avg_protein,
        avg_meals_per_day=avg_meals,
        insights=insights,
    )
