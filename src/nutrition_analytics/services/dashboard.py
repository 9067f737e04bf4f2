"""Dashboard views combining summaries, trends and recent meals."""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from uuid import UUID
from zoneinfo import ZoneInfo

from nutrition_analytics.domain.meals import MealRecord
from nutrition_analytics.domain.stats import DailySummary, MealTypeShare, TrendPoint
from nutrition_analytics.domain.users import DailyTargets, UserProfile
from nutrition_analytics.services.clock import day_bounds
from nutrition_analytics.services.meals import MealRepository
from nutrition_analytics.services.rounding import round_half_up
from nutrition_analytics.services.summary import SummaryService, aggregate_day
from nutrition_analytics.services.trends import group_by_day
from nutrition_analytics.services.users import UserRepository

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TodayOverview:
    """Today's consumption against targets."""

    day: date
    consumed: DailySummary
    targets: DailyTargets
    progress: dict[str, int]
    remaining: dict[str, float]


@dataclass(frozen=True)
class DayProgress:
    """Calories for one day of the weekly overview."""

    day: date
    calories: float
    target: float
    percentage: int
    meals_logged: int


@dataclass(frozen=True)
class WeeklyOverview:
    """Last seven days of calories against the daily target."""

    days: list[DayProgress]
    total_calories: float
    avg_calories_per_day: int
    total_meals: int
    days_tracked: int
    weekly_target: float
    weekly_progress: int


@dataclass(frozen=True)
class Dashboard:
    """Everything the dashboard screen needs in one response."""

    user: UserProfile
    today: DailySummary
    progress: dict[str, dict[str, float]]
    weekly_chart: list[TrendPoint]
    recent_meals: list[MealRecord]
    meal_types: list[MealTypeShare]


@dataclass
class DashboardService:
    """Service assembling dashboard views for a user."""

    meal_repository: MealRepository
    user_repository: UserRepository
    summary_service: SummaryService
    timezone_name: str = "UTC"
    recent_meals_limit: int = 5

    def get_today(self, user_id: UUID, now: datetime) -> TodayOverview | None:
        """Return today's totals, progress and remaining budget."""
        user = self.user_repository.get_user(user_id)
        if user is None:
            return None
        today = now.astimezone(self._tz()).date()
        summary = self.summary_service.summarize(user_id, today)
        targets = user.targets
        consumed = _consumed_by_nutrient(summary)
        goals = _targets_by_nutrient(targets)
        return TodayOverview(
            day=today,
            consumed=summary,
            targets=targets,
            progress={
                name: _percentage(consumed[name], goals[name]) for name in goals
            },
            remaining={name: max(0.0, goals[name] - consumed[name]) for name in goals},
        )

    def get_weekly_overview(
        self, user_id: UUID, now: datetime
    ) -> WeeklyOverview | None:
        """Return the last seven days (ending today) against the calorie target."""
        user = self.user_repository.get_user(user_id)
        if user is None:
            return None
        tz = self._tz()
        today = now.astimezone(tz).date()
        first_day = today - timedelta(days=6)
        meals = self._list_days(user_id, first_day, today)
        target = user.targets.calories
        days = []
        for offset in range(7):
            summary = aggregate_day(first_day + timedelta(days=offset), meals, tz)
            days.append(
                DayProgress(
                    day=summary.day,
                    calories=summary.total_calories,
                    target=target,
                    percentage=_percentage(summary.total_calories, target),
                    meals_logged=summary.meal_count,
                )
            )
        total_calories = sum(day.calories for day in days)
        days_tracked = sum(1 for day in days if day.meals_logged > 0)
        return WeeklyOverview(
            days=days,
            total_calories=total_calories,
            avg_calories_per_day=round_half_up(total_calories / (days_tracked or 1)),
            total_meals=sum(day.meals_logged for day in days),
            days_tracked=days_tracked,
            weekly_target=target * 7,
            weekly_progress=_percentage(total_calories, target * 7),
        )

    def get_meal_distribution(
        self, user_id: UUID, now: datetime, days: int = 7
    ) -> list[MealTypeShare]:
        """Return per-slot meal counts over the last ``days`` days."""
        today = now.astimezone(self._tz()).date()
        first_day = today - timedelta(days=max(days, 1) - 1)
        meals = self._list_days(user_id, first_day, today)
        return meal_type_distribution(meals)

    async def get_dashboard(self, user_id: UUID, now: datetime) -> Dashboard | None:
        """Return the combined dashboard, issuing independent reads concurrently."""
        tz = self._tz()
        today = now.astimezone(tz).date()
        week_start = today - timedelta(days=6)
        user, summary, week_meals, recent = await asyncio.gather(
            asyncio.to_thread(self.user_repository.get_user, user_id),
            asyncio.to_thread(self.summary_service.summarize, user_id, today),
            asyncio.to_thread(self._list_days, user_id, week_start, today),
            asyncio.to_thread(
                self.meal_repository.list_recent_meals,
                user_id,
                self.recent_meals_limit,
            ),
        )
        if user is None:
            return None
        _logger.debug(
            "Dashboard reads complete: user_id=%s week_meals=%s",
            user_id,
            len(week_meals),
        )
        chart = sorted(group_by_day(week_meals, tz).values(), key=lambda p: p.day)
        return Dashboard(
            user=user,
            today=summary,
            progress=_capped_progress(summary, user.targets),
            weekly_chart=chart,
            recent_meals=recent,
            meal_types=meal_type_distribution(week_meals),
        )

    def _list_days(self, user_id: UUID, first: date, last: date) -> list[MealRecord]:
        tz = self._tz()
        start, _ = day_bounds(first, tz)
        _, end = day_bounds(last, tz)
        return self.meal_repository.list_meals(
            user_id, start.astimezone(UTC), end.astimezone(UTC)
        )

    def _tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone_name)


def meal_type_distribution(meals: Iterable[MealRecord]) -> list[MealTypeShare]:
    """Count meals per slot, most frequent first."""
    counts: dict[str, int] = {}
    calories: dict[str, float] = {}
    for meal in meals:
        counts[meal.meal_type] = counts.get(meal.meal_type, 0) + 1
        calories[meal.meal_type] = calories.get(meal.meal_type, 0.0) + meal.calories
    total = sum(counts.values())
    shares = [
        MealTypeShare(
            meal_type=meal_type,
            count=count,
            percentage=_percentage(count, total),
            total_calories=round_half_up(calories[meal_type]),
            avg_calories=round_half_up(calories[meal_type] / count),
        )
        for meal_type, count in counts.items()
    ]
    return sorted(shares, key=lambda share: share.count, reverse=True)


def _capped_progress(
    summary: DailySummary, targets: DailyTargets
) -> dict[str, dict[str, float]]:
    consumed = _consumed_by_nutrient(summary)
    goals = _targets_by_nutrient(targets)
    progress: dict[str, dict[str, float]] = {}
    for name in ("calories", "protein", "carbs", "fat"):
        entry = {
            "consumed": consumed[name],
            "target": goals[name],
            "percentage": min(100, _percentage(consumed[name], goals[name])),
        }
        if name == "calories":
            entry["remaining"] = max(0.0, goals[name] - consumed[name])
        progress[name] = entry
    return progress


def _consumed_by_nutrient(summary: DailySummary) -> dict[str, float]:
    return {
        "calories": summary.total_calories,
        "protein": summary.total_protein_g,
        "carbs": summary.total_carbs_g,
        "fat": summary.total_fat_g,
        "fiber": summary.total_fiber_g,
    }


def _targets_by_nutrient(targets: DailyTargets) -> dict[str, float]:
    return {
        "calories": targets.calories,
        "protein": targets.protein_g,
        "carbs": targets.carbs_g,
        "fat": targets.fat_g,
        "fiber": targets.fiber_g,
    }


def _percentage(part: float, whole: float) -> int:
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)
