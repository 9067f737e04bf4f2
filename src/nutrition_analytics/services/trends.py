"""Gap-filled daily trends."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, date, timedelta
from types import MappingProxyType
from uuid import UUID
from zoneinfo import ZoneInfo

from nutrition_analytics.domain.meals import MealRecord
from nutrition_analytics.domain.stats import (
    MacroTotals,
    Trend,
    TrendPoint,
    TrendSummary,
)
from nutrition_analytics.services.clock import day_bounds, local_day
from nutrition_analytics.services.meals import MealRepository
from nutrition_analytics.services.rounding import round_half_up

TREND_PERIODS = MappingProxyType({"7d": 7, "14d": 14, "30d": 30, "90d": 90})
DEFAULT_TREND_PERIOD = "7d"

_logger = logging.getLogger(__name__)


@dataclass
class TrendService:
    """Service for building daily trends over a window."""

    repository: MealRepository
    timezone_name: str = "UTC"
    debug: bool = False

    def build_trend(self, user_id: UUID, start: date, end: date) -> Trend:
        """Return one point per day in [start, end], zero-filled."""
        if end < start:
            raise ValueError("Trend end date must not precede start date")
        tz = ZoneInfo(self.timezone_name)
        range_start, _ = day_bounds(start, tz)
        _, range_end = day_bounds(end, tz)
        meals = self.repository.list_meals(
            user_id, range_start.astimezone(UTC), range_end.astimezone(UTC)
        )
        trend = build_trend(start, end, meals, tz)
        if self.debug:
            _logger.info(
                "Trend built: user_id=%s days=%s tracked=%s",
                user_id,
                trend.summary.total_days,
                trend.summary.days_with_meals,
            )
        return trend

    def build_period_trend(self, user_id: UUID, period: str, today: date) -> Trend:
        """Return the trend for a named period ending today."""
        days = TREND_PERIODS.get(period, TREND_PERIODS[DEFAULT_TREND_PERIOD])
        return self.build_trend(user_id, today - timedelta(days=days - 1), today)


def build_trend(
    start: date, end: date, meals: Iterable[MealRecord], tz: ZoneInfo
) -> Trend:
    """Group meals by day in one pass, then reconcile against every day."""
    groups = group_by_day(meals, tz)
    points = []
    for offset in range((end - start).days + 1):
        day = start + timedelta(days=offset)
        points.append(groups.get(day) or _empty_point(day))
    return Trend(start=start, end=end, points=points, summary=summarize_points(points))


def summarize_points(points: list[TrendPoint]) -> TrendSummary:
    """Totals over the window and averages over tracked days."""
    days_with_meals = sum(1 for point in points if point.meal_count > 0)
    totals = MacroTotals(
        calories=sum(point.calories for point in points),
        protein_g=sum(point.protein_g for point in points),
        carbs_g=sum(point.carbs_g for point in points),
        fat_g=sum(point.fat_g for point in points),
    )
    divisor = days_with_meals or 1
    averages = MacroTotals(
        calories=round_half_up(totals.calories / divisor),
        protein_g=round_half_up(totals.protein_g / divisor),
        carbs_g=round_half_up(totals.carbs_g / divisor),
        fat_g=round_half_up(totals.fat_g / divisor),
    )
    return TrendSummary(
        total_days=len(points),
        days_with_meals=days_with_meals,
        totals=totals,
        averages=averages,
    )


def group_by_day(
    meals: Iterable[MealRecord], tz: ZoneInfo
) -> dict[date, TrendPoint]:
    """Sum meals into one point per calendar day that has meals."""
    groups: dict[date, TrendPoint] = {}
    for meal in meals:
        day = local_day(meal.consumed_at, tz)
        current = groups.get(day) or _empty_point(day)
        groups[day] = TrendPoint(
            day=day,
            calories=current.calories + meal.calories,
            protein_g=current.protein_g + meal.protein_g,
            carbs_g=current.carbs_g + meal.carbs_g,
            fat_g=current.fat_g + meal.fat_g,
            meal_count=current.meal_count + 1,
        )
    return groups


def _empty_point(day: date) -> TrendPoint:
    return TrendPoint(
        day=day, calories=0, protein_g=0, carbs_g=0, fat_g=0, meal_count=0
    )
