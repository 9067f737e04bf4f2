"""Macro-nutrient distribution analysis."""

import calendar
from dataclasses import dataclass
from datetime import UTC, date, timedelta
from types import MappingProxyType
from uuid import UUID
from zoneinfo import ZoneInfo

from nutrition_analytics.domain.stats import DailySummary, MacroBreakdown, MacroTotals
from nutrition_analytics.services.clock import day_bounds
from nutrition_analytics.services.meals import MealRepository
from nutrition_analytics.services.rounding import round_half_up
from nutrition_analytics.services.summary import aggregate_meals

# kcal per gram
MACRO_CALORIES_PER_GRAM = MappingProxyType({"protein": 4, "carbs": 4, "fat": 9})
MACRO_PERIODS = ("day", "week", "month")


@dataclass(frozen=True)
class MacroReport:
    """Macro breakdown over a calendar period."""

    period: str
    start: date
    end: date
    totals: DailySummary
    breakdown: MacroBreakdown


@dataclass
class MacroService:
    """Service for macro breakdowns by day, week or month."""

    repository: MealRepository
    timezone_name: str = "UTC"

    def get_breakdown(self, user_id: UUID, anchor: date, period: str) -> MacroReport:
        """Return totals and macro distribution for the period around anchor."""
        resolved = period if period in MACRO_PERIODS else "day"
        start, end = period_window(anchor, resolved)
        tz = ZoneInfo(self.timezone_name)
        range_start, _ = day_bounds(start, tz)
        _, range_end = day_bounds(end, tz)
        meals = self.repository.list_meals(
            user_id, range_start.astimezone(UTC), range_end.astimezone(UTC)
        )
        totals = aggregate_meals(start, meals)
        return MacroReport(
            period=resolved,
            start=start,
            end=end,
            totals=totals,
            breakdown=analyze_macros(
                MacroTotals(
                    calories=totals.total_calories,
                    protein_g=totals.total_protein_g,
                    carbs_g=totals.total_carbs_g,
                    fat_g=totals.total_fat_g,
                )
            ),
        )


def analyze_macros(totals: MacroTotals) -> MacroBreakdown:
    """Convert macro grams to calories and their percentage split.

    The logged ``calories`` value is not used: macro-derived calories and
    logged calories can diverge, and callers surface both.
    """
    from_protein = totals.protein_g * MACRO_CALORIES_PER_GRAM["protein"]
    from_carbs = totals.carbs_g * MACRO_CALORIES_PER_GRAM["carbs"]
    from_fat = totals.fat_g * MACRO_CALORIES_PER_GRAM["fat"]
    total = from_protein + from_carbs + from_fat
    return MacroBreakdown(
        protein_pct=_share(from_protein, total),
        carbs_pct=_share(from_carbs, total),
        fat_pct=_share(from_fat, total),
        calories_from_protein=from_protein,
        calories_from_carbs=from_carbs,
        calories_from_fat=from_fat,
    )


def period_window(anchor: date, period: str) -> tuple[date, date]:
    """Return the inclusive day range for a period containing anchor.

    Weeks start on Sunday.
    """
    if period == "week":
        start = anchor - timedelta(days=(anchor.weekday() + 1) % 7)
        return start, start + timedelta(days=6)
    if period == "month":
        last_day = calendar.monthrange(anchor.year, anchor.month)[1]
        return anchor.replace(day=1), anchor.replace(day=last_day)
    return anchor, anchor


def _share(part: float, total: float) -> int:
    if total <= 0:
        return 0
    return round_half_up(part / total * 100)
