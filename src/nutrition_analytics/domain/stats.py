"""Domain models for aggregated statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailySummary:
    """Nutrient totals for one calendar day."""

    day: date
    total_calories: float = 0.0
    total_protein_g: float = 0.0
    total_carbs_g: float = 0.0
    total_fat_g: float = 0.0
    total_fiber_g: float = 0.0
    total_sugar_g: float = 0.0
    total_sodium_mg: float = 0.0
    meal_count: int = 0


@dataclass(frozen=True)
class TrendPoint:
    """One day in a gap-filled trend series."""

    day: date
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    meal_count: int


@dataclass(frozen=True)
class MacroTotals:
    """Calorie and macro totals shared by trends and macro analysis."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class TrendSummary:
    """Window statistics for a trend."""

    total_days: int
    days_with_meals: int
    totals: MacroTotals
    averages: MacroTotals


@dataclass(frozen=True)
class Trend:
    """Gap-filled daily series with its summary."""

    start: date
    end: date
    points: list[TrendPoint]
    summary: TrendSummary


@dataclass(frozen=True)
class MacroBreakdown:
    """Calorie-weighted macro distribution."""

    protein_pct: int
    carbs_pct: int
    fat_pct: int
    calories_from_protein: float
    calories_from_carbs: float
    calories_from_fat: float

    @property
    def total_macro_calories(self) -> float:
        """Calories derived from macro grams."""
        return (
            self.calories_from_protein
            + self.calories_from_carbs
            + self.calories_from_fat
        )


@dataclass(frozen=True)
class MealTypeShare:
    """Meal slot usage over a window."""

    meal_type: str
    count: int
    percentage: int
    total_calories: int
    avg_calories: int
