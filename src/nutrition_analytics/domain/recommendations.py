"""Domain models for recommendations and meal suggestions."""

from dataclasses import dataclass, field
from enum import IntEnum


class Priority(IntEnum):
    """Recommendation priority; higher sorts first."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3


class Category:
    """Recommendation categories."""

    CALORIE = "calorie"
    PROTEIN = "protein"
    FAT = "fat"
    HYDRATION = "hydration"
    MEAL_TIMING = "meal_timing"
    BALANCE = "balance"
    GOAL = "goal"


@dataclass(frozen=True)
class Recommendation:
    """A single actionable recommendation."""

    category: str
    priority: Priority
    title: str
    message: str
    action: str | None = None
    icon: str | None = None
    suggestions: tuple[str, ...] = ()
    details: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class MealTemplate:
    """Static catalog entry used for suggestions."""

    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    tags: tuple[str, ...]


@dataclass(frozen=True)
class MealSuggestion:
    """Catalog entry scored against the remaining budget."""

    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    tags: tuple[str, ...]
    match_score: int


@dataclass(frozen=True)
class RemainingBudget:
    """Target minus consumed, floored at zero."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class SuggestionResult:
    """Ranked suggestions for a meal slot."""

    meal_type: str
    remaining: RemainingBudget
    suggestions: list[MealSuggestion]


@dataclass(frozen=True)
class Insight:
    """One observation about the past week."""

    kind: str
    title: str
    message: str
    icon: str | None = None


@dataclass(frozen=True)
class WeeklyInsights:
    """Weekly averages and observations."""

    days_tracked: int
    avg_calories: int
    avg_protein_g: int
    avg_meals_per_day: int
    insights: list[Insight]
    message: str | None = None
