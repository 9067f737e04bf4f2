"""Domain models for user profiles and targets."""

from dataclasses import dataclass, field
from uuid import UUID

GOALS = ("lose-weight", "maintain", "gain-weight", "build-muscle")
DIET_TYPES = ("none", "vegetarian", "vegan", "keto", "paleo", "mediterranean")
DEFAULT_GOAL = "maintain"


@dataclass(frozen=True)
class DailyTargets:
    """Per-day nutrient goals configured by the user."""

    calories: float = 2000
    protein_g: float = 50
    carbs_g: float = 250
    fat_g: float = 65
    fiber_g: float = 25
    water_glasses: float = 8


@dataclass(frozen=True)
class UserProfile:
    """User data the analytics engine reads."""

    id: UUID
    name: str
    targets: DailyTargets
    goal: str = DEFAULT_GOAL
    activity_level: str = "moderate"
    age: int | None = None
    gender: str | None = None
    height_cm: float | None = None
    weight_kg: float | None = None
    diet_type: str = "none"
    allergies: tuple[str, ...] = field(default_factory=tuple)
    disliked_foods: tuple[str, ...] = field(default_factory=tuple)
