"""Domain models for logged meals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")


@dataclass(frozen=True)
class MealRecord:
    """A single logged consumption event."""

    id: UUID
    user_id: UUID
    name: str
    meal_type: str
    consumed_at: datetime
    calories: float
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    fiber_g: float = 0.0
    sugar_g: float = 0.0
    sodium_mg: float = 0.0
    is_favorite: bool = False


def is_valid_meal_type(value: str) -> bool:
    """Return True when the value is a known meal slot."""
    return value in MEAL_TYPES
