"""Supabase-backed user profile repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrition_analytics.domain.users import (
    DEFAULT_GOAL,
    DIET_TYPES,
    GOALS,
    DailyTargets,
    UserProfile,
)
from nutrition_analytics.services.users import UserRepository

_USER_COLUMNS = (
    "id, name, goal, activity_level, age, gender, height_cm, weight_kg, "
    "diet_type, allergies, disliked_foods, target_calories, target_protein_g, "
    "target_carbs_g, target_fat_g, target_fiber_g, target_water_glasses"
)


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user profile reads."""

    client: Client

    def get_user(self, user_id: UUID) -> UserProfile | None:
        """Return the user profile with daily targets, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserProfile:
    defaults = DailyTargets()
    targets = DailyTargets(
        calories=_positive(row, "target_calories", defaults.calories),
        protein_g=_positive(row, "target_protein_g", defaults.protein_g),
        carbs_g=_positive(row, "target_carbs_g", defaults.carbs_g),
        fat_g=_positive(row, "target_fat_g", defaults.fat_g),
        fiber_g=_positive(row, "target_fiber_g", defaults.fiber_g),
        water_glasses=_positive(row, "target_water_glasses", defaults.water_glasses),
    )
    return UserProfile(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        targets=targets,
        goal=_choice(row.get("goal"), GOALS, DEFAULT_GOAL),
        activity_level=str(row.get("activity_level") or "moderate"),
        age=_optional_int(row, "age"),
        gender=row.get("gender") if isinstance(row.get("gender"), str) else None,
        height_cm=_optional_float(row, "height_cm"),
        weight_kg=_optional_float(row, "weight_kg"),
        diet_type=_choice(row.get("diet_type"), DIET_TYPES, "none"),
        allergies=tuple(row.get("allergies") or ()),
        disliked_foods=tuple(row.get("disliked_foods") or ()),
    )


def _positive(row: dict[str, object], column: str, default: float) -> float:
    value = _optional_float(row, column)
    if value is None or value <= 0:
        return default
    return value


def _optional_int(row: dict[str, object], column: str) -> int | None:
    value = _optional_float(row, column)
    return None if value is None else int(value)


def _optional_float(row: dict[str, object], column: str) -> float | None:
    value = row.get(column)
    if value is None:
        return None
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise RuntimeError(
            f"User {row.get('id')} has non-numeric {column}: {value!r}"
        ) from exc


def _choice(value: object, allowed: tuple[str, ...], default: str) -> str:
    return value if isinstance(value, str) and value in allowed else default
