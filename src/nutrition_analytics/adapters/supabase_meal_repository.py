"""Supabase repository for meal records."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from nutrition_analytics.domain.meals import MealRecord
from nutrition_analytics.services.meals import MealRepository

_MEAL_COLUMNS = (
    "id, user_id, name, meal_type, consumed_at, calories, protein_g, carbs_g, "
    "fat_g, fiber_g, sugar_g, sodium_mg, is_favorite"
)


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal reads."""

    client: Client

    def list_meals(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealRecord]:
        """Return meals consumed in [start, end)."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("consumed_at", start.isoformat())
            .lt("consumed_at", end.isoformat())
            .order("consumed_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_recent_meals(self, user_id: UUID, limit: int) -> list[MealRecord]:
        """Return the latest meals for a user."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("user_id", str(user_id))
            .order("consumed_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> MealRecord:
    consumed_at_raw = row.get("consumed_at")
    if not isinstance(consumed_at_raw, str) or not consumed_at_raw:
        raise RuntimeError(f"Meal {row.get('id')} has no consumed_at timestamp")
    return MealRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name") or ""),
        meal_type=str(row.get("meal_type") or "snack"),
        consumed_at=_parse_timestamp(consumed_at_raw),
        calories=_to_float(row, "calories"),
        protein_g=_to_float(row, "protein_g"),
        carbs_g=_to_float(row, "carbs_g"),
        fat_g=_to_float(row, "fat_g"),
        fiber_g=_to_float(row, "fiber_g"),
        sugar_g=_to_float(row, "sugar_g"),
        sodium_mg=_to_float(row, "sodium_mg"),
        is_favorite=bool(row.get("is_favorite", False)),
    )


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def _to_float(row: dict[str, object], column: str) -> float:
    value = row.get(column)
    if value is None:
        return 0.0
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise RuntimeError(
            f"Meal {row.get('id')} has non-numeric {column}: {value!r}"
        ) from exc
