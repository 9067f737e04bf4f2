"""Read interface for logged meals."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from nutrition_analytics.domain.meals import MealRecord


class MealRepository(Protocol):
    """Persistence interface for meal records."""

    def list_meals(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealRecord]:
        """Return meals consumed within [start, end)."""

    def list_recent_meals(self, user_id: UUID, limit: int) -> list[MealRecord]:
        """Return the most recently consumed meals."""
