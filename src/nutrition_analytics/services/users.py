"""User profile lookups."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from nutrition_analytics.domain.users import UserProfile


class UserRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_user(self, user_id: UUID) -> UserProfile | None:
        """Return the user profile with targets, if present."""


@dataclass
class UserService:
    """Application service for user profile reads."""

    repository: UserRepository

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return a user profile or None when the id is unknown."""
        return self.repository.get_user(user_id)
