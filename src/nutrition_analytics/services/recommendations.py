"""Rule-based daily recommendation engine."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID
from zoneinfo import ZoneInfo

from nutrition_analytics.domain.recommendations import Recommendation
from nutrition_analytics.domain.users import DEFAULT_GOAL
from nutrition_analytics.services.clock import day_bounds
from nutrition_analytics.services.meals import MealRepository
from nutrition_analytics.services.rules import DEFAULT_RULES, Rule, RuleContext
from nutrition_analytics.services.summary import aggregate_day
from nutrition_analytics.services.users import UserRepository

WEEKLY_WINDOW_DAYS = 7

_logger = logging.getLogger(__name__)


@dataclass
class RecommendationService:
    """Builds the rule context for a user and runs the rule battery."""

    meal_repository: MealRepository
    user_repository: UserRepository
    timezone_name: str = "UTC"
    rules: tuple[Rule, ...] = field(default=DEFAULT_RULES)
    debug: bool = False

    def generate(self, user_id: UUID, now: datetime) -> list[Recommendation] | None:
        """Return recommendations sorted by priority, or None for unknown users."""
        context = self.build_context(user_id, now)
        if context is None:
            return None
        recommendations = generate_recommendations(context, self.rules)
        if self.debug:
            _logger.info(
                "Recommendations generated: user_id=%s count=%s",
                user_id,
                len(recommendations),
            )
        return recommendations

    def build_context(self, user_id: UUID, now: datetime) -> RuleContext | None:
        """Fetch today's summary, the weekly window and the user's targets."""
        user = self.user_repository.get_user(user_id)
        if user is None:
            return None
        tz = ZoneInfo(self.timezone_name)
        local_now = now.astimezone(tz)
        today = local_now.date()
        _, end_of_today = day_bounds(today, tz)
        window_start = local_now - timedelta(days=WEEKLY_WINDOW_DAYS)
        meals = self.meal_repository.list_meals(
            user_id, window_start.astimezone(UTC), end_of_today.astimezone(UTC)
        )
        return RuleContext(
            today=aggregate_day(today, meals, tz),
            weekly_meals=meals,
            targets=user.targets,
            goal=user.goal or DEFAULT_GOAL,
            hour=local_now.hour,
        )


def generate_recommendations(
    context: RuleContext, rules: Iterable[Rule] = DEFAULT_RULES
) -> list[Recommendation]:
    """Evaluate rules in order and stable-sort by priority, highest first."""
    fired = []
    for rule in rules:
        recommendation = rule.evaluate(context)
        if recommendation is not None:
            fired.append(recommendation)
    return sorted(fired, key=lambda item: item.priority, reverse=True)
