"""Meal suggestions ranked against the remaining daily budget."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID
from zoneinfo import ZoneInfo

from nutrition_analytics.domain.catalog import templates_for
from nutrition_analytics.domain.recommendations import (
    MealSuggestion,
    MealTemplate,
    RemainingBudget,
    SuggestionResult,
)
from nutrition_analytics.domain.stats import DailySummary
from nutrition_analytics.domain.users import DEFAULT_GOAL, DailyTargets
from nutrition_analytics.services.summary import SummaryService
from nutrition_analytics.services.users import UserRepository

PLANT_BASED_DIETS = frozenset({"vegetarian", "vegan"})
PLANT_BASED_TAGS = frozenset({"vegetarian", "vegan"})

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoringWeights:
    """Adjustments applied to the baseline match score."""

    baseline: int = 100
    over_budget_ratio: float = 1.2
    over_budget_penalty: int = 30
    protein_need_g: float = 20
    protein_rich_g: float = 15
    protein_bonus: int = 20
    light_meal_ratio: float = 0.4
    light_meal_bonus: int = 15
    muscle_protein_g: float = 20
    muscle_bonus: int = 20


@dataclass
class SuggestionService:
    """Suggests catalog meals for a slot given today's consumption."""

    summary_service: SummaryService
    user_repository: UserRepository
    timezone_name: str = "UTC"
    limit: int = 5
    weights: ScoringWeights = ScoringWeights()

    def suggest(
        self, user_id: UUID, meal_type: str, now: datetime
    ) -> SuggestionResult | None:
        """Return the remaining budget and top suggestions for a valid slot."""
        user = self.user_repository.get_user(user_id)
        if user is None:
            return None
        today = now.astimezone(ZoneInfo(self.timezone_name)).date()
        summary = self.summary_service.summarize(user_id, today)
        remaining = remaining_budget(summary, user.targets)
        if user.diet_type not in PLANT_BASED_DIETS | {"none"} or (
            user.allergies or user.disliked_foods
        ):
            # TODO: filter keto/paleo/mediterranean diets and allergy or
            # disliked-food lists once the catalog carries ingredient data.
            _logger.debug(
                "Suggestion filters not applied: user_id=%s diet_type=%s",
                user_id,
                user.diet_type,
            )
        candidates = filter_by_diet(templates_for(meal_type), user.diet_type)
        return SuggestionResult(
            meal_type=meal_type,
            remaining=remaining,
            suggestions=rank_suggestions(
                candidates,
                remaining,
                user.goal or DEFAULT_GOAL,
                limit=self.limit,
                weights=self.weights,
            ),
        )


def remaining_budget(summary: DailySummary, targets: DailyTargets) -> RemainingBudget:
    """Target minus consumed per nutrient, never negative."""
    return RemainingBudget(
        calories=max(0.0, targets.calories - summary.total_calories),
        protein_g=max(0.0, targets.protein_g - summary.total_protein_g),
        carbs_g=max(0.0, targets.carbs_g - summary.total_carbs_g),
        fat_g=max(0.0, targets.fat_g - summary.total_fat_g),
    )


def filter_by_diet(
    templates: Iterable[MealTemplate], diet_type: str
) -> list[MealTemplate]:
    """Keep plant-based items for vegetarian and vegan diets."""
    if diet_type not in PLANT_BASED_DIETS:
        return list(templates)
    return [
        template
        for template in templates
        if PLANT_BASED_TAGS.intersection(template.tags)
    ]


def score_template(
    template: MealTemplate,
    remaining: RemainingBudget,
    goal: str,
    weights: ScoringWeights = ScoringWeights(),
) -> int:
    """Score how well a template fits the remaining budget and goal."""
    score = weights.baseline
    if template.calories > remaining.calories * weights.over_budget_ratio:
        score -= weights.over_budget_penalty
    if (
        remaining.protein_g > weights.protein_need_g
        and template.protein_g >= weights.protein_rich_g
    ):
        score += weights.protein_bonus
    if (
        goal == "lose-weight"
        and template.calories <= remaining.calories * weights.light_meal_ratio
    ):
        score += weights.light_meal_bonus
    if goal == "build-muscle" and template.protein_g >= weights.muscle_protein_g:
        score += weights.muscle_bonus
    return score


def rank_suggestions(
    templates: Iterable[MealTemplate],
    remaining: RemainingBudget,
    goal: str,
    limit: int = 5,
    weights: ScoringWeights = ScoringWeights(),
) -> list[MealSuggestion]:
    """Score templates and return the best, keeping catalog order on ties."""
    scored = [
        MealSuggestion(
            name=template.name,
            calories=template.calories,
            protein_g=template.protein_g,
            carbs_g=template.carbs_g,
            fat_g=template.fat_g,
            tags=template.tags,
            match_score=score_template(template, remaining, goal, weights),
        )
        for template in templates
    ]
    scored.sort(key=lambda suggestion: suggestion.match_score, reverse=True)
    return scored[:limit]
