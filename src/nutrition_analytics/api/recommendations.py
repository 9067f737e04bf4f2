"""Recommendation and suggestion endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from nutrition_analytics.api.deps import get_container, require_user
from nutrition_analytics.api.serializers import (
    serialize_insights,
    serialize_recommendation,
    serialize_suggestion_result,
)
from nutrition_analytics.containers import AppContainer
from nutrition_analytics.domain.meals import is_valid_meal_type
from nutrition_analytics.domain.users import UserProfile
from nutrition_analytics.services.targets import (
    calculate_bmi,
    calculate_daily_calories,
)

router = APIRouter(tags=["recommendations"])


@router.get("/recommendations")
async def recommendations(
    user: UserProfile = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return today's recommendations, highest priority first."""
    result = container.recommendation_service.generate(
        user.id, container.clock.now()
    )
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {
        "count": len(result),
        "recommendations": [serialize_recommendation(item) for item in result],
    }


@router.get("/recommendations/meals/{meal_type}")
async def meal_suggestions(
    meal_type: str,
    user: UserProfile = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return ranked meal suggestions for a slot."""
    if not is_valid_meal_type(meal_type):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid meal type. Use: breakfast, lunch, dinner, or snack",
        )
    result = container.suggestion_service.suggest(
        user.id, meal_type, container.clock.now()
    )
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_suggestion_result(result)


@router.get("/recommendations/insights")
async def weekly_insights(
    user: UserProfile = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return weekly averages and observations."""
    insights = container.insight_service.get_insights(user.id, container.clock.now())
    if insights is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_insights(insights)


@router.get("/users/me/targets/suggested")
async def suggested_targets(
    user: UserProfile = Depends(require_user),
) -> dict[str, object]:
    """Return a calorie target estimated from the body profile."""
    return {
        "current_calories": user.targets.calories,
        "suggested_calories": calculate_daily_calories(user),
        "bmi": calculate_bmi(user),
    }
