"""Dashboard analytics endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from nutrition_analytics.api.deps import get_container, get_today, require_user
from nutrition_analytics.api.serializers import (
    serialize_dashboard,
    serialize_macro_report,
    serialize_meal_types,
    serialize_today,
    serialize_trend,
    serialize_weekly_overview,
)
from nutrition_analytics.containers import AppContainer
from nutrition_analytics.domain.users import UserProfile
from nutrition_analytics.services.trends import DEFAULT_TREND_PERIOD, TREND_PERIODS

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("")
async def dashboard(
    user: UserProfile = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the combined dashboard in a single call."""
    result = await container.dashboard_service.get_dashboard(
        user.id, container.clock.now()
    )
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_dashboard(result)


@router.get("/today")
async def today_summary(
    user: UserProfile = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return today's consumption, progress and remaining budget."""
    overview = container.dashboard_service.get_today(user.id, container.clock.now())
    if overview is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_today(overview)


@router.get("/trends")
async def calorie_trends(
    period: str = DEFAULT_TREND_PERIOD,
    today: date = Depends(get_today),
    user: UserProfile = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a gap-filled trend for 7d, 14d, 30d or 90d."""
    resolved = period if period in TREND_PERIODS else DEFAULT_TREND_PERIOD
    trend = container.trend_service.build_period_trend(user.id, resolved, today)
    return serialize_trend(trend, resolved)


@router.get("/trends/range")
async def trend_range(
    start: date,
    end: date,
    user: UserProfile = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a gap-filled trend for an explicit inclusive window."""
    try:
        trend = container.trend_service.build_trend(user.id, start, end)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return serialize_trend(trend)


@router.get("/macros")
async def macro_breakdown(
    period: str = "day",
    anchor: date | None = Query(default=None, alias="date"),
    today: date = Depends(get_today),
    user: UserProfile = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the macro distribution for a day, week or month."""
    report = container.macro_service.get_breakdown(user.id, anchor or today, period)
    return serialize_macro_report(report)


@router.get("/meal-distribution")
async def meal_distribution(
    days: int = Query(default=7, ge=1, le=365),
    user: UserProfile = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return meal counts per slot over recent days."""
    shares = container.dashboard_service.get_meal_distribution(
        user.id, container.clock.now(), days=days
    )
    return {"period": f"{days} days", **serialize_meal_types(shares)}


@router.get("/weekly-overview")
async def weekly_overview(
    user: UserProfile = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the last seven days against the calorie target."""
    overview = container.dashboard_service.get_weekly_overview(
        user.id, container.clock.now()
    )
    if overview is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_weekly_overview(overview)
