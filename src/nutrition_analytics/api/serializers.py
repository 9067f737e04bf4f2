"""JSON serializers for analytics results."""

from dataclasses import asdict

from nutrition_analytics.domain.meals import MealRecord
from nutrition_analytics.domain.recommendations import (
    MealSuggestion,
    Recommendation,
    SuggestionResult,
    WeeklyInsights,
)
from nutrition_analytics.domain.stats import (
    DailySummary,
    MacroTotals,
    MealTypeShare,
    Trend,
    TrendPoint,
)
from nutrition_analytics.domain.users import DailyTargets
from nutrition_analytics.services.dashboard import (
    Dashboard,
    TodayOverview,
    WeeklyOverview,
)
from nutrition_analytics.services.macros import MacroReport


def serialize_summary(summary: DailySummary) -> dict[str, object]:
    """Serialize a day's nutrient totals."""
    return {
        "date": summary.day.isoformat(),
        "total_calories": summary.total_calories,
        "total_protein_g": summary.total_protein_g,
        "total_carbs_g": summary.total_carbs_g,
        "total_fat_g": summary.total_fat_g,
        "total_fiber_g": summary.total_fiber_g,
        "total_sugar_g": summary.total_sugar_g,
        "total_sodium_mg": summary.total_sodium_mg,
        "meal_count": summary.meal_count,
    }


def serialize_targets(targets: DailyTargets) -> dict[str, object]:
    """Serialize daily targets."""
    return asdict(targets)


def serialize_today(overview: TodayOverview) -> dict[str, object]:
    """Serialize today's overview with progress and remaining amounts."""
    return {
        "date": overview.day.isoformat(),
        "consumed": serialize_summary(overview.consumed),
        "targets": serialize_targets(overview.targets),
        "progress": overview.progress,
        "remaining": overview.remaining,
        "meal_count": overview.consumed.meal_count,
    }


def serialize_trend_point(point: TrendPoint) -> dict[str, object]:
    """Serialize one day of a trend."""
    return {
        "date": point.day.isoformat(),
        "calories": point.calories,
        "protein_g": point.protein_g,
        "carbs_g": point.carbs_g,
        "fat_g": point.fat_g,
        "meal_count": point.meal_count,
    }


def serialize_trend(trend: Trend, period: str | None = None) -> dict[str, object]:
    """Serialize a trend with its window summary."""
    return {
        "period": period,
        "start_date": trend.start.isoformat(),
        "end_date": trend.end.isoformat(),
        "trends": [serialize_trend_point(point) for point in trend.points],
        "summary": {
            "total_days": trend.summary.total_days,
            "days_with_meals": trend.summary.days_with_meals,
            "totals": _serialize_macro_totals(trend.summary.totals),
            "averages": _serialize_macro_totals(trend.summary.averages),
        },
    }


def serialize_macro_report(report: MacroReport) -> dict[str, object]:
    """Serialize a macro report with distribution and macro calories."""
    breakdown = report.breakdown
    return {
        "period": report.period,
        "start_date": report.start.isoformat(),
        "end_date": report.end.isoformat(),
        "totals": {
            "calories": report.totals.total_calories,
            "protein_g": report.totals.total_protein_g,
            "carbs_g": report.totals.total_carbs_g,
            "fat_g": report.totals.total_fat_g,
            "fiber_g": report.totals.total_fiber_g,
            "sugar_g": report.totals.total_sugar_g,
        },
        "distribution": {
            "protein": breakdown.protein_pct,
            "carbs": breakdown.carbs_pct,
            "fat": breakdown.fat_pct,
        },
        "calories_from_macros": {
            "protein": breakdown.calories_from_protein,
            "carbs": breakdown.calories_from_carbs,
            "fat": breakdown.calories_from_fat,
        },
    }


def serialize_meal_types(shares: list[MealTypeShare]) -> dict[str, object]:
    """Serialize meal slot shares."""
    return {
        "total_meals": sum(share.count for share in shares),
        "distribution": [asdict(share) for share in shares],
    }


def serialize_weekly_overview(overview: WeeklyOverview) -> dict[str, object]:
    """Serialize the seven-day overview."""
    return {
        "days": [
            {
                "date": day.day.isoformat(),
                "day_name": day.day.strftime("%a"),
                "calories": day.calories,
                "target": day.target,
                "percentage": day.percentage,
                "meals_logged": day.meals_logged,
            }
            for day in overview.days
        ],
        "summary": {
            "total_calories": overview.total_calories,
            "avg_calories_per_day": overview.avg_calories_per_day,
            "total_meals": overview.total_meals,
            "days_tracked": overview.days_tracked,
            "weekly_target": overview.weekly_target,
            "weekly_progress": overview.weekly_progress,
        },
    }


def serialize_meal(meal: MealRecord) -> dict[str, object]:
    """Serialize a meal for recent-meal lists."""
    return {
        "id": str(meal.id),
        "name": meal.name,
        "meal_type": meal.meal_type,
        "calories": meal.calories,
        "consumed_at": meal.consumed_at.isoformat(),
    }


def serialize_dashboard(dashboard: Dashboard) -> dict[str, object]:
    """Serialize the combined dashboard."""
    return {
        "user": {
            "name": dashboard.user.name,
            "goal": dashboard.user.goal,
            "daily_targets": serialize_targets(dashboard.user.targets),
        },
        "today": {**dashboard.progress, "meal_count": dashboard.today.meal_count},
        "weekly_chart": [
            {
                "date": point.day.isoformat(),
                "calories": point.calories,
                "meal_count": point.meal_count,
            }
            for point in dashboard.weekly_chart
        ],
        "recent_meals": [serialize_meal(meal) for meal in dashboard.recent_meals],
        "meal_type_distribution": [
            {
                "type": share.meal_type,
                "count": share.count,
                "total_calories": share.total_calories,
            }
            for share in dashboard.meal_types
        ],
    }


def serialize_recommendation(recommendation: Recommendation) -> dict[str, object]:
    """Serialize a recommendation, omitting empty suggestions and details."""
    payload: dict[str, object] = {
        "category": recommendation.category,
        "priority": int(recommendation.priority),
        "priority_label": recommendation.priority.name,
        "title": recommendation.title,
        "message": recommendation.message,
        "action": recommendation.action,
        "icon": recommendation.icon,
    }
    if recommendation.suggestions:
        payload["suggestions"] = list(recommendation.suggestions)
    if recommendation.details:
        payload["details"] = recommendation.details
    return payload


def serialize_suggestion(suggestion: MealSuggestion) -> dict[str, object]:
    """Serialize a scored meal suggestion."""
    return {
        "name": suggestion.name,
        "nutrition": {
            "calories": suggestion.calories,
            "protein_g": suggestion.protein_g,
            "carbs_g": suggestion.carbs_g,
            "fat_g": suggestion.fat_g,
        },
        "tags": list(suggestion.tags),
        "match_score": suggestion.match_score,
    }


def serialize_suggestion_result(result: SuggestionResult) -> dict[str, object]:
    """Serialize suggestions with the remaining nutrition."""
    return {
        "meal_type": result.meal_type,
        "remaining_nutrition": asdict(result.remaining),
        "suggestions": [serialize_suggestion(item) for item in result.suggestions],
    }


def serialize_insights(insights: WeeklyInsights) -> dict[str, object]:
    """Serialize weekly insights."""
    payload: dict[str, object] = {
        "period": "7 days",
        "days_tracked": insights.days_tracked,
        "averages": {
            "calories": insights.avg_calories,
            "protein_g": insights.avg_protein_g,
            "meals_per_day": insights.avg_meals_per_day,
        },
        "insights": [
            {
                "type": insight.kind,
                "title": insight.title,
                "message": insight.message,
                "icon": insight.icon,
            }
            for insight in insights.insights
        ],
    }
    if insights.message:
        payload["message"] = insights.message
    return payload


def _serialize_macro_totals(totals: MacroTotals) -> dict[str, float]:
    return {
        "calories": totals.calories,
        "protein_g": totals.protein_g,
        "carbs_g": totals.carbs_g,
        "fat_g": totals.fat_g,
    }
