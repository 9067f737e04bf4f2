"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutrition_analytics.adapters.supabase_meal_repository import (
    SupabaseMealRepository,
)
from nutrition_analytics.adapters.supabase_user_repository import (
    SupabaseUserRepository,
)
from nutrition_analytics.config import Settings
from nutrition_analytics.services.clock import Clock, SystemClock
from nutrition_analytics.services.dashboard import DashboardService
from nutrition_analytics.services.insights import WeeklyInsightService
from nutrition_analytics.services.macros import MacroService
from nutrition_analytics.services.meals import MealRepository
from nutrition_analytics.services.recommendations import RecommendationService
from nutrition_analytics.services.suggestions import SuggestionService
from nutrition_analytics.services.summary import SummaryService
from nutrition_analytics.services.trends import TrendService
from nutrition_analytics.services.users import UserRepository, UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    clock: Clock
    user_service: UserService
    summary_service: SummaryService
    trend_service: TrendService
    macro_service: MacroService
    recommendation_service: RecommendationService
    suggestion_service: SuggestionService
    insight_service: WeeklyInsightService
    dashboard_service: DashboardService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    return wire_container(
        settings=resolved_settings,
        meal_repository=SupabaseMealRepository(supabase_client),
        user_repository=SupabaseUserRepository(supabase_client),
        clock=SystemClock(resolved_settings.timezone),
    )


def wire_container(
    settings: Settings,
    meal_repository: MealRepository,
    user_repository: UserRepository,
    clock: Clock,
) -> AppContainer:
    """Build services on top of the given repositories and clock."""
    timezone_name = settings.timezone
    summary_service = SummaryService(meal_repository, timezone_name=timezone_name)
    return AppContainer(
        settings=settings,
        clock=clock,
        user_service=UserService(user_repository),
        summary_service=summary_service,
        trend_service=TrendService(
            meal_repository, timezone_name=timezone_name, debug=settings.debug
        ),
        macro_service=MacroService(meal_repository, timezone_name=timezone_name),
        recommendation_service=RecommendationService(
            meal_repository=meal_repository,
            user_repository=user_repository,
            timezone_name=timezone_name,
            debug=settings.debug,
        ),
        suggestion_service=SuggestionService(
            summary_service=summary_service,
            user_repository=user_repository,
            timezone_name=timezone_name,
            limit=settings.suggestion_limit,
        ),
        insight_service=WeeklyInsightService(
            meal_repository=meal_repository,
            user_repository=user_repository,
            timezone_name=timezone_name,
        ),
        dashboard_service=DashboardService(
            meal_repository=meal_repository,
            user_repository=user_repository,
            summary_service=summary_service,
            timezone_name=timezone_name,
            recent_meals_limit=settings.recent_meals_limit,
        ),
    )
