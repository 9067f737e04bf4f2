"""Shared request dependencies."""

from datetime import date
from uuid import UUID
from zoneinfo import ZoneInfo

from fastapi import Depends, Header, HTTPException, Request, status

from nutrition_analytics.containers import AppContainer
from nutrition_analytics.domain.users import UserProfile


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the app."""
    return request.app.state.container


def get_today(container: AppContainer = Depends(get_container)) -> date:
    """Return the current calendar day in the server timezone."""
    tz = ZoneInfo(container.settings.timezone)
    return container.clock.now().astimezone(tz).date()


def require_user_id(x_user_id: str | None = Header(default=None)) -> UUID:
    """Read the caller's user id set by the upstream auth gateway."""
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    try:
        return UUID(x_user_id)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid user id"
        ) from exc


def require_user(
    user_id: UUID = Depends(require_user_id),
    container: AppContainer = Depends(get_container),
) -> UserProfile:
    """Resolve the caller's profile or reject unknown users."""
    profile = container.user_service.get_profile(user_id)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    return profile
