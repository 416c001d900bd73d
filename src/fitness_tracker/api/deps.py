"""Shared FastAPI dependencies."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from fastapi import Header, HTTPException, Request, status

from fitness_tracker.services.stats import today_in

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer
    from fitness_tracker.domain.profiles import UserProfile


def get_container(request: Request) -> AppContainer:
    """Return the container stored on the app."""
    return request.app.state.container


async def require_user(x_user_id: str | None = Header(default=None)) -> str:
    """Return the caller's user id from the identity header."""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return x_user_id.strip()


def current_profile(container: AppContainer, user_id: str) -> UserProfile:
    """Return the caller's profile, creating it on first use."""
    return container.profile_service.ensure_profile(user_id)


def user_today(container: AppContainer, user_id: str) -> date:
    """Today's date in the caller's timezone."""
    return today_in(current_profile(container, user_id).timezone)
