"""
FastAPI dependencies for authentication.

Provides ``db_session``, ``get_settings`` and ``get_current_user_id``
dependencies that are used across all protected routes.
"""

from __future__ import annotations

from typing import AsyncGenerator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from api.exceptions import UnauthorizedError
from config.settings import Settings
from database.session import get_db_session

# auto_error=False: a missing header must answer 401, not FastAPI's default 403
_bearer_scheme = HTTPBearer(auto_error=False)


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Extract and verify the Bearer token, returning the authenticated
    ``user_id`` (UUID string).
    """
    from auth.jwt import verify_token

    if credentials is None:
        raise UnauthorizedError("YOU ARE UNAUTHORIZED")
    return verify_token(credentials.credentials, settings.jwt_secret)
