"""
Auth API routes — register, login.

Mounted at the application root: ``/register`` and ``/login``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from api.exceptions import ConflictError, NotFoundError, UnauthorizedError
from auth.dependencies import db_session, get_settings
from auth.jwt import create_token
from auth.password import hash_password, verify_password
from config.settings import Settings
from database.helpers import get_user_by_email
from database.models import User
from utils.schemas import LoginResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


# ── Request / response schemas ─────────────────────────────────────────


class RegisterRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=72)


class LoginRequest(BaseModel):
    email: str
    password: str


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post("/register", response_model=MessageResponse)
async def register(
    req: RegisterRequest,
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Register a new user."""
    user = User(
        email=req.email,
        password_hash=hash_password(req.password, rounds=settings.bcrypt_rounds),
    )
    session.add(user)
    try:
        await session.flush()
    except IntegrityError:
        # Unique constraint on users.email
        await session.rollback()
        raise ConflictError("Email already exists")

    logger.info("Registered user %s (%s)", user.email, user.user_id)
    return {"message": f"{user.email} created successfully"}


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Login with email + password."""
    user = await get_user_by_email(session, req.email)

    if user is None:
        raise NotFoundError("User not found")
    if not verify_password(req.password, user.password_hash):
        raise UnauthorizedError("Invalid credentials")

    token = create_token(
        str(user.user_id),
        settings.jwt_secret,
        expiry_seconds=settings.jwt_expiry_seconds,
    )
    logger.info("Login: %s (%s)", user.email, user.user_id)

    return {"message": "Login successful", "token": token}
