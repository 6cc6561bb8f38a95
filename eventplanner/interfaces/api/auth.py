"""Auth API routes — login and profile."""

import structlog
from fastapi import APIRouter, Depends

from eventplanner.application.services.auth_service import (
    authenticate_user,
    create_access_token,
)
from eventplanner.core.exceptions import UnauthorizedException
from eventplanner.domain.repositories.user_repository import UserRepository
from eventplanner.domain.schemas.auth import LoginRequest, TokenResponse, UserRead
from eventplanner.interfaces.api.deps import get_current_claims
from eventplanner.interfaces.deps import get_user_repository

router = APIRouter(tags=["Auth"])
logger = structlog.get_logger(__name__)


@router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, repo: UserRepository = Depends(get_user_repository)):
    user = authenticate_user(repo, body.email, body.password)
    if not user:
        logger.info("Login refused")
        raise UnauthorizedException("Invalid email or password")

    logger.info("Login successful", user_id=user.id, role=user.role)
    return TokenResponse(
        access_token=create_access_token(user),
        user=UserRead.model_validate(user),
    )


@router.get("/profile")
def profile(claims: dict = Depends(get_current_claims)):
    return {"user": claims}
