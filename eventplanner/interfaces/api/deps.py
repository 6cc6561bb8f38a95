"""FastAPI dependencies — JWT auth gate and admin role gate."""

from typing import Optional

import structlog
from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from eventplanner.config import get_settings
from eventplanner.application.services.auth_service import decode_access_token
from eventplanner.core.exceptions import ForbiddenException, UnauthorizedException

settings = get_settings()
logger = structlog.get_logger(__name__)

# The raw header value is the token; no "Bearer " prefix is expected
token_header = APIKeyHeader(name="Authorization", auto_error=False)


def get_current_claims(
    request: Request,
    token: Optional[str] = Depends(token_header),
) -> dict:
    """Validate the token and expose its claims on ``request.state.claims``."""
    if not token:
        raise UnauthorizedException("Missing token")

    claims = decode_access_token(token)
    if claims is None:
        logger.info("Rejected token", path=request.url.path)
        raise UnauthorizedException("Invalid token")

    request.state.claims = claims
    return claims


def require_admin(claims: dict = Depends(get_current_claims)) -> dict:
    """Require the admin role claim."""
    if claims.get("role") != settings.ADMIN_ROLE:
        logger.warning("Admin route refused", user_id=claims.get("user_id"), role=claims.get("role"))
        raise ForbiddenException("Admin access only")
    return claims
