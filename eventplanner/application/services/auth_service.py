"""Auth service — JWT token management and password hashing."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import SQLAlchemyError

from eventplanner.config import get_settings
from eventplanner.core.exceptions import StoreException
from eventplanner.domain.models.user import User
from eventplanner.domain.repositories.user_repository import UserRepository

settings = get_settings()
logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    user: User,
    expires_delta: Optional[timedelta] = None,
    now: Optional[datetime] = None,
) -> str:
    issued_at = now or datetime.now(timezone.utc)
    expire = issued_at + (
        expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    )
    claims = {
        "user_id": user.id,
        "email": user.email,
        "role": user.role,
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, now: Optional[datetime] = None) -> Optional[dict]:
    """Return the claims of a valid token, None for anything else.

    A token stops being valid at its ``exp`` second, not one second later.
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            options={"verify_exp": False},
        )
    except JWTError:
        return None

    exp = payload.get("exp")
    if not isinstance(exp, (int, float)):
        return None
    current = (now or datetime.now(timezone.utc)).timestamp()
    if current >= exp:
        return None
    return payload


def authenticate_user(repo: UserRepository, email: str, password: str) -> Optional[User]:
    """Unknown email and wrong password are indistinguishable to the caller."""
    try:
        user = repo.get_by_email(email)
    except SQLAlchemyError:
        logger.exception("User lookup failed")
        raise StoreException()

    if user is None:
        # Same cost as a real check, so timing does not reveal the account
        pwd_context.dummy_verify()
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def create_user(repo: UserRepository, name: str, email: str, password: str, role: str = "Staff") -> User:
    return repo.create(
        {
            "name": name,
            "email": email,
            "password_hash": hash_password(password),
            "role": role,
        }
    )
