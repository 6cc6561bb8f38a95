"""
Tests for password checks and token minting/verification
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt
from sqlalchemy.exc import OperationalError

from eventplanner.application.services.auth_service import (
    authenticate_user,
    create_access_token,
    decode_access_token,
    hash_password,
)
from eventplanner.core.exceptions import StoreException
from eventplanner.domain.models.user import User

ISSUED = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class InMemoryUsers:
    def __init__(self, *users):
        self.users = {u.email: u for u in users}

    def get_by_email(self, email):
        return self.users.get(email)


class BrokenUsers:
    def get_by_email(self, email):
        raise OperationalError("SELECT ...", {}, Exception("connection refused"))


@pytest.fixture
def user():
    return User(id=7, name="Sam", email="sam@example.com", password_hash=hash_password("pw"), role="Staff")


def test_token_carries_identity_role_and_expiry(user):
    token = create_access_token(user, now=ISSUED)
    claims = decode_access_token(token, now=ISSUED + timedelta(minutes=1))

    assert claims["user_id"] == 7
    assert claims["email"] == "sam@example.com"
    assert claims["role"] == "Staff"
    assert claims["exp"] == int((ISSUED + timedelta(hours=24)).timestamp())


def test_token_valid_until_24h_mark(user):
    token = create_access_token(user, now=ISSUED)

    assert decode_access_token(token, now=ISSUED + timedelta(hours=23, minutes=59, seconds=59))
    assert decode_access_token(token, now=ISSUED + timedelta(hours=24)) is None
    assert decode_access_token(token, now=ISSUED + timedelta(hours=25)) is None


def test_token_signed_with_other_key_rejected(user):
    forged = jwt.encode(
        {"user_id": 7, "email": user.email, "role": "Admin", "exp": 4102444800},
        "not-the-key",
        algorithm="HS256",
    )
    assert decode_access_token(forged) is None


def test_token_without_expiry_rejected():
    token = jwt.encode({"user_id": 1, "role": "Admin"}, "test-secret-key", algorithm="HS256")
    assert decode_access_token(token) is None


def test_garbage_token_rejected():
    assert decode_access_token("definitely.not.a-jwt") is None
    assert decode_access_token("") is None


def test_authenticate_user(user):
    repo = InMemoryUsers(user)

    assert authenticate_user(repo, "sam@example.com", "pw") is user
    assert authenticate_user(repo, "sam@example.com", "wrong") is None
    assert authenticate_user(repo, "nobody@example.com", "pw") is None


def test_authenticate_email_is_exact_match(user):
    repo = InMemoryUsers(user)
    assert authenticate_user(repo, "SAM@example.com", "pw") is None


def test_authenticate_store_failure_is_server_error():
    with pytest.raises(StoreException) as excinfo:
        authenticate_user(BrokenUsers(), "sam@example.com", "pw")
    assert excinfo.value.status_code == 500
