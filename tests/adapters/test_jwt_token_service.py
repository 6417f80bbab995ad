"""Tests for JwtTokenService."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from dealer_catalog.adapters.jwt_token_service import JwtTokenService
from dealer_catalog.domain.errors import UnauthorizedError

SECRET = "test-secret-with-enough-bytes-for-hs256"


@pytest.fixture()
def service() -> JwtTokenService:
    return JwtTokenService(secret=SECRET, expires_in_seconds=3600)


def test_issue_then_verify_returns_admin_id(service: JwtTokenService) -> None:
    token = service.issue("admin-1")

    assert service.verify(token) == "admin-1"


def test_issued_token_carries_expiry(service: JwtTokenService) -> None:
    token = service.issue("admin-1")

    payload = jwt.decode(token, SECRET, algorithms=["HS256"])

    assert payload["sub"] == "admin-1"
    assert payload["exp"] - payload["iat"] == 3600


def test_verify_rejects_expired_token(service: JwtTokenService) -> None:
    past = datetime.now(timezone.utc) - timedelta(hours=2)
    token = jwt.encode(
        {"sub": "admin-1", "iat": past, "exp": past + timedelta(hours=1)},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(UnauthorizedError) as exc_info:
        service.verify(token)

    assert exc_info.value.message == "Invalid or expired token"


def test_verify_rejects_token_signed_with_other_secret(service: JwtTokenService) -> None:
    other = JwtTokenService(secret="another-secret-with-enough-bytes-too")

    with pytest.raises(UnauthorizedError):
        service.verify(other.issue("admin-1"))


def test_verify_rejects_garbage(service: JwtTokenService) -> None:
    with pytest.raises(UnauthorizedError):
        service.verify("not.a.jwt")


def test_verify_requires_subject(service: JwtTokenService) -> None:
    token = jwt.encode(
        {"exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(UnauthorizedError):
        service.verify(token)
