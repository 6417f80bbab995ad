from __future__ import annotations

import os

DEFAULT_JWT_ALGORITHM = "HS256"
DEFAULT_JWT_EXPIRES_SECONDS = 7 * 24 * 60 * 60  # 7 days


def jwt_secret() -> str:
    secret = os.getenv("JWT_SECRET")

    if not secret:
        raise RuntimeError("JWT_SECRET environment variable is not set")

    return secret


def jwt_algorithm() -> str:
    return os.getenv("JWT_ALGORITHM") or DEFAULT_JWT_ALGORITHM


def jwt_expires_seconds() -> int:
    raw = os.getenv("JWT_EXPIRES_SECONDS")

    if not raw:
        return DEFAULT_JWT_EXPIRES_SECONDS

    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"JWT_EXPIRES_SECONDS must be an integer, got {raw!r}") from None
