"""PyJWT implementation of TokenService."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt

from dealer_catalog.domain.errors import UnauthorizedError
from dealer_catalog.ports.token_service import TokenService


class JwtTokenService(TokenService):
    """
    Signed admin access tokens.

    Payload: {"sub": <admin id>, "iat": ..., "exp": ...}. Expiry is checked
    by PyJWT during decode.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_in_seconds: int = 604800) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = timedelta(seconds=expires_in_seconds)

    def issue(self, admin_id: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {"sub": admin_id, "iat": now, "exp": now + self._expires_in}
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.InvalidTokenError:
            raise UnauthorizedError("Invalid or expired token") from None

        return str(payload["sub"])
