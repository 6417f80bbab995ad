from __future__ import annotations

from abc import ABC, abstractmethod


class TokenService(ABC):
    """Issues and verifies admin access tokens."""

    @abstractmethod
    def issue(self, admin_id: str) -> str: ...

    @abstractmethod
    def verify(self, token: str) -> str:
        """
        Return the admin id carried by the token.

        Raises:
            UnauthorizedError: If the token is malformed, tampered with or expired
        """
        ...
