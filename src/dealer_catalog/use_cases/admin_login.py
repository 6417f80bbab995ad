"""Admin login use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from dealer_catalog.domain.admin import AdminAccount, normalize_email
from dealer_catalog.domain.errors import ForbiddenError, UnauthorizedError, ValidationError
from dealer_catalog.ports.admin_repository import AdminRepository
from dealer_catalog.ports.password_hasher import PasswordHasher
from dealer_catalog.ports.token_service import TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AdminLoginRequest:
    email: str
    password: str


@dataclass(frozen=True, slots=True)
class AdminLoginResponse:
    token: str
    admin: AdminAccount


class AdminLogin:
    """
    Exchange admin credentials for an access token.

    There is no sign-up: admin accounts are created by scripts/seed_admin.py.
    Unknown emails and wrong passwords share one message so the endpoint
    does not reveal which emails exist.
    """

    def __init__(
        self,
        admin_repository: AdminRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._admins = admin_repository
        self._hasher = password_hasher
        self._tokens = token_service

    def execute(self, request: AdminLoginRequest) -> AdminLoginResponse:
        """
        Raises:
            ValidationError: If email or password is empty
            UnauthorizedError: If the credentials do not match an admin
            ForbiddenError: If the admin account is deactivated
        """
        if not request.email or not request.password:
            raise ValidationError("Email and password are required")

        email = normalize_email(request.email)
        admin = self._admins.get_by_email(email)
        if admin is None:
            logger.info("Admin login rejected", extra={"reason": "unknown_email"})
            raise UnauthorizedError("Invalid credentials")

        if not admin.is_active:
            logger.info("Admin login rejected", extra={"reason": "deactivated", "admin_id": admin.id})
            raise ForbiddenError("Account is deactivated")

        if not self._hasher.verify(request.password, admin.password_hash):
            logger.info("Admin login rejected", extra={"reason": "bad_password", "admin_id": admin.id})
            raise UnauthorizedError("Invalid credentials")

        logger.info("Admin logged in", extra={"admin_id": admin.id})
        return AdminLoginResponse(token=self._tokens.issue(admin.id), admin=admin)
