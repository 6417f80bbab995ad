from __future__ import annotations

from dealer_catalog.domain.admin import AdminAccount
from dealer_catalog.domain.errors import ForbiddenError, UnauthorizedError
from dealer_catalog.ports.admin_repository import AdminRepository
from dealer_catalog.ports.token_service import TokenService


class AuthorizeAdmin:
    """Resolve a bearer token to an active admin account."""

    def __init__(self, admin_repository: AdminRepository, token_service: TokenService) -> None:
        self._admins = admin_repository
        self._tokens = token_service

    def execute(self, token: str | None) -> AdminAccount:
        """
        Raises:
            UnauthorizedError: No token, bad/expired token, or unknown admin
            ForbiddenError: The admin account is deactivated
        """
        if not token:
            raise UnauthorizedError("No token provided")

        admin_id = self._tokens.verify(token)
        admin = self._admins.get_by_id(admin_id)

        if admin is None:
            raise UnauthorizedError("Admin not found")
        if not admin.is_active:
            raise ForbiddenError("Admin account is deactivated")

        return admin
