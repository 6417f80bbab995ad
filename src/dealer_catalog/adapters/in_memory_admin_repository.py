from __future__ import annotations

from dealer_catalog.domain.admin import AdminAccount
from dealer_catalog.domain.errors import ConflictError
from dealer_catalog.ports.admin_repository import AdminRepository


class InMemoryAdminRepository(AdminRepository):
    """Canonical contract implementation for tests."""

    def __init__(self, admins: list[AdminAccount] | None = None) -> None:
        self._admins: dict[str, AdminAccount] = {}
        for admin in admins or []:
            self.add(admin)

    def get_by_email(self, email: str) -> AdminAccount | None:
        for admin in self._admins.values():
            if admin.email == email:
                return admin
        return None

    def get_by_id(self, admin_id: str) -> AdminAccount | None:
        return self._admins.get(admin_id)

    def add(self, admin: AdminAccount) -> AdminAccount:
        if self.get_by_email(admin.email) is not None:
            raise ConflictError("An admin with this email already exists", email=admin.email)
        self._admins[admin.id] = admin
        return admin

    def count(self) -> int:
        return len(self._admins)
