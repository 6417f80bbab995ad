from __future__ import annotations

from abc import ABC, abstractmethod

from dealer_catalog.domain.admin import AdminAccount


class AdminRepository(ABC):
    """
    Port for admin account lookups.

    Contract:
        - emails are stored lowercased; callers pass normalized emails
        - add() raises ConflictError when the email is already taken
    """

    @abstractmethod
    def get_by_email(self, email: str) -> AdminAccount | None: ...

    @abstractmethod
    def get_by_id(self, admin_id: str) -> AdminAccount | None: ...

    @abstractmethod
    def add(self, admin: AdminAccount) -> AdminAccount: ...

    @abstractmethod
    def count(self) -> int: ...
