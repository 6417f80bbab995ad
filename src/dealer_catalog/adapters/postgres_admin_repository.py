"""PostgreSQL implementation of AdminRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from dealer_catalog.domain.admin import AdminAccount
from dealer_catalog.domain.errors import ConflictError
from dealer_catalog.infra.db.models.admin import AdminRow
from dealer_catalog.ports.admin_repository import AdminRepository


class PostgresAdminRepository(AdminRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_email(self, email: str) -> AdminAccount | None:
        query = select(AdminRow).where(AdminRow.email == email)
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def get_by_id(self, admin_id: str) -> AdminAccount | None:
        try:
            row = self._session.get(AdminRow, UUID(admin_id))
        except ValueError:  # Invalid UUID format
            return None
        return self._to_domain(row) if row else None

    def add(self, admin: AdminAccount) -> AdminAccount:
        row = AdminRow(
            id=UUID(admin.id),
            email=admin.email,
            password_hash=admin.password_hash,
            role=admin.role,
            is_active=admin.is_active,
        )
        try:
            with self._session.begin_nested():
                self._session.add(row)
        except IntegrityError as exc:
            raise ConflictError(
                "An admin with this email already exists", email=admin.email
            ) from exc
        return self._to_domain(row)

    def count(self) -> int:
        return self._session.execute(select(func.count()).select_from(AdminRow)).scalar() or 0

    def _to_domain(self, row: AdminRow) -> AdminAccount:
        return AdminAccount(
            id=str(row.id),
            email=row.email,
            password_hash=row.password_hash,
            role=row.role,
            is_active=row.is_active,
        )
