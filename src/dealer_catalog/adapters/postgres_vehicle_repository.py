"""PostgreSQL implementation of VehicleRepository."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from dealer_catalog.domain.errors import ConflictError, InternalError
from dealer_catalog.domain.vehicle import (
    BasePrice,
    ElectricSpec,
    EngineSpec,
    PerformanceSpec,
    Vehicle,
    VehicleImages,
)
from dealer_catalog.infra.db.models.vehicle import VehicleRow
from dealer_catalog.ports.vehicle_repository import VehicleFilters, VehicleRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import Select

SLUG_UNIQUE_CONSTRAINT = "uq_vehicles_slug"


class PostgresVehicleRepository(VehicleRepository):
    """
    PostgreSQL implementation of VehicleRepository.

    - Uses SQLAlchemy ORM for database access
    - Spec groups live in JSONB columns; NULL means the group is absent
    - Writes are flushed inside a SAVEPOINT so a duplicate slug surfaces as
      ConflictError and leaves the request session usable
    - Converts VehicleRow (infrastructure) to Vehicle (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def _write(self, vehicle: Vehicle) -> Vehicle:
        """
        Insert or replace the row for vehicle.id.

        Raises:
            ConflictError: If the slug is already used by another vehicle
            InternalError: If any other storage constraint rejects the row
        """
        try:
            with self._session.begin_nested():
                row = self._session.get(VehicleRow, UUID(vehicle.id))
                if row is None:
                    row = VehicleRow(id=UUID(vehicle.id))
                    self._session.add(row)
                self._apply(row, vehicle)
        except IntegrityError as exc:
            if SLUG_UNIQUE_CONSTRAINT in str(exc.orig):
                raise ConflictError(
                    "A vehicle with this slug already exists", slug=vehicle.slug
                ) from exc
            raise InternalError(
                "Vehicle row rejected by a storage constraint",
                vehicle_id=vehicle.id,
                reason=str(exc.orig),
            ) from exc

        return self._to_domain(row)

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        """
        Get any vehicle by ID, soft-deleted ones included.

        Returns:
            Vehicle if found, None otherwise (also for malformed UUIDs)
        """
        try:
            row = self._session.get(VehicleRow, UUID(vehicle_id))
        except ValueError:  # Invalid UUID format
            return None
        return self._to_domain(row) if row else None

    def get_public_by_slug(self, slug: str) -> Vehicle | None:
        query = self._public_query().where(VehicleRow.slug == slug)
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def list_public(self, filters: VehicleFilters) -> list[Vehicle]:
        query = self._public_query()

        if filters.category_slug:
            query = query.where(VehicleRow.category_slug == filters.category_slug)
        if filters.channel_slug:
            query = query.where(VehicleRow.channel_slug == filters.channel_slug)

        rows = self._session.execute(query.order_by(VehicleRow.created_at.desc())).scalars().all()
        return [self._to_domain(row) for row in rows]

    def list_all(self) -> list[Vehicle]:
        query = select(VehicleRow).order_by(VehicleRow.created_at.desc())
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def _public_query(self) -> Select[tuple[VehicleRow]]:
        return select(VehicleRow).where(
            VehicleRow.is_active.is_(True),
            VehicleRow.deleted_at.is_(None),
        )

    def _apply(self, row: VehicleRow, vehicle: Vehicle) -> None:
        """Copy every domain field onto the row, replacing absent groups with NULL."""
        row.name = vehicle.name
        row.slug = vehicle.slug
        row.brand_slug = vehicle.brand_slug
        row.category_slug = vehicle.category_slug
        row.channel_slug = vehicle.channel_slug
        row.ex_showroom = vehicle.base_price.ex_showroom
        row.currency = vehicle.base_price.currency
        row.engine = asdict(vehicle.engine) if vehicle.engine else None
        row.performance = asdict(vehicle.performance) if vehicle.performance else None
        row.electric = asdict(vehicle.electric) if vehicle.electric else None
        row.thumbnail = vehicle.images.thumbnail
        row.gallery = list(vehicle.images.gallery)
        row.highlights = list(vehicle.highlights)
        row.is_active = vehicle.is_active
        row.deleted_at = vehicle.deleted_at
        if vehicle.created_at is not None:
            row.created_at = vehicle.created_at
        if vehicle.updated_at is not None:
            row.updated_at = vehicle.updated_at

    def _to_domain(self, row: VehicleRow) -> Vehicle:
        """
        Convert database model (VehicleRow) to domain entity (Vehicle).

        Args:
            row: SQLAlchemy VehicleRow model

        Returns:
            Vehicle domain entity
        """
        return Vehicle(
            id=str(row.id),  # Convert UUID to string
            name=row.name,
            slug=row.slug,
            brand_slug=row.brand_slug,
            category_slug=row.category_slug,
            channel_slug=row.channel_slug,
            base_price=BasePrice(ex_showroom=row.ex_showroom, currency=row.currency),
            engine=EngineSpec(**row.engine) if row.engine is not None else None,
            performance=PerformanceSpec(**row.performance) if row.performance is not None else None,
            electric=ElectricSpec(**row.electric) if row.electric is not None else None,
            images=VehicleImages(thumbnail=row.thumbnail, gallery=tuple(row.gallery or ())),
            highlights=tuple(row.highlights or ()),
            is_active=row.is_active,
            deleted_at=row.deleted_at,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
