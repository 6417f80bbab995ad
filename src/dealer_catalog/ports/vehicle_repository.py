from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from dealer_catalog.domain.vehicle import Vehicle
from dealer_catalog.domain.vehicle_guard import ensure_category_invariant


@dataclass(frozen=True, slots=True)
class VehicleFilters:
    """Public listing filters (AND semantics, exact match)."""

    category_slug: str | None = None
    channel_slug: str | None = None


class VehicleRepository(ABC):
    """
    Port for vehicle persistence.

    save() is the only write entry point. It always re-checks the category
    invariant before handing the vehicle to the implementation, whatever code
    path produced the vehicle. Implementations override _write() and must:
        - insert when the id is unknown, replace the stored record otherwise
        - enforce slug uniqueness and raise ConflictError on duplicates
        - never delete records (soft delete is a save with deleted_at set)

    Read contract:
        - get_by_id() returns any record, including soft-deleted ones
        - get_public_by_slug() and list_public() only return active,
          non-deleted vehicles
        - listings are ordered newest first (created_at descending)
    """

    def save(self, vehicle: Vehicle) -> Vehicle:
        """
        Persist a vehicle (insert or replace).

        Raises:
            ValidationError: If the vehicle violates the category invariant
            ConflictError: If another vehicle already uses the slug
        """
        ensure_category_invariant(vehicle)
        return self._write(vehicle)

    @abstractmethod
    def _write(self, vehicle: Vehicle) -> Vehicle: ...

    @abstractmethod
    def get_by_id(self, vehicle_id: str) -> Vehicle | None: ...

    @abstractmethod
    def get_public_by_slug(self, slug: str) -> Vehicle | None: ...

    @abstractmethod
    def list_public(self, filters: VehicleFilters) -> list[Vehicle]: ...

    @abstractmethod
    def list_all(self) -> list[Vehicle]: ...
