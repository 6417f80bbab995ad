from __future__ import annotations

from datetime import datetime, timezone

from dealer_catalog.domain.errors import ConflictError
from dealer_catalog.domain.vehicle import Vehicle
from dealer_catalog.ports.vehicle_repository import VehicleFilters, VehicleRepository

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class InMemoryVehicleRepository(VehicleRepository):
    """
    Canonical contract implementation for tests and scripts.

    - Stores vehicles keyed by id (insert or replace on save)
    - Enforces slug uniqueness across ids, like the unique index in PostgreSQL
    - Public reads hide inactive and soft-deleted vehicles
    - Listings are ordered newest first
    """

    def __init__(self, vehicles: list[Vehicle] | None = None) -> None:
        self._vehicles: dict[str, Vehicle] = {}
        for vehicle in vehicles or []:
            self.save(vehicle)

    def _write(self, vehicle: Vehicle) -> Vehicle:
        for other in self._vehicles.values():
            if other.slug == vehicle.slug and other.id != vehicle.id:
                raise ConflictError("A vehicle with this slug already exists", slug=vehicle.slug)

        self._vehicles[vehicle.id] = vehicle
        return vehicle

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        return self._vehicles.get(vehicle_id)

    def get_public_by_slug(self, slug: str) -> Vehicle | None:
        for vehicle in self._vehicles.values():
            if vehicle.slug == slug and vehicle.is_public:
                return vehicle
        return None

    def list_public(self, filters: VehicleFilters) -> list[Vehicle]:
        matches = [
            vehicle
            for vehicle in self._vehicles.values()
            if vehicle.is_public and self._matches(vehicle, filters)
        ]
        return self._newest_first(matches)

    def list_all(self) -> list[Vehicle]:
        return self._newest_first(list(self._vehicles.values()))

    def _matches(self, vehicle: Vehicle, filters: VehicleFilters) -> bool:
        if filters.category_slug and vehicle.category_slug != filters.category_slug:
            return False
        if filters.channel_slug and vehicle.channel_slug != filters.channel_slug:
            return False
        return True

    def _newest_first(self, vehicles: list[Vehicle]) -> list[Vehicle]:
        # Ties: most recently inserted first
        return sorted(
            reversed(vehicles),
            key=lambda vehicle: vehicle.created_at or _EPOCH,
            reverse=True,
        )
