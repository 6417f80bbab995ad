from __future__ import annotations

from dataclasses import dataclass

from dealer_catalog.domain.vehicle import Vehicle
from dealer_catalog.ports.vehicle_repository import VehicleFilters, VehicleRepository


@dataclass(frozen=True, slots=True)
class ListPublicVehiclesRequest:
    filters: VehicleFilters = VehicleFilters()


@dataclass(frozen=True, slots=True)
class ListPublicVehiclesResponse:
    vehicles: list[Vehicle]


class ListPublicVehicles:
    """Active, non-deleted vehicles for the public site, newest first."""

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: ListPublicVehiclesRequest) -> ListPublicVehiclesResponse:
        return ListPublicVehiclesResponse(vehicles=self._repository.list_public(request.filters))
