from __future__ import annotations

from dataclasses import dataclass

from dealer_catalog.domain.vehicle import Vehicle
from dealer_catalog.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class ListAllVehiclesResponse:
    vehicles: list[Vehicle]


class ListAllVehicles:
    """Back-office listing: every vehicle, inactive and soft-deleted included."""

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self) -> ListAllVehiclesResponse:
        return ListAllVehiclesResponse(vehicles=self._repository.list_all())
