from __future__ import annotations

import logging
from dataclasses import dataclass

from dealer_catalog.domain.errors import NotFoundError
from dealer_catalog.domain.vehicle import Vehicle
from dealer_catalog.ports.vehicle_repository import VehicleRepository
from dealer_catalog.use_cases._clock import Clock, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SoftDeleteVehicleRequest:
    vehicle_id: str


@dataclass(frozen=True, slots=True)
class SoftDeleteVehicleResponse:
    vehicle: Vehicle


class SoftDeleteVehicle:
    """
    Hide a vehicle for good while keeping the record.

    Sets deleted_at and forces is_active to False. Records are never
    physically removed.
    """

    def __init__(self, vehicle_repository: VehicleRepository, clock: Clock = utc_now) -> None:
        self._repository = vehicle_repository
        self._clock = clock

    def execute(self, request: SoftDeleteVehicleRequest) -> SoftDeleteVehicleResponse:
        """
        Raises:
            NotFoundError: If the vehicle does not exist or is already deleted
        """
        current = self._repository.get_by_id(request.vehicle_id)
        if current is None or current.is_deleted:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        vehicle = self._repository.save(current.soft_deleted(self._clock()))

        logger.info("Vehicle soft-deleted", extra={"vehicle_id": vehicle.id, "slug": vehicle.slug})
        return SoftDeleteVehicleResponse(vehicle=vehicle)
