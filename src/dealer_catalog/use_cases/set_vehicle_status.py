from __future__ import annotations

import logging
from dataclasses import dataclass

from dealer_catalog.domain.errors import NotFoundError
from dealer_catalog.domain.vehicle import Vehicle
from dealer_catalog.ports.vehicle_repository import VehicleRepository
from dealer_catalog.use_cases._clock import Clock, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SetVehicleStatusRequest:
    vehicle_id: str
    is_active: bool


@dataclass(frozen=True, slots=True)
class SetVehicleStatusResponse:
    vehicle: Vehicle


class SetVehicleStatus:
    """
    Show or hide a vehicle on the public site without deleting it.

    Deleted is terminal: a soft-deleted vehicle is reported as not found,
    so toggling can never bring it back.
    """

    def __init__(self, vehicle_repository: VehicleRepository, clock: Clock = utc_now) -> None:
        self._repository = vehicle_repository
        self._clock = clock

    def execute(self, request: SetVehicleStatusRequest) -> SetVehicleStatusResponse:
        current = self._repository.get_by_id(request.vehicle_id)
        if current is None or current.is_deleted:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        vehicle = self._repository.save(current.with_status(request.is_active, self._clock()))

        logger.info(
            "Vehicle activated" if vehicle.is_active else "Vehicle deactivated",
            extra={"vehicle_id": vehicle.id},
        )
        return SetVehicleStatusResponse(vehicle=vehicle)
