"""Update vehicle use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from dealer_catalog.domain.errors import NotFoundError
from dealer_catalog.domain.vehicle import Vehicle
from dealer_catalog.domain.vehicle_guard import build_vehicle
from dealer_catalog.domain.vehicle_payload import merge_vehicle_changes, vehicle_to_record
from dealer_catalog.ports.vehicle_repository import VehicleRepository
from dealer_catalog.use_cases._clock import Clock, utc_now

logger = logging.getLogger(__name__)

# Status and deletion have their own use cases
_PROTECTED_FIELDS = ("id", "is_active", "deleted_at", "created_at", "updated_at")


@dataclass(frozen=True, slots=True)
class UpdateVehicleRequest:
    vehicle_id: str
    changes: Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class UpdateVehicleResponse:
    vehicle: Vehicle


class UpdateVehicle:
    """
    Apply a partial update to a vehicle.

    The changes are merged over the stored record (see merge_vehicle_changes)
    and the guard validates the final merged record, not just the diff:
    - changing category_slug purges the previous category's spec group
    - sending engine specs to a stored EV without changing its category is
      rejected rather than silently dropped
    """

    def __init__(self, vehicle_repository: VehicleRepository, clock: Clock = utc_now) -> None:
        self._repository = vehicle_repository
        self._clock = clock

    def execute(self, request: UpdateVehicleRequest) -> UpdateVehicleResponse:
        """
        Raises:
            NotFoundError: If the vehicle does not exist or was soft-deleted
            ValidationError: If the merged record breaks a schema rule
            ConflictError: If a renamed vehicle collides with another slug
        """
        current = self._repository.get_by_id(request.vehicle_id)
        if current is None or current.is_deleted:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        changes = {
            key: value for key, value in request.changes.items() if key not in _PROTECTED_FIELDS
        }
        merged = merge_vehicle_changes(vehicle_to_record(current), changes)
        merged["updated_at"] = self._clock()

        vehicle = self._repository.save(build_vehicle(merged))

        logger.info(
            "Vehicle updated",
            extra={
                "vehicle_id": vehicle.id,
                "fields": sorted(changes),
                "category_changed": vehicle.category_slug != current.category_slug,
            },
        )
        return UpdateVehicleResponse(vehicle=vehicle)
