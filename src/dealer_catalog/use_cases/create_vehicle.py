"""Create vehicle use case."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from dealer_catalog.domain.vehicle import Vehicle
from dealer_catalog.domain.vehicle_guard import build_vehicle
from dealer_catalog.domain.vehicle_payload import sanitize_vehicle_payload
from dealer_catalog.ports.vehicle_repository import VehicleRepository
from dealer_catalog.use_cases._clock import Clock, utc_now

logger = logging.getLogger(__name__)

# Lifecycle fields are owned by the system, never by the submitted payload
_SYSTEM_FIELDS = ("id", "is_active", "deleted_at", "created_at", "updated_at")


@dataclass(frozen=True, slots=True)
class CreateVehicleRequest:
    payload: Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class CreateVehicleResponse:
    vehicle: Vehicle


class CreateVehicle:
    """
    Add a vehicle to the catalogue.

    Flow: sanitize payload → build_vehicle (slug derivation + invariant guard)
    → repository.save (guard re-applied, slug uniqueness enforced).

    New vehicles are active and get a fresh UUID.
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        clock: Clock = utc_now,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ) -> None:
        self._repository = vehicle_repository
        self._clock = clock
        self._id_factory = id_factory

    def execute(self, request: CreateVehicleRequest) -> CreateVehicleResponse:
        """
        Raises:
            ValidationError: If the payload is incomplete, mistyped or breaks
                the category invariant
            ConflictError: If the derived slug is already taken
        """
        record = sanitize_vehicle_payload(request.payload)
        for field_name in _SYSTEM_FIELDS:
            record.pop(field_name, None)

        now = self._clock()
        record.update(id=self._id_factory(), is_active=True, created_at=now, updated_at=now)

        vehicle = self._repository.save(build_vehicle(record))

        logger.info(
            "Vehicle created",
            extra={"vehicle_id": vehicle.id, "slug": vehicle.slug, "category": vehicle.category_slug},
        )
        return CreateVehicleResponse(vehicle=vehicle)
