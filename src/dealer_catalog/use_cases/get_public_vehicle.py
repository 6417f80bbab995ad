"""Get public vehicle by slug use case."""

from __future__ import annotations

from dataclasses import dataclass

from dealer_catalog.domain.errors import NotFoundError
from dealer_catalog.domain.vehicle import Vehicle
from dealer_catalog.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class GetPublicVehicleRequest:
    slug: str


@dataclass(frozen=True, slots=True)
class GetPublicVehicleResponse:
    vehicle: Vehicle


class GetPublicVehicle:
    """
    Use case for the public vehicle detail page.

    Responsibilities:
    - Look the vehicle up by its slug
    - Raise NotFoundError for unknown, inactive or soft-deleted vehicles
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: GetPublicVehicleRequest) -> GetPublicVehicleResponse:
        vehicle = self._repository.get_public_by_slug(request.slug)

        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.slug)

        return GetPublicVehicleResponse(vehicle=vehicle)
