from __future__ import annotations

from dataclasses import asdict
from typing import Any

from dealer_catalog.domain.vehicle import Vehicle
from dealer_catalog.entrypoints.http.dtos.vehicles import (
    AdminVehicleDTO,
    AdminVehicleListDTO,
    BasePriceResponseDTO,
    ElectricDTO,
    EngineDTO,
    ImagesDTO,
    PerformanceDTO,
    PublicVehicleDTO,
    PublicVehicleListDTO,
    VehicleCreateDTO,
    VehicleListQueryDTO,
    VehicleUpdateDTO,
)
from dealer_catalog.ports.vehicle_repository import VehicleFilters


class VehicleMapper:
    """Maps between REST DTOs and domain payloads / entities for vehicles."""

    @staticmethod
    def to_payload(dto: VehicleCreateDTO | VehicleUpdateDTO) -> dict[str, Any]:
        """
        Converts a request DTO to a domain payload (snake_case keys).

        Only fields the client actually sent are included, so a partial update
        never overwrites stored values with defaults and an omitted spec group
        stays absent.

        Args:
            dto: Create or update request body

        Returns:
            Payload mapping ready for sanitize_vehicle_payload()
        """
        return dto.model_dump(exclude_unset=True)

    @staticmethod
    def to_domain_filters(dto: VehicleListQueryDTO) -> VehicleFilters:
        return VehicleFilters(category_slug=dto.category, channel_slug=dto.channel)

    @staticmethod
    def _fields(vehicle: Vehicle) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "id": vehicle.id,
            "name": vehicle.name,
            "slug": vehicle.slug,
            "brand_slug": vehicle.brand_slug,
            "category_slug": vehicle.category_slug,
            "channel_slug": vehicle.channel_slug,
            "base_price": BasePriceResponseDTO(
                ex_showroom=str(vehicle.base_price.ex_showroom),  # Decimal → str at boundary
                currency=vehicle.base_price.currency,
            ),
            "images": ImagesDTO(
                thumbnail=vehicle.images.thumbnail,
                gallery=list(vehicle.images.gallery),
            ),
            "highlights": list(vehicle.highlights),
            "is_active": vehicle.is_active,
            "created_at": vehicle.created_at,
            "updated_at": vehicle.updated_at,
        }
        # Absent groups are left unset so they are omitted from the JSON
        if vehicle.engine is not None:
            fields["engine"] = EngineDTO(**asdict(vehicle.engine))
        if vehicle.performance is not None:
            fields["performance"] = PerformanceDTO(**asdict(vehicle.performance))
        if vehicle.electric is not None:
            fields["electric"] = ElectricDTO(**asdict(vehicle.electric))
        return fields

    @staticmethod
    def to_public_response(vehicle: Vehicle) -> PublicVehicleDTO:
        return PublicVehicleDTO(**VehicleMapper._fields(vehicle))

    @staticmethod
    def to_admin_response(vehicle: Vehicle) -> AdminVehicleDTO:
        return AdminVehicleDTO(**VehicleMapper._fields(vehicle), deleted_at=vehicle.deleted_at)

    @staticmethod
    def to_public_list(vehicles: list[Vehicle]) -> PublicVehicleListDTO:
        return PublicVehicleListDTO(
            vehicles=[VehicleMapper.to_public_response(vehicle) for vehicle in vehicles],
            total=len(vehicles),
        )

    @staticmethod
    def to_admin_list(vehicles: list[Vehicle]) -> AdminVehicleListDTO:
        return AdminVehicleListDTO(
            vehicles=[VehicleMapper.to_admin_response(vehicle) for vehicle in vehicles],
            total=len(vehicles),
        )
