from fastapi import APIRouter, Depends, status

from dealer_catalog.domain.admin import AdminAccount
from dealer_catalog.entrypoints.http.dependencies import (
    get_create_vehicle_use_case,
    get_list_all_vehicles_use_case,
    get_list_public_vehicles_use_case,
    get_public_vehicle_use_case,
    get_set_vehicle_status_use_case,
    get_soft_delete_vehicle_use_case,
    get_update_vehicle_use_case,
    require_admin,
)
from dealer_catalog.entrypoints.http.dtos.vehicles import (
    AdminVehicleDTO,
    AdminVehicleListDTO,
    PublicVehicleDTO,
    PublicVehicleListDTO,
    VehicleActionResponseDTO,
    VehicleCreateDTO,
    VehicleListQueryDTO,
    VehicleStatusDTO,
    VehicleUpdateDTO,
)
from dealer_catalog.entrypoints.http.error_responses import ErrorResponse
from dealer_catalog.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from dealer_catalog.use_cases.create_vehicle import CreateVehicle, CreateVehicleRequest
from dealer_catalog.use_cases.get_public_vehicle import GetPublicVehicle, GetPublicVehicleRequest
from dealer_catalog.use_cases.list_all_vehicles import ListAllVehicles
from dealer_catalog.use_cases.list_public_vehicles import (
    ListPublicVehicles,
    ListPublicVehiclesRequest,
)
from dealer_catalog.use_cases.set_vehicle_status import SetVehicleStatus, SetVehicleStatusRequest
from dealer_catalog.use_cases.soft_delete_vehicle import (
    SoftDeleteVehicle,
    SoftDeleteVehicleRequest,
)
from dealer_catalog.use_cases.update_vehicle import UpdateVehicle, UpdateVehicleRequest


router = APIRouter(tags=["Vehicles"])

_VALIDATION_EXAMPLE = {
    "model": ErrorResponse,
    "description": "Validation error",
    "content": {
        "application/json": {
            "example": {
                "detail": "EV vehicles cannot have engine specs",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "engine",
                        "message": "EV vehicles cannot have engine specs",
                        "code": "FIELD_NOT_ALLOWED",
                    }
                ],
            }
        }
    },
}


# ==============================================================================
# Public
# ==============================================================================


@router.get(
    "/vehicles",
    response_model=PublicVehicleListDTO,
    response_model_exclude_unset=True,
    summary="List catalogue vehicles",
    description="""
    Active, non-deleted vehicles, newest first.

    ## Filters
    - `category`: scooter | motorcycle | ev
    - `channel`: standard | bigwing

    ## Example
    ```
    GET /v1/vehicles?category=scooter&channel=standard
    ```
    """,
)
def list_public_vehicles(
    query: VehicleListQueryDTO = Depends(),
    use_case: ListPublicVehicles = Depends(get_list_public_vehicles_use_case),
) -> PublicVehicleListDTO:
    request = ListPublicVehiclesRequest(filters=VehicleMapper.to_domain_filters(query))
    result = use_case.execute(request)
    return VehicleMapper.to_public_list(result.vehicles)


@router.get(
    "/vehicles/public/{slug}",
    response_model=PublicVehicleDTO,
    response_model_exclude_unset=True,
    summary="Get a catalogue vehicle by slug",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown, inactive or deleted vehicle"},
    },
)
def get_public_vehicle(
    slug: str,
    use_case: GetPublicVehicle = Depends(get_public_vehicle_use_case),
) -> PublicVehicleDTO:
    result = use_case.execute(GetPublicVehicleRequest(slug=slug))
    return VehicleMapper.to_public_response(result.vehicle)


# ==============================================================================
# Admin
# ==============================================================================


@router.get(
    "/vehicles/admin",
    response_model=AdminVehicleListDTO,
    response_model_exclude_unset=True,
    summary="List every vehicle (admin)",
    description="Active, inactive and soft-deleted vehicles, newest first.",
)
def list_all_vehicles(
    _admin: AdminAccount = Depends(require_admin),
    use_case: ListAllVehicles = Depends(get_list_all_vehicles_use_case),
) -> AdminVehicleListDTO:
    result = use_case.execute()
    return VehicleMapper.to_admin_list(result.vehicles)


@router.post(
    "/vehicles",
    response_model=AdminVehicleDTO,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    summary="Add a vehicle (admin)",
    description="""
    Add a vehicle to the catalogue.

    - `slug` is derived from `name` when omitted ("Activa 6G" → "activa-6g")
    - `engine`/`performance` are dropped for EVs, `electric` for scooters and motorcycles
    - Duplicate slugs are rejected with 409
    """,
    responses={
        400: _VALIDATION_EXAMPLE,
        409: {"model": ErrorResponse, "description": "Slug already exists"},
    },
)
def create_vehicle(
    payload: VehicleCreateDTO,
    _admin: AdminAccount = Depends(require_admin),
    use_case: CreateVehicle = Depends(get_create_vehicle_use_case),
) -> AdminVehicleDTO:
    result = use_case.execute(CreateVehicleRequest(payload=VehicleMapper.to_payload(payload)))
    return VehicleMapper.to_admin_response(result.vehicle)


@router.patch(
    "/vehicles/{vehicle_id}",
    response_model=AdminVehicleDTO,
    response_model_exclude_unset=True,
    summary="Update a vehicle (admin)",
    description="""
    Partial update. Changing `categorySlug` clears the previous category's
    spec group. The merged record is validated as a whole.
    """,
    responses={
        400: _VALIDATION_EXAMPLE,
        404: {"model": ErrorResponse, "description": "Unknown or deleted vehicle"},
        409: {"model": ErrorResponse, "description": "Slug already exists"},
    },
)
def update_vehicle(
    vehicle_id: str,
    payload: VehicleUpdateDTO,
    _admin: AdminAccount = Depends(require_admin),
    use_case: UpdateVehicle = Depends(get_update_vehicle_use_case),
) -> AdminVehicleDTO:
    request = UpdateVehicleRequest(vehicle_id=vehicle_id, changes=VehicleMapper.to_payload(payload))
    result = use_case.execute(request)
    return VehicleMapper.to_admin_response(result.vehicle)


@router.patch(
    "/vehicles/{vehicle_id}/status",
    response_model=VehicleActionResponseDTO,
    response_model_exclude_unset=True,
    summary="Show or hide a vehicle (admin)",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown or deleted vehicle"},
    },
)
def set_vehicle_status(
    vehicle_id: str,
    payload: VehicleStatusDTO,
    _admin: AdminAccount = Depends(require_admin),
    use_case: SetVehicleStatus = Depends(get_set_vehicle_status_use_case),
) -> VehicleActionResponseDTO:
    request = SetVehicleStatusRequest(vehicle_id=vehicle_id, is_active=payload.is_active)
    result = use_case.execute(request)
    return VehicleActionResponseDTO(
        message="Vehicle activated" if result.vehicle.is_active else "Vehicle deactivated",
        vehicle=VehicleMapper.to_admin_response(result.vehicle),
    )


@router.delete(
    "/vehicles/{vehicle_id}",
    response_model=VehicleActionResponseDTO,
    response_model_exclude_unset=True,
    summary="Soft-delete a vehicle (admin)",
    description="Sets `deletedAt` and hides the vehicle. Records are never physically removed.",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown or already deleted vehicle"},
    },
)
def soft_delete_vehicle(
    vehicle_id: str,
    _admin: AdminAccount = Depends(require_admin),
    use_case: SoftDeleteVehicle = Depends(get_soft_delete_vehicle_use_case),
) -> VehicleActionResponseDTO:
    result = use_case.execute(SoftDeleteVehicleRequest(vehicle_id=vehicle_id))
    return VehicleActionResponseDTO(
        message="Vehicle soft-deleted",
        vehicle=VehicleMapper.to_admin_response(result.vehicle),
    )
