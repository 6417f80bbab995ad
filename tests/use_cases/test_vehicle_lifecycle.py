"""Test suite for SetVehicleStatus and SoftDeleteVehicle use cases."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

import pytest

from dealer_catalog.adapters.in_memory_vehicle_repository import InMemoryVehicleRepository
from dealer_catalog.domain.errors import NotFoundError
from dealer_catalog.ports.vehicle_repository import VehicleFilters
from dealer_catalog.use_cases.create_vehicle import CreateVehicle, CreateVehicleRequest
from dealer_catalog.use_cases.set_vehicle_status import (
    SetVehicleStatus,
    SetVehicleStatusRequest,
    SetVehicleStatusResponse,
)
from dealer_catalog.use_cases.soft_delete_vehicle import (
    SoftDeleteVehicle,
    SoftDeleteVehicleRequest,
    SoftDeleteVehicleResponse,
)

VEHICLE_ID = "00000000-0000-0000-0000-000000000001"


@pytest.fixture()
def later(fixed_now: datetime) -> datetime:
    return fixed_now + timedelta(hours=1)


@pytest.fixture()
def repository(scooter_payload: dict[str, Any], fixed_now: datetime) -> InMemoryVehicleRepository:
    repo = InMemoryVehicleRepository()
    CreateVehicle(repo, clock=lambda: fixed_now, id_factory=lambda: VEHICLE_ID).execute(
        CreateVehicleRequest(payload=scooter_payload)
    )
    return repo


@pytest.fixture()
def set_status(repository: InMemoryVehicleRepository, later: datetime) -> SetVehicleStatus:
    return SetVehicleStatus(vehicle_repository=repository, clock=lambda: later)


@pytest.fixture()
def soft_delete(repository: InMemoryVehicleRepository, later: datetime) -> SoftDeleteVehicle:
    return SoftDeleteVehicle(vehicle_repository=repository, clock=lambda: later)


# ==============================================================================
# SetVehicleStatus
# ==============================================================================


def test_deactivate_hides_vehicle_from_public(
    set_status: SetVehicleStatus, repository: InMemoryVehicleRepository, later: datetime
) -> None:
    result = set_status.execute(SetVehicleStatusRequest(vehicle_id=VEHICLE_ID, is_active=False))

    assert isinstance(result, SetVehicleStatusResponse)
    assert result.vehicle.is_active is False
    assert result.vehicle.updated_at == later
    assert repository.list_public(VehicleFilters()) == []
    assert repository.get_public_by_slug("activa-6g") is None


def test_reactivate_shows_vehicle_again(
    set_status: SetVehicleStatus, repository: InMemoryVehicleRepository
) -> None:
    set_status.execute(SetVehicleStatusRequest(vehicle_id=VEHICLE_ID, is_active=False))

    result = set_status.execute(SetVehicleStatusRequest(vehicle_id=VEHICLE_ID, is_active=True))

    assert result.vehicle.is_active is True
    assert repository.get_public_by_slug("activa-6g") == result.vehicle


def test_set_status_unknown_vehicle_raises_not_found(set_status: SetVehicleStatus) -> None:
    with pytest.raises(NotFoundError):
        set_status.execute(SetVehicleStatusRequest(vehicle_id="missing", is_active=True))


def test_set_status_cannot_revive_deleted_vehicle(
    set_status: SetVehicleStatus,
    soft_delete: SoftDeleteVehicle,
    repository: InMemoryVehicleRepository,
) -> None:
    """Deleted is terminal."""
    soft_delete.execute(SoftDeleteVehicleRequest(vehicle_id=VEHICLE_ID))

    with pytest.raises(NotFoundError):
        set_status.execute(SetVehicleStatusRequest(vehicle_id=VEHICLE_ID, is_active=True))

    assert repository.list_public(VehicleFilters()) == []


# ==============================================================================
# SoftDeleteVehicle
# ==============================================================================


def test_soft_delete_keeps_record(
    soft_delete: SoftDeleteVehicle, repository: InMemoryVehicleRepository, later: datetime
) -> None:
    result = soft_delete.execute(SoftDeleteVehicleRequest(vehicle_id=VEHICLE_ID))

    assert isinstance(result, SoftDeleteVehicleResponse)
    assert result.vehicle.deleted_at == later
    assert result.vehicle.is_active is False
    assert repository.get_by_id(VEHICLE_ID) == result.vehicle
    assert [vehicle.id for vehicle in repository.list_all()] == [VEHICLE_ID]


def test_soft_delete_hides_vehicle_from_public(
    soft_delete: SoftDeleteVehicle, repository: InMemoryVehicleRepository
) -> None:
    soft_delete.execute(SoftDeleteVehicleRequest(vehicle_id=VEHICLE_ID))

    assert repository.list_public(VehicleFilters()) == []
    assert repository.get_public_by_slug("activa-6g") is None


def test_soft_delete_twice_raises_not_found(soft_delete: SoftDeleteVehicle) -> None:
    soft_delete.execute(SoftDeleteVehicleRequest(vehicle_id=VEHICLE_ID))

    with pytest.raises(NotFoundError):
        soft_delete.execute(SoftDeleteVehicleRequest(vehicle_id=VEHICLE_ID))


def test_soft_delete_unknown_vehicle_raises_not_found(soft_delete: SoftDeleteVehicle) -> None:
    with pytest.raises(NotFoundError):
        soft_delete.execute(SoftDeleteVehicleRequest(vehicle_id="missing"))
