"""
Test suite for InMemoryVehicleRepository.

This suite is the reference for the VehicleRepository contract:
- Save: insert/replace, invariant guard on every write, slug uniqueness
- Public Reads: inactive and soft-deleted vehicles are hidden
- Listing Order: newest first
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from dealer_catalog.adapters.in_memory_vehicle_repository import InMemoryVehicleRepository
from dealer_catalog.domain.errors import ConflictError, ValidationError
from dealer_catalog.domain.vehicle import (
    BasePrice,
    ElectricSpec,
    EngineSpec,
    PerformanceSpec,
    Vehicle,
)
from dealer_catalog.ports.vehicle_repository import VehicleFilters

T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _vehicle(
    vehicle_id: str,
    slug: str,
    category: str = "scooter",
    channel: str = "standard",
    minutes: int = 0,
    **overrides,
) -> Vehicle:
    groups: dict = (
        {"electric": ElectricSpec(range="100 km")}
        if category == "ev"
        else {"engine": EngineSpec(power="5 kW"), "performance": PerformanceSpec(mileage="50 kmpl")}
    )
    return Vehicle(
        id=vehicle_id,
        name=slug.replace("-", " ").title(),
        slug=slug,
        category_slug=category,
        channel_slug=channel,
        base_price=BasePrice(ex_showroom=Decimal("80000")),
        created_at=T0 + timedelta(minutes=minutes),
        updated_at=T0 + timedelta(minutes=minutes),
        **groups,
        **overrides,
    )


@pytest.fixture()
def vehicles() -> list[Vehicle]:
    return [
        _vehicle("1", "activa-6g", minutes=1),
        _vehicle("2", "shine-100", category="motorcycle", minutes=2),
        _vehicle("3", "cb350-rs", category="motorcycle", channel="bigwing", minutes=3),
        _vehicle("4", "qc1", category="ev", minutes=4),
        _vehicle("5", "dio-125", minutes=5, is_active=False),
        _vehicle("6", "old-activa", minutes=6, deleted_at=T0),
    ]


# ==============================================================================
# Save
# ==============================================================================


def test_save_inserts_new_vehicle() -> None:
    repo = InMemoryVehicleRepository()
    vehicle = _vehicle("1", "activa-6g")

    assert repo.save(vehicle) is vehicle
    assert repo.get_by_id("1") == vehicle


def test_save_replaces_existing_vehicle(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)
    updated = replace(vehicles[0], name="Activa 6G DLX")

    repo.save(updated)

    assert repo.get_by_id("1") == updated
    assert len(repo.list_all()) == len(vehicles)


def test_save_keeps_own_slug_on_replace(vehicles: list[Vehicle]) -> None:
    """Re-saving a vehicle with its own slug is not a conflict."""
    repo = InMemoryVehicleRepository(vehicles)

    repo.save(replace(vehicles[0], is_active=False))


def test_save_rejects_duplicate_slug(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    with pytest.raises(ConflictError) as exc_info:
        repo.save(_vehicle("99", "activa-6g"))

    assert exc_info.value.context == {"slug": "activa-6g"}
    assert repo.get_by_id("99") is None


def test_soft_deleted_vehicle_still_owns_its_slug(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    with pytest.raises(ConflictError):
        repo.save(_vehicle("99", "old-activa"))


def test_save_runs_invariant_guard() -> None:
    """An EV with engine specs never reaches storage, however it was built."""
    repo = InMemoryVehicleRepository()
    bad = replace(_vehicle("1", "qc1", category="ev"), engine=EngineSpec(power="5 kW"))

    with pytest.raises(ValidationError) as exc_info:
        repo.save(bad)

    assert exc_info.value.message == "EV vehicles cannot have engine specs"
    assert repo.get_by_id("1") is None


def test_save_rejects_ice_vehicle_with_electric_group() -> None:
    repo = InMemoryVehicleRepository()
    bad = replace(_vehicle("1", "shine"), electric=ElectricSpec())

    with pytest.raises(ValidationError):
        repo.save(bad)


# ==============================================================================
# Reads
# ==============================================================================


def test_get_by_id_returns_soft_deleted_vehicle(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    vehicle = repo.get_by_id("6")

    assert vehicle is not None
    assert vehicle.is_deleted


def test_get_by_id_unknown_returns_none(vehicles: list[Vehicle]) -> None:
    assert InMemoryVehicleRepository(vehicles).get_by_id("nope") is None


def test_get_public_by_slug(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    vehicle = repo.get_public_by_slug("qc1")

    assert vehicle is not None
    assert vehicle.id == "4"


@pytest.mark.parametrize("slug", ["dio-125", "old-activa", "missing"])
def test_get_public_by_slug_hides_non_public(vehicles: list[Vehicle], slug: str) -> None:
    assert InMemoryVehicleRepository(vehicles).get_public_by_slug(slug) is None


def test_list_public_hides_inactive_and_deleted(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    result = repo.list_public(VehicleFilters())

    assert [vehicle.id for vehicle in result] == ["4", "3", "2", "1"]


def test_list_public_filters_by_category(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    result = repo.list_public(VehicleFilters(category_slug="motorcycle"))

    assert [vehicle.id for vehicle in result] == ["3", "2"]


def test_list_public_filters_are_combined(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    result = repo.list_public(VehicleFilters(category_slug="motorcycle", channel_slug="bigwing"))

    assert [vehicle.id for vehicle in result] == ["3"]


def test_list_public_no_matches(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    assert repo.list_public(VehicleFilters(category_slug="ev", channel_slug="bigwing")) == []


def test_list_all_includes_inactive_and_deleted(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    result = repo.list_all()

    assert [vehicle.id for vehicle in result] == ["6", "5", "4", "3", "2", "1"]


def test_listing_ties_put_latest_insert_first() -> None:
    repo = InMemoryVehicleRepository([_vehicle("a", "first"), _vehicle("b", "second")])

    assert [vehicle.id for vehicle in repo.list_all()] == ["b", "a"]


def test_empty_repository() -> None:
    repo = InMemoryVehicleRepository()

    assert repo.list_all() == []
    assert repo.list_public(VehicleFilters()) == []
