"""Tests for the vehicle payload sanitizer and partial-update merge."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from dealer_catalog.domain.vehicle import (
    BasePrice,
    ElectricSpec,
    EngineSpec,
    PerformanceSpec,
    Vehicle,
)
from dealer_catalog.domain.vehicle_payload import (
    merge_vehicle_changes,
    sanitize_vehicle_payload,
    vehicle_to_record,
)


# ==============================================================================
# sanitize_vehicle_payload
# ==============================================================================


def test_sanitize_ev_removes_engine_and_performance(ev_payload: dict[str, Any]) -> None:
    """EV payloads lose engine and performance keys entirely."""
    ev_payload["engine"] = {"power": "5 kW"}
    ev_payload["performance"] = {"mileage": "50 kmpl"}

    cleaned = sanitize_vehicle_payload(ev_payload)

    assert "engine" not in cleaned
    assert "performance" not in cleaned
    assert cleaned["electric"] == ev_payload["electric"]


def test_sanitize_scooter_removes_electric(scooter_payload: dict[str, Any]) -> None:
    """ICE payloads lose the electric key and keep engine/performance."""
    scooter_payload["electric"] = {"range": "100 km"}

    cleaned = sanitize_vehicle_payload(scooter_payload)

    assert "electric" not in cleaned
    assert cleaned["engine"] == scooter_payload["engine"]
    assert cleaned["performance"] == scooter_payload["performance"]


def test_sanitize_motorcycle_removes_electric() -> None:
    cleaned = sanitize_vehicle_payload({"category_slug": "motorcycle", "electric": {}})

    assert cleaned == {"category_slug": "motorcycle"}


def test_sanitize_removes_keys_rather_than_nulling_them() -> None:
    """Stripped groups are absent, not None."""
    cleaned = sanitize_vehicle_payload({"category_slug": "ev", "engine": {}})

    assert cleaned == {"category_slug": "ev"}


def test_sanitize_without_category_keeps_both_groups() -> None:
    """Partial payloads without category are left as submitted."""
    payload = {"engine": {"power": "5 kW"}, "electric": {"range": "80 km"}}

    assert sanitize_vehicle_payload(payload) == payload


def test_sanitize_unknown_category_keeps_payload() -> None:
    payload = {"category_slug": "truck", "engine": {}, "electric": {}}

    assert sanitize_vehicle_payload(payload) == payload


def test_sanitize_malformed_category_does_not_raise() -> None:
    """The sanitizer never raises, even for unhashable categories."""
    payload = {"category_slug": ["ev"], "engine": {}}

    assert sanitize_vehicle_payload(payload) == payload


def test_sanitize_returns_copy(ev_payload: dict[str, Any]) -> None:
    """The caller's payload is not mutated."""
    ev_payload["engine"] = {"power": "5 kW"}

    sanitize_vehicle_payload(ev_payload)

    assert "engine" in ev_payload


# ==============================================================================
# vehicle_to_record
# ==============================================================================


def test_vehicle_to_record_omits_absent_groups() -> None:
    vehicle = Vehicle(
        id="1",
        name="QC1",
        slug="qc1",
        category_slug="ev",
        channel_slug="standard",
        base_price=BasePrice(ex_showroom=Decimal("90000")),
        electric=ElectricSpec(range="80 km"),
    )

    record = vehicle_to_record(vehicle)

    assert "engine" not in record
    assert "performance" not in record
    assert record["electric"]["range"] == "80 km"
    assert record["base_price"] == {"ex_showroom": Decimal("90000"), "currency": "INR"}


# ==============================================================================
# merge_vehicle_changes
# ==============================================================================


def _scooter_record() -> dict[str, Any]:
    return vehicle_to_record(
        Vehicle(
            id="1",
            name="Activa 6G",
            slug="activa-6g",
            category_slug="scooter",
            channel_slug="standard",
            base_price=BasePrice(ex_showroom=Decimal("76684")),
            engine=EngineSpec(power="5.77 kW"),
            performance=PerformanceSpec(mileage="50 kmpl"),
            created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        )
    )


def test_merge_category_change_to_ev_unsets_stored_ice_groups() -> None:
    """Stored engine/performance do not survive a switch to EV."""
    merged = merge_vehicle_changes(
        _scooter_record(),
        {"category_slug": "ev", "electric": {"range": "102 km"}},
    )

    assert merged["category_slug"] == "ev"
    assert "engine" not in merged
    assert "performance" not in merged
    assert merged["electric"] == {"range": "102 km"}


def test_merge_category_change_to_ice_unsets_stored_electric() -> None:
    ev_record = {
        "id": "2",
        "name": "QC1",
        "slug": "qc1",
        "category_slug": "ev",
        "electric": {"range": "80 km"},
    }

    merged = merge_vehicle_changes(
        ev_record,
        {"category_slug": "motorcycle", "engine": {"power": "8 kW"}},
    )

    assert "electric" not in merged
    assert merged["engine"] == {"power": "8 kW"}


def test_merge_without_category_keeps_stored_groups() -> None:
    """A price-only update leaves the spec groups alone."""
    merged = merge_vehicle_changes(
        _scooter_record(),
        {"base_price": {"ex_showroom": Decimal("79999")}},
    )

    assert merged["engine"]["power"] == "5.77 kW"
    assert merged["base_price"] == {"ex_showroom": Decimal("79999")}


def test_merge_foreign_group_without_category_is_kept_for_the_guard() -> None:
    """Foreign groups on a category-less update are left for the guard to reject."""
    merged = merge_vehicle_changes(_scooter_record(), {"electric": {"range": "80 km"}})

    assert merged["electric"] == {"range": "80 km"}
    assert merged["category_slug"] == "scooter"


def test_merge_rename_drops_slug_for_rederivation() -> None:
    merged = merge_vehicle_changes(_scooter_record(), {"name": "Activa 7G"})

    assert "slug" not in merged
    assert merged["name"] == "Activa 7G"


def test_merge_rename_with_explicit_slug_keeps_it() -> None:
    merged = merge_vehicle_changes(
        _scooter_record(), {"name": "Activa 7G", "slug": "activa-special"}
    )

    assert merged["slug"] == "activa-special"


def test_merge_same_name_keeps_slug() -> None:
    merged = merge_vehicle_changes(_scooter_record(), {"name": "Activa 6G"})

    assert merged["slug"] == "activa-6g"
