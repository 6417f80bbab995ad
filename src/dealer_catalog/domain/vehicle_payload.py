"""Vehicle payload sanitization.

First of the two protection layers for the category invariant: strips spec
groups that do not belong to the submitted category before anything reaches
the persistence layer. The invariant guard (vehicle_guard) is the second,
authoritative layer.

Payloads are plain mappings with snake_case keys, e.g.:

    {
        "name": "Activa 6G",
        "category_slug": "scooter",
        "channel_slug": "standard",
        "base_price": {"ex_showroom": Decimal("76684"), "currency": "INR"},
        "engine": {"displacement": "109.51 cc", ...},
        "performance": {"mileage": "50 kmpl"},
    }
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Mapping

from dealer_catalog.domain.vehicle import ICE_FIELDS, EV_FIELDS, Vehicle, foreign_fields


def sanitize_vehicle_payload(payload: Mapping[str, Any]) -> dict[str, Any]:
    """
    Remove the spec groups that do not belong to payload["category_slug"].

    - "ev": engine and performance are removed
    - "scooter" / "motorcycle": electric is removed
    - category absent or unknown: payload is returned as submitted

    Keys are removed, not nulled. Never raises; returns a cleaned copy.
    """
    cleaned = dict(payload)
    for field_name in foreign_fields(cleaned.get("category_slug")):
        cleaned.pop(field_name, None)
    return cleaned


def vehicle_to_record(vehicle: Vehicle) -> dict[str, Any]:
    """Flatten a stored vehicle back into payload form. Absent groups are omitted."""
    record = asdict(vehicle)
    for field_name in (*ICE_FIELDS, *EV_FIELDS):
        if record[field_name] is None:
            del record[field_name]
    return record


def merge_vehicle_changes(
    current: Mapping[str, Any], changes: Mapping[str, Any]
) -> dict[str, Any]:
    """
    Apply a partial update to a stored record.

    The incoming changes are sanitized and shallow-merged over the stored
    record. Sanitizing alone is not enough: the stored record may still hold
    the group of the previous category, so whenever the changes carry
    category_slug the opposite group is explicitly unset on the merged record.

    When the name changes and no slug is supplied, the stored slug is dropped
    so the guard derives a fresh one.

    The result must still go through build_vehicle(); a partial update that
    leaves category_slug alone is validated against the stored category.
    """
    cleaned = sanitize_vehicle_payload(changes)
    merged = {**current, **cleaned}

    if "slug" not in cleaned and "name" in cleaned and cleaned["name"] != current.get("name"):
        merged.pop("slug", None)

    if "category_slug" in cleaned:
        for field_name in foreign_fields(cleaned["category_slug"]):
            merged.pop(field_name, None)

    return merged
