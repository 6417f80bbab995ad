"""Vehicle invariant guard.

The authoritative enforcement point for the vehicle schema. build_vehicle()
is the validating factory that turns a raw record into a Vehicle, and
ensure_category_invariant() is re-run by VehicleRepository.save() so no write
path (HTTP, seed scripts, direct repository use) can persist a vehicle whose
spec groups disagree with its category.
"""

from __future__ import annotations

from dataclasses import fields
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from dealer_catalog.domain.errors import ValidationError
from dealer_catalog.domain.vehicle import (
    BRAND_SLUG,
    CATEGORIES,
    CHANNELS,
    CURRENCY,
    EV_CATEGORY,
    ICE_CATEGORIES,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    BasePrice,
    ElectricSpec,
    EngineSpec,
    PerformanceSpec,
    Vehicle,
    VehicleImages,
    derive_slug,
)

_FOREIGN_FIELD_MESSAGES = {
    "engine": "EV vehicles cannot have engine specs",
    "performance": "EV vehicles cannot have mileage/performance",
    "electric": "ICE vehicles (scooter/motorcycle) cannot have electric specs",
}

_PRICE_LIMIT = Decimal(10) ** (PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES)
_PRICE_STEP = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)


def _error(field_name: str, message: str, code: str) -> dict[str, str]:
    return {"field": field_name, "message": message, "code": code}


def category_invariant_errors(
    category_slug: str, present_fields: set[str]
) -> list[dict[str, str]]:
    """
    Field errors for spec groups present on a record of the given category.

    Rule EV: no engine, no performance.
    Rule ICE: no electric.
    """
    if category_slug == EV_CATEGORY:
        offending = [name for name in ("engine", "performance") if name in present_fields]
    elif category_slug in ICE_CATEGORIES:
        offending = ["electric"] if "electric" in present_fields else []
    else:
        offending = []

    return [
        _error(name, _FOREIGN_FIELD_MESSAGES[name], "FIELD_NOT_ALLOWED") for name in offending
    ]


def ensure_category_invariant(vehicle: Vehicle) -> None:
    """
    Reject a vehicle whose populated spec groups disagree with its category.

    Raises:
        ValidationError: naming every offending field
    """
    present = {
        name
        for name, value in (
            ("engine", vehicle.engine),
            ("performance", vehicle.performance),
            ("electric", vehicle.electric),
        )
        if value is not None
    }
    errors = category_invariant_errors(vehicle.category_slug, present)
    if errors:
        raise ValidationError(errors=errors, vehicle_id=vehicle.id)


def build_vehicle(record: Mapping[str, Any]) -> Vehicle:
    """
    Validate a raw vehicle record and build the Vehicle entity.

    Steps, in order:
    1. Derive slug from name when no slug is supplied
    2. Check required fields, types and enumerations
    3. Check the category invariant against the groups present on the record

    Every problem is collected before raising, so the caller gets the full
    list of field errors in one ValidationError (message joined with ". ").

    Args:
        record: Payload-shaped mapping (see vehicle_payload) including "id"

    Returns:
        A Vehicle that satisfies every schema rule

    Raises:
        ValidationError: If any rule fails. Nothing is built in that case.
    """
    errors: list[dict[str, str]] = []

    vehicle_id = record.get("id")
    if not isinstance(vehicle_id, str) or not vehicle_id:
        errors.append(_error("id", "Vehicle id is required", "REQUIRED"))

    name = record.get("name")
    if isinstance(name, str):
        name = name.strip()
    if not isinstance(name, str) or not name:
        errors.append(_error("name", "Vehicle name is required", "REQUIRED"))
        name = ""

    slug = record.get("slug")
    if not slug and name:
        slug = derive_slug(name)
    if not isinstance(slug, str) or not slug:
        errors.append(_error("slug", "Vehicle slug is required", "REQUIRED"))
        slug = ""
    slug = slug.lower()

    category_slug = _choice(record, "category_slug", CATEGORIES, errors, required=True)
    channel_slug = _choice(record, "channel_slug", CHANNELS, errors, required=True)
    brand_slug = _choice(record, "brand_slug", (BRAND_SLUG,), errors, required=False) or BRAND_SLUG

    base_price = _base_price(record.get("base_price"), errors)
    engine = _spec_group(record, "engine", EngineSpec, errors)
    performance = _spec_group(record, "performance", PerformanceSpec, errors)
    electric = _spec_group(record, "electric", ElectricSpec, errors)
    images = _images(record.get("images"), errors)
    highlights = _string_list(record.get("highlights"), "highlights", errors)

    is_active = record.get("is_active", True)
    if not isinstance(is_active, bool):
        errors.append(_error("is_active", "Must be a boolean", "INVALID_TYPE"))

    timestamps: dict[str, datetime | None] = {}
    for field_name in ("deleted_at", "created_at", "updated_at"):
        value = record.get(field_name)
        if value is not None and not isinstance(value, datetime):
            errors.append(_error(field_name, "Must be a datetime", "INVALID_TYPE"))
            value = None
        timestamps[field_name] = value

    if category_slug is not None:
        present = {
            group for group in ("engine", "performance", "electric") if record.get(group) is not None
        }
        errors.extend(category_invariant_errors(category_slug, present))

    # base_price is None only when an error was recorded for it
    if errors or base_price is None:
        raise ValidationError(errors=errors)

    return Vehicle(
        id=vehicle_id,
        name=name,
        slug=slug,
        category_slug=category_slug,
        channel_slug=channel_slug,
        base_price=base_price,
        engine=engine,
        performance=performance,
        electric=electric,
        images=images,
        highlights=highlights,
        brand_slug=brand_slug,
        is_active=is_active,
        **timestamps,
    )


# ==============================================================================
# Field Parsers
# ==============================================================================


def _choice(
    record: Mapping[str, Any],
    field_name: str,
    allowed: tuple[str, ...],
    errors: list[dict[str, str]],
    *,
    required: bool,
) -> str | None:
    value = record.get(field_name)
    if value is None:
        if required:
            errors.append(_error(field_name, f"{field_name} is required", "REQUIRED"))
        return None
    if not isinstance(value, str) or value not in allowed:
        errors.append(
            _error(field_name, f"{field_name} must be one of: {', '.join(allowed)}", "INVALID_CHOICE")
        )
        return None
    return value


def _base_price(raw: Any, errors: list[dict[str, str]]) -> BasePrice | None:
    if raw is None:
        errors.append(_error("base_price", "Base price is required", "REQUIRED"))
        return None
    if not isinstance(raw, Mapping):
        errors.append(_error("base_price", "Must be an object", "INVALID_TYPE"))
        return None

    amount = raw.get("ex_showroom")
    ex_showroom: Decimal | None = None
    if amount is None:
        errors.append(_error("base_price.ex_showroom", "Ex-showroom price is required", "REQUIRED"))
    elif isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        errors.append(_error("base_price.ex_showroom", "Must be a number", "INVALID_TYPE"))
    else:
        try:
            ex_showroom = Decimal(str(amount))
        except InvalidOperation:
            ex_showroom = None
        if ex_showroom is None or not ex_showroom.is_finite() or ex_showroom < 0:
            errors.append(
                _error("base_price.ex_showroom", "Must be a non-negative number", "INVALID_VALUE")
            )
            ex_showroom = None
        elif ex_showroom >= _PRICE_LIMIT:
            errors.append(
                _error(
                    "base_price.ex_showroom",
                    f"Must be less than {_PRICE_LIMIT:f}",
                    "OUT_OF_RANGE",
                )
            )
            ex_showroom = None
        elif ex_showroom != ex_showroom.quantize(_PRICE_STEP):
            errors.append(
                _error(
                    "base_price.ex_showroom",
                    f"At most {PRICE_DECIMAL_PLACES} decimal places allowed",
                    "INVALID_VALUE",
                )
            )
            ex_showroom = None

    currency = raw.get("currency") or CURRENCY
    if currency != CURRENCY:
        errors.append(_error("base_price.currency", f"Currency must be {CURRENCY}", "INVALID_CHOICE"))

    if ex_showroom is None:
        return None
    return BasePrice(ex_showroom=ex_showroom, currency=CURRENCY)


def _spec_group(record: Mapping[str, Any], field_name: str, spec_cls: type, errors: list[dict[str, str]]):
    raw = record.get(field_name)
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        errors.append(_error(field_name, "Must be an object", "INVALID_TYPE"))
        return None

    values: dict[str, str] = {}
    for spec_field in fields(spec_cls):
        value = raw.get(spec_field.name)
        if value is None:
            continue
        if not isinstance(value, str):
            errors.append(_error(f"{field_name}.{spec_field.name}", "Must be a string", "INVALID_TYPE"))
            continue
        values[spec_field.name] = value
    return spec_cls(**values)


def _images(raw: Any, errors: list[dict[str, str]]) -> VehicleImages:
    if raw is None:
        return VehicleImages()
    if not isinstance(raw, Mapping):
        errors.append(_error("images", "Must be an object", "INVALID_TYPE"))
        return VehicleImages()

    thumbnail = raw.get("thumbnail") or ""
    if not isinstance(thumbnail, str):
        errors.append(_error("images.thumbnail", "Must be a string", "INVALID_TYPE"))
        thumbnail = ""
    gallery = _string_list(raw.get("gallery"), "images.gallery", errors)
    return VehicleImages(thumbnail=thumbnail, gallery=gallery)


def _string_list(raw: Any, field_name: str, errors: list[dict[str, str]]) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str) or not isinstance(raw, (list, tuple)):
        errors.append(_error(field_name, "Must be a list of strings", "INVALID_TYPE"))
        return ()
    if not all(isinstance(item, str) for item in raw):
        errors.append(_error(field_name, "Must be a list of strings", "INVALID_TYPE"))
        return ()
    return tuple(raw)
