from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal


# ==============================================================================
# Catalogue Vocabulary
# ==============================================================================

BRAND_SLUG = "honda"
CURRENCY = "INR"

# Prices are stored as NUMERIC(12, 2)
PRICE_MAX_DIGITS = 12
PRICE_DECIMAL_PLACES = 2

EV_CATEGORY = "ev"
ICE_CATEGORIES = ("scooter", "motorcycle")
CATEGORIES = (*ICE_CATEGORIES, EV_CATEGORY)

CHANNELS = ("standard", "bigwing")

# Mutually exclusive spec groups, selected by category_slug
ICE_FIELDS = ("engine", "performance")
EV_FIELDS = ("electric",)

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")


def derive_slug(name: str) -> str:
    """
    Derive a URL slug from a vehicle name.

    "Activa 6G" -> "activa-6g"
    "  Honda--CB350 RS!!" -> "honda-cb350-rs"
    """
    return _NON_ALNUM_RUN.sub("-", name.lower()).strip("-")


def foreign_fields(category_slug: object) -> tuple[str, ...]:
    """Spec groups a vehicle of the given category must not carry."""
    if category_slug == EV_CATEGORY:
        return ICE_FIELDS
    if category_slug in ICE_CATEGORIES:
        return EV_FIELDS
    return ()


# ==============================================================================
# Value Objects
# ==============================================================================


@dataclass(frozen=True, slots=True)
class BasePrice:
    ex_showroom: Decimal
    currency: str = CURRENCY


@dataclass(frozen=True, slots=True)
class EngineSpec:
    displacement: str = ""
    type: str = ""
    power: str = ""
    torque: str = ""


@dataclass(frozen=True, slots=True)
class PerformanceSpec:
    mileage: str = ""


@dataclass(frozen=True, slots=True)
class ElectricSpec:
    battery_capacity: str = ""
    range: str = ""
    charging_time: str = ""
    motor_power: str = ""
    charger_type: str = ""


@dataclass(frozen=True, slots=True)
class VehicleImages:
    thumbnail: str = ""
    gallery: tuple[str, ...] = ()


# ==============================================================================
# Vehicle Entity
# ==============================================================================


@dataclass(frozen=True, slots=True)
class Vehicle:
    """
    A catalogue vehicle.

    Obtain instances through vehicle_guard.build_vehicle(); it derives the
    slug and rejects records whose spec groups disagree with category_slug.
    Lifecycle transitions return new instances.
    """

    id: str
    name: str
    slug: str
    category_slug: str
    channel_slug: str
    base_price: BasePrice
    engine: EngineSpec | None = None
    performance: PerformanceSpec | None = None
    electric: ElectricSpec | None = None
    images: VehicleImages = field(default_factory=VehicleImages)
    highlights: tuple[str, ...] = ()
    brand_slug: str = BRAND_SLUG
    is_active: bool = True
    deleted_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_public(self) -> bool:
        return self.is_active and not self.is_deleted

    def with_status(self, is_active: bool, now: datetime) -> Vehicle:
        """Toggle visibility. Never touches deleted_at."""
        return replace(self, is_active=is_active, updated_at=now)

    def soft_deleted(self, now: datetime) -> Vehicle:
        """Terminal transition: hide the vehicle for good, keep the record."""
        return replace(self, is_active=False, deleted_at=now, updated_at=now)
