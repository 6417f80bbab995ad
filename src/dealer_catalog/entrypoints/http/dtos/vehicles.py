from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool
from pydantic.alias_generators import to_camel

CategorySlug = Literal["scooter", "motorcycle", "ev"]
ChannelSlug = Literal["standard", "bigwing"]


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire (categorySlug, exShowroom, ...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ==============================================================================
# Nested Groups
# ==============================================================================


class BasePriceDTO(CamelModel):
    ex_showroom: Decimal = Field(
        description="Ex-showroom price",
        examples=[76684],
        ge=0,
        max_digits=12,
        decimal_places=2,
    )
    currency: Literal["INR"] = "INR"


class EngineDTO(CamelModel):
    displacement: str = ""
    type: str = ""
    power: str = ""
    torque: str = ""


class PerformanceDTO(CamelModel):
    mileage: str = ""


class ElectricDTO(CamelModel):
    battery_capacity: str = ""
    range: str = ""
    charging_time: str = ""
    motor_power: str = ""
    charger_type: str = ""


class ImagesDTO(CamelModel):
    thumbnail: str = ""
    gallery: list[str] = Field(default_factory=list)


# ==============================================================================
# Requests
# ==============================================================================


class VehicleCreateDTO(CamelModel):
    """
    Payload for adding a vehicle.

    engine/performance belong to scooters and motorcycles, electric to EVs.
    Groups that do not match categorySlug are stripped before validation.
    """

    name: str = Field(min_length=1, max_length=120, examples=["Activa 6G"])
    slug: str | None = Field(
        default=None,
        description="Derived from name when omitted",
        max_length=140,
    )
    category_slug: CategorySlug
    channel_slug: ChannelSlug
    base_price: BasePriceDTO
    engine: EngineDTO | None = None
    performance: PerformanceDTO | None = None
    electric: ElectricDTO | None = None
    images: ImagesDTO | None = None
    highlights: list[str] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Activa 6G",
                "categorySlug": "scooter",
                "channelSlug": "standard",
                "basePrice": {"exShowroom": 76684, "currency": "INR"},
                "engine": {
                    "displacement": "109.51 cc",
                    "type": "Fan cooled, 4 stroke, SI engine",
                    "power": "5.77 kW @ 8000 rpm",
                    "torque": "8.90 Nm @ 5500 rpm",
                },
                "performance": {"mileage": "50 kmpl"},
                "highlights": ["Silent start", "Eco indicator"],
            }
        }
    )


class VehicleUpdateDTO(CamelModel):
    """Partial update. Only the fields sent are changed."""

    name: str | None = Field(default=None, min_length=1, max_length=120)
    slug: str | None = Field(default=None, max_length=140)
    category_slug: CategorySlug | None = None
    channel_slug: ChannelSlug | None = None
    base_price: BasePriceDTO | None = None
    engine: EngineDTO | None = None
    performance: PerformanceDTO | None = None
    electric: ElectricDTO | None = None
    images: ImagesDTO | None = None
    highlights: list[str] | None = None


class VehicleStatusDTO(CamelModel):
    is_active: StrictBool


class VehicleListQueryDTO(BaseModel):
    """Query parameters for the public vehicle listing."""

    category: CategorySlug | None = Field(default=None, description="Filter by category")
    channel: ChannelSlug | None = Field(default=None, description="Filter by sales channel")


# ==============================================================================
# Responses
# ==============================================================================


class BasePriceResponseDTO(CamelModel):
    ex_showroom: str = Field(description="Decimal as string", examples=["76684.00"])
    currency: str


class PublicVehicleDTO(CamelModel):
    """Vehicle as shown on the public site. Absent spec groups are omitted."""

    id: str
    name: str
    slug: str
    brand_slug: str
    category_slug: str
    channel_slug: str
    base_price: BasePriceResponseDTO
    engine: EngineDTO | None = None
    performance: PerformanceDTO | None = None
    electric: ElectricDTO | None = None
    images: ImagesDTO
    highlights: list[str]
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AdminVehicleDTO(PublicVehicleDTO):
    deleted_at: datetime | None = None


class PublicVehicleListDTO(CamelModel):
    vehicles: list[PublicVehicleDTO]
    total: int


class AdminVehicleListDTO(CamelModel):
    vehicles: list[AdminVehicleDTO]
    total: int


class VehicleActionResponseDTO(CamelModel):
    message: str
    vehicle: AdminVehicleDTO
