#!/usr/bin/env python3
"""
Seed the vehicles table with the dealership's core catalogue.

Features:
- Goes through CreateVehicle, so every record passes the same sanitizer and
  invariant guard as the admin API
- Idempotent: vehicles whose slug already exists are skipped, nothing is
  ever deleted (soft delete only)

Usage:
    python scripts/seed_vehicles.py
"""

from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path
from typing import Any

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dealer_catalog.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from dealer_catalog.domain.vehicle import derive_slug
from dealer_catalog.infra.db.session import get_session
from dealer_catalog.use_cases.create_vehicle import CreateVehicle, CreateVehicleRequest


# ==============================================================================
# Catalogue
# ==============================================================================

CATALOGUE: list[dict[str, Any]] = [
    {
        "name": "Activa 6G",
        "category_slug": "scooter",
        "channel_slug": "standard",
        "base_price": {"ex_showroom": Decimal("76684")},
        "engine": {
            "displacement": "109.51 cc",
            "type": "Fan cooled, 4 stroke, SI engine",
            "power": "5.77 kW @ 8000 rpm",
            "torque": "8.90 Nm @ 5500 rpm",
        },
        "performance": {"mileage": "50 kmpl"},
        "highlights": ["Silent start with ACG", "Eco indicator", "External fuel lid"],
    },
    {
        "name": "Dio 125",
        "category_slug": "scooter",
        "channel_slug": "standard",
        "base_price": {"ex_showroom": Decimal("83400")},
        "engine": {
            "displacement": "123.92 cc",
            "type": "4 stroke, SI engine",
            "power": "6.11 kW @ 6250 rpm",
            "torque": "10.5 Nm @ 5000 rpm",
        },
        "performance": {"mileage": "48 kmpl"},
        "highlights": ["Smart key", "Digital meter"],
    },
    {
        "name": "Shine 100",
        "category_slug": "motorcycle",
        "channel_slug": "standard",
        "base_price": {"ex_showroom": Decimal("64900")},
        "engine": {
            "displacement": "98.98 cc",
            "type": "4 stroke, SI engine",
            "power": "5.43 kW @ 7500 rpm",
            "torque": "8.05 Nm @ 5000 rpm",
        },
        "performance": {"mileage": "65 kmpl"},
        "highlights": ["Long seat", "Combi-brake system"],
    },
    {
        "name": "CB350 RS",
        "category_slug": "motorcycle",
        "channel_slug": "bigwing",
        "base_price": {"ex_showroom": Decimal("215000")},
        "engine": {
            "displacement": "348.36 cc",
            "type": "Air cooled, 4 stroke, OHC single cylinder",
            "power": "15.5 kW @ 5500 rpm",
            "torque": "30 Nm @ 3000 rpm",
        },
        "performance": {"mileage": "35 kmpl"},
        "highlights": ["Assist & slipper clutch", "Honda Selectable Torque Control"],
    },
    {
        "name": "Activa e:",
        "category_slug": "ev",
        "channel_slug": "standard",
        "base_price": {"ex_showroom": Decimal("117000")},
        "electric": {
            "battery_capacity": "2 x 1.5 kWh swappable",
            "range": "102 km",
            "charging_time": "Battery swap",
            "motor_power": "6 kW",
            "charger_type": "Honda e: Swap station",
        },
        "highlights": ["Swappable batteries", "Three riding modes"],
    },
    {
        "name": "QC1",
        "category_slug": "ev",
        "channel_slug": "standard",
        "base_price": {"ex_showroom": Decimal("90000")},
        "electric": {
            "battery_capacity": "1.5 kWh fixed",
            "range": "80 km",
            "charging_time": "4.5 h (0-80%)",
            "motor_power": "1.8 kW",
            "charger_type": "Home charger",
        },
        "highlights": ["LCD display", "USB Type-C socket"],
    },
]


# ==============================================================================
# Seeding
# ==============================================================================


def seed_vehicles(catalogue: list[dict[str, Any]] = CATALOGUE) -> None:
    """Create every catalogue vehicle whose slug is not in the database yet."""
    print(f"🌱 Seeding catalogue with {len(catalogue)} vehicles...")

    with get_session() as session:
        repository = PostgresVehicleRepository(session)
        create_vehicle = CreateVehicle(vehicle_repository=repository)

        existing_slugs = {vehicle.slug for vehicle in repository.list_all()}
        created = 0

        for payload in catalogue:
            slug = derive_slug(payload["name"])
            if slug in existing_slugs:
                print(f"   ⏭️  {slug} already exists, skipping")
                continue

            result = create_vehicle.execute(CreateVehicleRequest(payload=payload))
            created += 1
            print(
                f"   ✅ {result.vehicle.name} ({result.vehicle.category_slug}) - "
                f"₹{result.vehicle.base_price.ex_showroom:,.0f}"
            )

    print(f"✅ Created {created} vehicles, skipped {len(catalogue) - created}")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_vehicles()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
