from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

import pytest


@pytest.fixture()
def scooter_payload() -> dict[str, Any]:
    """Valid scooter payload (snake_case domain keys)."""
    return {
        "name": "Activa 6G",
        "category_slug": "scooter",
        "channel_slug": "standard",
        "base_price": {"ex_showroom": Decimal("76684"), "currency": "INR"},
        "engine": {
            "displacement": "109.51 cc",
            "type": "Fan cooled, 4 stroke, SI engine",
            "power": "5.77 kW @ 8000 rpm",
            "torque": "8.90 Nm @ 5500 rpm",
        },
        "performance": {"mileage": "50 kmpl"},
        "images": {"thumbnail": "activa.png", "gallery": ["a1.png", "a2.png"]},
        "highlights": ["Silent start", "Eco indicator"],
    }


@pytest.fixture()
def ev_payload() -> dict[str, Any]:
    """Valid EV payload (snake_case domain keys)."""
    return {
        "name": "Activa e:",
        "category_slug": "ev",
        "channel_slug": "standard",
        "base_price": {"ex_showroom": Decimal("117000")},
        "electric": {
            "battery_capacity": "2 x 1.5 kWh",
            "range": "102 km",
            "charging_time": "Battery swap",
            "motor_power": "6 kW",
            "charger_type": "Swap station",
        },
    }


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2026, 1, 15, 10, 30, tzinfo=timezone.utc)
