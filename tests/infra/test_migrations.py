"""Tests for the alembic schema migration."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType
from unittest.mock import Mock

import pytest
import sqlalchemy as sa

from dealer_catalog.infra.db.models.vehicle import VehicleRow

MIGRATION_PATH = (
    Path(__file__).resolve().parents[2]
    / "alembic"
    / "versions"
    / "3c41d0e8b7a2_create_vehicles_and_admins.py"
)


def _load_migration() -> ModuleType:
    spec = importlib.util.spec_from_file_location("create_vehicles_and_admins", MIGRATION_PATH)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture()
def vehicle_columns(monkeypatch: pytest.MonkeyPatch) -> dict[str, sa.Column]:
    """Columns passed to op.create_table("vehicles", ...) by upgrade()."""
    migration = _load_migration()
    op = Mock()
    monkeypatch.setattr(migration, "op", op)

    migration.upgrade()

    (vehicles_call,) = [
        call for call in op.create_table.call_args_list if call.args[0] == "vehicles"
    ]
    return {
        element.name: element
        for element in vehicles_call.args[1:]
        if isinstance(element, sa.Column)
    }


@pytest.mark.parametrize("column", ["engine", "performance", "electric"])
def test_spec_group_columns_store_none_as_sql_null(
    vehicle_columns: dict[str, sa.Column], column: str
) -> None:
    assert vehicle_columns[column].nullable is True
    assert vehicle_columns[column].type.none_as_null is True


def test_vehicle_columns_match_model(vehicle_columns: dict[str, sa.Column]) -> None:
    assert set(vehicle_columns) == set(VehicleRow.__table__.c.keys())


def test_price_column_is_numeric_12_2(vehicle_columns: dict[str, sa.Column]) -> None:
    price_type = vehicle_columns["ex_showroom"].type

    assert isinstance(price_type, sa.Numeric)
    assert (price_type.precision, price_type.scale) == (12, 2)
