from dealer_catalog.infra.db.models.admin import AdminRow
from dealer_catalog.infra.db.models.base import Base
from dealer_catalog.infra.db.models.vehicle import VehicleRow

__all__ = ["AdminRow", "Base", "VehicleRow"]
