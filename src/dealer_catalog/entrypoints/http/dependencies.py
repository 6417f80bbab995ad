"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Only stateless singletons (token service, password hasher) use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from dealer_catalog.adapters.bcrypt_password_hasher import BcryptPasswordHasher
from dealer_catalog.adapters.jwt_token_service import JwtTokenService
from dealer_catalog.adapters.postgres_admin_repository import PostgresAdminRepository
from dealer_catalog.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from dealer_catalog.domain.admin import AdminAccount
from dealer_catalog.infra.auth.config import jwt_algorithm, jwt_expires_seconds, jwt_secret
from dealer_catalog.infra.db.session import get_session
from dealer_catalog.ports.admin_repository import AdminRepository
from dealer_catalog.ports.password_hasher import PasswordHasher
from dealer_catalog.ports.token_service import TokenService
from dealer_catalog.ports.vehicle_repository import VehicleRepository
from dealer_catalog.use_cases.admin_login import AdminLogin
from dealer_catalog.use_cases.authorize_admin import AuthorizeAdmin
from dealer_catalog.use_cases.create_vehicle import CreateVehicle
from dealer_catalog.use_cases.get_public_vehicle import GetPublicVehicle
from dealer_catalog.use_cases.list_all_vehicles import ListAllVehicles
from dealer_catalog.use_cases.list_public_vehicles import ListPublicVehicles
from dealer_catalog.use_cases.set_vehicle_status import SetVehicleStatus
from dealer_catalog.use_cases.soft_delete_vehicle import SoftDeleteVehicle
from dealer_catalog.use_cases.update_vehicle import UpdateVehicle

# auto_error=False: a missing header becomes our own 401 UNAUTHORIZED body
bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    FastAPI will:
    1. Call this function when a request starts
    2. Inject the session into the route
    3. Commit/rollback and close the session when the request ends

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


# ==============================================================================
# Repositories and Services
# ==============================================================================


def get_vehicle_repository(db: Session = Depends(get_db)) -> VehicleRepository:
    return PostgresVehicleRepository(session=db)


def get_admin_repository(db: Session = Depends(get_db)) -> AdminRepository:
    return PostgresAdminRepository(session=db)


@lru_cache
def get_token_service() -> TokenService:
    return JwtTokenService(
        secret=jwt_secret(),
        algorithm=jwt_algorithm(),
        expires_in_seconds=jwt_expires_seconds(),
    )


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher()


# ==============================================================================
# Use Cases
# ==============================================================================


def get_list_public_vehicles_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> ListPublicVehicles:
    return ListPublicVehicles(vehicle_repository=repository)


def get_public_vehicle_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> GetPublicVehicle:
    return GetPublicVehicle(vehicle_repository=repository)


def get_list_all_vehicles_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> ListAllVehicles:
    return ListAllVehicles(vehicle_repository=repository)


def get_create_vehicle_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> CreateVehicle:
    return CreateVehicle(vehicle_repository=repository)


def get_update_vehicle_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> UpdateVehicle:
    return UpdateVehicle(vehicle_repository=repository)


def get_set_vehicle_status_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> SetVehicleStatus:
    return SetVehicleStatus(vehicle_repository=repository)


def get_soft_delete_vehicle_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> SoftDeleteVehicle:
    return SoftDeleteVehicle(vehicle_repository=repository)


def get_admin_login_use_case(
    admins: AdminRepository = Depends(get_admin_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> AdminLogin:
    return AdminLogin(admin_repository=admins, password_hasher=hasher, token_service=tokens)


def get_authorize_admin_use_case(
    admins: AdminRepository = Depends(get_admin_repository),
    tokens: TokenService = Depends(get_token_service),
) -> AuthorizeAdmin:
    return AuthorizeAdmin(admin_repository=admins, token_service=tokens)


# ==============================================================================
# Auth Guard
# ==============================================================================


def require_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    use_case: AuthorizeAdmin = Depends(get_authorize_admin_use_case),
) -> AdminAccount:
    """
    Guard for admin-only routes.

    Raises UnauthorizedError / ForbiddenError, translated to 401 / 403 by
    the domain error handler.
    """
    token = credentials.credentials if credentials else None
    return use_case.execute(token)
