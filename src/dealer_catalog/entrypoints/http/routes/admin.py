from fastapi import APIRouter, Depends

from dealer_catalog.entrypoints.http.dependencies import get_admin_login_use_case
from dealer_catalog.entrypoints.http.dtos.admin import (
    AdminLoginRequestDTO,
    AdminLoginResponseDTO,
)
from dealer_catalog.entrypoints.http.error_responses import ErrorResponse
from dealer_catalog.entrypoints.http.mappers.admin_mapper import AdminMapper
from dealer_catalog.use_cases.admin_login import AdminLogin


router = APIRouter(tags=["Admin"])


@router.post(
    "/admin/login",
    response_model=AdminLoginResponseDTO,
    summary="Admin login",
    description="""
    Exchange admin credentials for a bearer token.

    There is no sign-up; the first admin is created with `scripts/seed_admin.py`.
    Send the token as `Authorization: Bearer <token>` on admin routes.
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Email or password missing"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
        403: {"model": ErrorResponse, "description": "Account is deactivated"},
    },
)
def admin_login(
    payload: AdminLoginRequestDTO,
    use_case: AdminLogin = Depends(get_admin_login_use_case),
) -> AdminLoginResponseDTO:
    result = use_case.execute(AdminMapper.to_domain_request(payload))
    return AdminMapper.to_response(result)
