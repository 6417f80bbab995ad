from __future__ import annotations

from dealer_catalog.entrypoints.http.dtos.admin import (
    AdminLoginRequestDTO,
    AdminLoginResponseDTO,
    AdminSummaryDTO,
)
from dealer_catalog.use_cases.admin_login import AdminLoginRequest, AdminLoginResponse


class AdminMapper:
    """Maps between REST DTOs and admin use case models. Never exposes the password hash."""

    @staticmethod
    def to_domain_request(dto: AdminLoginRequestDTO) -> AdminLoginRequest:
        return AdminLoginRequest(email=dto.email, password=dto.password)

    @staticmethod
    def to_response(result: AdminLoginResponse) -> AdminLoginResponseDTO:
        return AdminLoginResponseDTO(
            token=result.token,
            admin=AdminSummaryDTO(
                id=result.admin.id,
                email=result.admin.email,
                role=result.admin.role,
            ),
        )
