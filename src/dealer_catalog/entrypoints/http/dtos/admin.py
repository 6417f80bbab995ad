from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class AdminLoginRequestDTO(BaseModel):
    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "admin@example.com", "password": "••••••••"}}
    )


class AdminSummaryDTO(BaseModel):
    id: str
    email: str
    role: str


class AdminLoginResponseDTO(BaseModel):
    token: str
    admin: AdminSummaryDTO
