from __future__ import annotations

from dataclasses import dataclass


ADMIN_ROLE = "admin"


@dataclass(frozen=True, slots=True)
class AdminAccount:
    id: str
    email: str
    password_hash: str
    role: str = ADMIN_ROLE
    is_active: bool = True


def normalize_email(email: str) -> str:
    return email.strip().lower()
