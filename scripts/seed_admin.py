#!/usr/bin/env python3
"""
Create the first admin account.

Only runs when no admin exists yet, so it cannot be used to add accounts to
a live back-office. Change the password right after the first login.

Usage:
    ADMIN_EMAIL=owner@example.com ADMIN_PASSWORD=... python scripts/seed_admin.py
"""

from __future__ import annotations

import os
import sys
import uuid
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dealer_catalog.adapters.bcrypt_password_hasher import BcryptPasswordHasher
from dealer_catalog.adapters.postgres_admin_repository import PostgresAdminRepository
from dealer_catalog.domain.admin import AdminAccount, normalize_email
from dealer_catalog.infra.db.session import get_session


def seed_admin(email: str, password: str) -> bool:
    """
    Create the first admin.

    Returns:
        True if the admin was created, False if an admin already existed
    """
    with get_session() as session:
        repository = PostgresAdminRepository(session)

        if repository.count() > 0:
            print("⛔ Admin already exists. Seed blocked.")
            return False

        admin = repository.add(
            AdminAccount(
                id=str(uuid.uuid4()),
                email=normalize_email(email),
                password_hash=BcryptPasswordHasher().hash(password),
            )
        )

    print(f"✅ Admin created: {admin.email} (id={admin.id})")
    return True


if __name__ == "__main__":
    admin_email = os.getenv("ADMIN_EMAIL")
    admin_password = os.getenv("ADMIN_PASSWORD")

    if not admin_email or not admin_password:
        print("❌ ADMIN_EMAIL and ADMIN_PASSWORD must be set", file=sys.stderr)
        sys.exit(1)

    try:
        seed_admin(admin_email, admin_password)
    except Exception as e:
        print(f"❌ Error seeding admin: {e}", file=sys.stderr)
        sys.exit(1)
