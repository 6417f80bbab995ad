from __future__ import annotations

import bcrypt

from dealer_catalog.ports.password_hasher import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt with a configurable cost factor (12 rounds by default)."""

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:  # Malformed stored hash
            return False
