from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def log_level() -> str:
    return (os.getenv("LOG_LEVEL") or "INFO").upper()


def configure_logging() -> None:
    """Configure root logging once per process (no-op if handlers already exist)."""
    logging.basicConfig(level=log_level(), format=LOG_FORMAT)
