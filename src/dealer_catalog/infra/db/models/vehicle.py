from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from dealer_catalog.infra.db.models.base import Base


class VehicleRow(Base):
    __tablename__ = "vehicles"
    __table_args__ = (
        UniqueConstraint("slug", name="uq_vehicles_slug"),
        # Mirrors the domain category invariant for writes that bypass the app
        CheckConstraint(
            "(category_slug = 'ev' AND engine IS NULL AND performance IS NULL)"
            " OR (category_slug <> 'ev' AND electric IS NULL)",
            name="ck_vehicles_category_spec_groups",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    slug: Mapped[str] = mapped_column(String(140), nullable=False)
    brand_slug: Mapped[str] = mapped_column(String(20), nullable=False, default="honda")

    category_slug: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    channel_slug: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    ex_showroom: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2), nullable=False
    )  # 9,999,999,999.99 INR
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="INR")

    # Spec groups: absent is SQL NULL (none_as_null), never {} or JSON null
    engine: Mapped[dict[str, Any] | None] = mapped_column(JSONB(none_as_null=True), nullable=True)
    performance: Mapped[dict[str, Any] | None] = mapped_column(
        JSONB(none_as_null=True), nullable=True
    )
    electric: Mapped[dict[str, Any] | None] = mapped_column(
        JSONB(none_as_null=True), nullable=True
    )

    thumbnail: Mapped[str] = mapped_column(Text, nullable=False, default="")
    gallery: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)
    highlights: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
