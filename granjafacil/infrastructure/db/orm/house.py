from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DECIMAL, JSON, Boolean, DateTime, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from granjafacil.infrastructure.db.base import Base


class HouseORM(Base):
    __tablename__ = "houses"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    width_m: Mapped[Decimal] = mapped_column(DECIMAL(6, 2), nullable=False)
    length_m: Mapped[Decimal] = mapped_column(DECIMAL(6, 2), nullable=False)
    height_m: Mapped[Decimal] = mapped_column(DECIMAL(6, 2), nullable=False)
    density: Mapped[Decimal] = mapped_column(DECIMAL(3, 1), nullable=False)
    area_m2: Mapped[Decimal] = mapped_column(DECIMAL(10, 2), nullable=False)
    max_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    manual_capacity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    capacity_override: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # [{"name", "role"}]
    responsibles: Mapped[list] = mapped_column(JSON, nullable=False)
    notes: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
