from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from granjafacil.infrastructure.db.base import Base


class BatchORM(Base):
    __tablename__ = "batches"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    bird_count: Mapped[int] = mapped_column(Integer, nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    entry_date: Mapped[date] = mapped_column(Date, nullable=False)
    breed_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    house_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("houses.id", ondelete="RESTRICT"), nullable=True, index=True
    )
    cost_center: Mapped[str | None] = mapped_column(String(64), nullable=True)
    notes: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
