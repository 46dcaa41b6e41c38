from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import (
    DECIMAL,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from granjafacil.infrastructure.db.base import Base


class EggProductionORM(Base):
    __tablename__ = "egg_productions"
    __table_args__ = (UniqueConstraint("batch_id", "date", name="uq_egg_production_batch_date"),)

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    batch_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("batches.id", ondelete="CASCADE"), index=True
    )
    date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    eggs_collected: Mapped[int] = mapped_column(Integer, nullable=False)
    bird_count: Mapped[int] = mapped_column(Integer, nullable=False)
    laying_rate: Mapped[Decimal] = mapped_column(DECIMAL(5, 2), nullable=False)
    notes: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
