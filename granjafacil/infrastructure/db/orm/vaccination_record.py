from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from granjafacil.infrastructure.db.base import Base


class VaccinationRecordORM(Base):
    __tablename__ = "vaccination_records"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    batch_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("batches.id", ondelete="CASCADE"), index=True
    )
    vaccine_id: Mapped[str] = mapped_column(String(64), nullable=False)
    application_date: Mapped[date] = mapped_column(Date, nullable=False)
    age_at_application: Mapped[int] = mapped_column(Integer, nullable=False)
    birds_vaccinated: Mapped[int] = mapped_column(Integer, nullable=False)
    responsible: Mapped[str] = mapped_column(String(100), nullable=False)
    vaccine_lot: Mapped[str | None] = mapped_column(String(64), nullable=True)
    notes: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    next_application_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
