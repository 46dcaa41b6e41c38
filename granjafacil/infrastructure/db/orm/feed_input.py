from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DECIMAL, DateTime, ForeignKey, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from granjafacil.infrastructure.db.base import Base


class FeedInputORM(Base):
    __tablename__ = "feed_inputs"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    category: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    unit: Mapped[str] = mapped_column(String(8), nullable=False)
    price_per_unit: Mapped[Decimal] = mapped_column(DECIMAL(12, 4), nullable=False)
    current_stock: Mapped[Decimal] = mapped_column(DECIMAL(14, 3), nullable=False)
    minimum_stock: Mapped[Decimal] = mapped_column(DECIMAL(14, 3), nullable=False)
    supplier_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("suppliers.id", ondelete="SET NULL"), nullable=True
    )
    description: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class StockMovementORM(Base):
    __tablename__ = "stock_movements"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    feed_input_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("feed_inputs.id", ondelete="CASCADE"), index=True
    )
    type: Mapped[str] = mapped_column(String(4), nullable=False)
    quantity: Mapped[Decimal] = mapped_column(DECIMAL(14, 3), nullable=False)
    reason: Mapped[str] = mapped_column(String(255), nullable=False)
    responsible: Mapped[str] = mapped_column(String(100), nullable=False)
    unit_cost: Mapped[Decimal | None] = mapped_column(DECIMAL(12, 4), nullable=True)
    batch_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    invoice_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    notes: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
