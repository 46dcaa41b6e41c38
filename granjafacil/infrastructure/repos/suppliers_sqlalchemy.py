from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from granjafacil.application.interfaces.repositories.suppliers import SuppliersRepository
from granjafacil.domain.errors import ConflictError, InfrastructureError, NotFound
from granjafacil.domain.models.supplier import Supplier
from granjafacil.infrastructure.db.orm.supplier import SupplierORM

_FIELDS = ("name", "contact", "cnpj", "phone", "email", "address", "notes", "active")


class SuppliersSQLAlchemyRepository(SuppliersRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: SupplierORM) -> Supplier:
        return Supplier(
            id=orm.id,
            name=orm.name,
            contact=orm.contact,
            cnpj=orm.cnpj,
            phone=orm.phone,
            email=orm.email,
            address=orm.address,
            notes=orm.notes,
            active=orm.active,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, supplier: Supplier) -> Supplier:
        orm = SupplierORM(
            id=supplier.id,
            created_at=supplier.created_at,
            updated_at=supplier.updated_at,
            **{f: getattr(supplier, f) for f in _FIELDS},
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to create supplier") from exc
        return self._to_domain(orm)

    async def get(self, supplier_id: UUID) -> Supplier | None:
        orm = await self.session.get(SupplierORM, supplier_id)
        return self._to_domain(orm) if orm else None

    async def list(
        self, *, search: str | None = None, active: bool | None = None
    ) -> list[Supplier]:
        stmt = select(SupplierORM)
        if search:
            pattern = f"%{search.strip()}%"
            stmt = stmt.where(
                or_(
                    SupplierORM.name.ilike(pattern),
                    SupplierORM.contact.ilike(pattern),
                    SupplierORM.cnpj.ilike(pattern),
                )
            )
        if active is not None:
            stmt = stmt.where(SupplierORM.active.is_(active))
        res = await self.session.execute(stmt.order_by(SupplierORM.name))
        return [self._to_domain(x) for x in res.scalars().all()]

    async def update(self, supplier: Supplier) -> Supplier:
        orm = await self.session.get(SupplierORM, supplier.id)
        if orm is None:
            raise NotFound("Supplier not found", details={"supplier_id": str(supplier.id)})
        for f in _FIELDS:
            setattr(orm, f, getattr(supplier, f))
        orm.updated_at = datetime.now(timezone.utc)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise InfrastructureError("Failed to update supplier") from exc
        return self._to_domain(orm)

    async def delete(self, supplier_id: UUID) -> bool:
        orm = await self.session.get(SupplierORM, supplier_id)
        if orm is None:
            return False
        await self.session.delete(orm)
        await self.session.flush()
        return True
