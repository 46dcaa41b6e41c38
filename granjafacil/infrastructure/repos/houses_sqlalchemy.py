from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from granjafacil.application.interfaces.repositories.houses import HousesRepository
from granjafacil.domain.errors import ConflictError, NotFound
from granjafacil.domain.models.house import House, Responsible
from granjafacil.infrastructure.db.orm.house import HouseORM

_FIELDS = (
    "name",
    "width_m",
    "length_m",
    "height_m",
    "density",
    "area_m2",
    "max_capacity",
    "manual_capacity",
    "capacity_override",
    "notes",
)


def _responsibles_to_json(people: list[Responsible]) -> list[dict]:
    return [{"name": p.name, "role": p.role} for p in people]


class HousesSQLAlchemyRepository(HousesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: HouseORM) -> House:
        return House(
            id=orm.id,
            name=orm.name,
            width_m=orm.width_m,
            length_m=orm.length_m,
            height_m=orm.height_m,
            density=orm.density,
            area_m2=orm.area_m2,
            max_capacity=orm.max_capacity,
            responsibles=[Responsible(**p) for p in orm.responsibles or []],
            manual_capacity=orm.manual_capacity,
            capacity_override=orm.capacity_override,
            notes=orm.notes,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, house: House) -> House:
        orm = HouseORM(
            id=house.id,
            responsibles=_responsibles_to_json(house.responsibles),
            created_at=house.created_at,
            updated_at=house.updated_at,
            **{f: getattr(house, f) for f in _FIELDS},
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                "House name already exists", details={"name": house.name}
            ) from exc
        return self._to_domain(orm)

    async def get(self, house_id: UUID) -> House | None:
        orm = await self.session.get(HouseORM, house_id)
        return self._to_domain(orm) if orm else None

    async def list(self) -> list[House]:
        res = await self.session.execute(select(HouseORM).order_by(HouseORM.name))
        return [self._to_domain(x) for x in res.scalars().all()]

    async def update(self, house: House) -> House:
        orm = await self.session.get(HouseORM, house.id)
        if orm is None:
            raise NotFound("House not found", details={"house_id": str(house.id)})
        for f in _FIELDS:
            setattr(orm, f, getattr(house, f))
        orm.responsibles = _responsibles_to_json(house.responsibles)
        orm.updated_at = datetime.now(timezone.utc)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                "House name already exists", details={"name": house.name}
            ) from exc
        return self._to_domain(orm)

    async def delete(self, house_id: UUID) -> bool:
        orm = await self.session.get(HouseORM, house_id)
        if orm is None:
            return False
        await self.session.delete(orm)
        await self.session.flush()
        return True
