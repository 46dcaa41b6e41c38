from __future__ import annotations

from dataclasses import asdict

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from granjafacil.domain.errors import ConflictError, InfrastructureError, NotFound
from granjafacil.domain.models.breed import BreedParameters, PhaseParameters
from granjafacil.domain.ports.breeds_repo import BreedsRepo
from granjafacil.infrastructure.db.orm.breed import BreedORM


def _phases_to_json(phases: list[PhaseParameters]) -> list[dict]:
    return [asdict(p) for p in phases]


def _curve_to_json(curve: dict[int, int]) -> dict[str, int] | None:
    return {str(week): grams for week, grams in curve.items()} or None


class BreedsSQLAlchemyRepository(BreedsRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedORM) -> BreedParameters:
        return BreedParameters(
            id=orm.id,
            name=orm.name,
            phases=[PhaseParameters(**p) for p in orm.phases or []],
            growth_curve={int(k): int(v) for k, v in (orm.growth_curve or {}).items()},
            is_system_default=orm.is_system_default,
            active=orm.active,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, breed: BreedParameters) -> BreedParameters:
        orm = BreedORM(
            id=breed.id,
            name=breed.name,
            phases=_phases_to_json(breed.phases),
            growth_curve=_curve_to_json(breed.growth_curve),
            is_system_default=breed.is_system_default,
            active=breed.active,
            created_at=breed.created_at,
            updated_at=breed.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to create breed") from exc
        return self._to_domain(orm)

    async def get(self, breed_id: str) -> BreedParameters | None:
        orm = await self.session.get(BreedORM, breed_id)
        return self._to_domain(orm) if orm else None

    async def find_by_name(self, name: str) -> BreedParameters | None:
        res = await self.session.execute(
            select(BreedORM).where(func.lower(BreedORM.name) == name.lower())
        )
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self, *, active: bool | None = None) -> list[BreedParameters]:
        stmt = select(BreedORM)
        if active is not None:
            stmt = stmt.where(BreedORM.active.is_(active))
        stmt = stmt.order_by(BreedORM.is_system_default.desc(), BreedORM.name)
        res = await self.session.execute(stmt)
        return [self._to_domain(x) for x in res.scalars().all()]

    async def update(self, breed: BreedParameters) -> BreedParameters:
        orm = await self.session.get(BreedORM, breed.id)
        if orm is None:
            raise NotFound("Breed not found", details={"breed_id": breed.id})
        orm.name = breed.name
        orm.phases = _phases_to_json(breed.phases)
        orm.growth_curve = _curve_to_json(breed.growth_curve)
        orm.active = breed.active
        orm.updated_at = breed.updated_at
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise InfrastructureError("Failed to update breed") from exc
        return self._to_domain(orm)

    async def count(self) -> int:
        res = await self.session.execute(select(func.count()).select_from(BreedORM))
        return int(res.scalar_one())
