from __future__ import annotations

from abc import ABC, abstractmethod

from granjafacil.domain.models.breed import BreedParameters


class BreedsRepo(ABC):
    @abstractmethod
    async def add(self, breed: BreedParameters) -> BreedParameters: ...

    @abstractmethod
    async def get(self, breed_id: str) -> BreedParameters | None: ...

    @abstractmethod
    async def find_by_name(self, name: str) -> BreedParameters | None: ...

    @abstractmethod
    async def list(self, *, active: bool | None = None) -> list[BreedParameters]: ...

    @abstractmethod
    async def update(self, breed: BreedParameters) -> BreedParameters: ...

    @abstractmethod
    async def count(self) -> int: ...
