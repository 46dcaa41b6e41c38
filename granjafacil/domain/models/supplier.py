from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Supplier:
    id: UUID
    name: str
    contact: str
    cnpj: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    notes: str | None = None
    active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        name: str,
        contact: str,
        *,
        cnpj: str | None = None,
        phone: str | None = None,
        email: str | None = None,
        address: str | None = None,
        notes: str | None = None,
        active: bool = True,
    ) -> Supplier:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            name=name,
            contact=contact,
            cnpj=cnpj,
            phone=phone,
            email=email,
            address=address,
            notes=notes,
            active=active,
            created_at=now,
            updated_at=now,
        )
