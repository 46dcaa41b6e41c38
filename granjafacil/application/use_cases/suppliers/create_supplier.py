from __future__ import annotations

from dataclasses import dataclass

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.application.use_cases.suppliers._validation import normalize_cnpj, validate_names
from granjafacil.domain.models.supplier import Supplier


@dataclass(slots=True)
class CreateSupplierInput:
    name: str
    contact: str
    cnpj: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    notes: str | None = None
    active: bool = True


async def execute(uow: UnitOfWork, payload: CreateSupplierInput) -> Supplier:
    validate_names(payload.name, payload.contact)
    supplier = Supplier.create(
        payload.name.strip(),
        payload.contact.strip(),
        cnpj=normalize_cnpj(payload.cnpj),
        phone=payload.phone,
        email=payload.email,
        address=payload.address,
        notes=payload.notes,
        active=payload.active,
    )
    created = await uow.suppliers.add(supplier)
    await uow.commit()
    return created
