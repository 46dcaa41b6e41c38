from __future__ import annotations

from uuid import UUID

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.application.use_cases.suppliers._validation import normalize_cnpj, validate_names
from granjafacil.domain.errors import NotFound
from granjafacil.domain.models.supplier import Supplier


async def execute(uow: UnitOfWork, supplier_id: UUID, data: dict) -> Supplier:
    """Apply a partial update; `data` holds only the fields sent by the client."""
    supplier = await uow.suppliers.get(supplier_id)
    if supplier is None:
        raise NotFound("Supplier not found", details={"supplier_id": str(supplier_id)})
    for key in ("name", "contact", "active"):
        if data.get(key) is not None:
            setattr(supplier, key, data[key])
    for key in ("phone", "email", "address", "notes"):
        if key in data:
            setattr(supplier, key, data[key])
    if "cnpj" in data:
        supplier.cnpj = normalize_cnpj(data["cnpj"])
    validate_names(supplier.name, supplier.contact)
    supplier.name = supplier.name.strip()
    supplier.contact = supplier.contact.strip()
    updated = await uow.suppliers.update(supplier)
    await uow.commit()
    return updated
