from __future__ import annotations

from granjafacil.application.interfaces.unit_of_work import UnitOfWork
from granjafacil.domain.models.feed_input import FeedInput
from granjafacil.domain.value_objects.inventory import FeedInputCategory


async def execute(
    uow: UnitOfWork,
    *,
    category: FeedInputCategory | None = None,
    search: str | None = None,
    low_stock_only: bool = False,
) -> list[FeedInput]:
    items = await uow.feed_inputs.list(category=category, search=search)
    if low_stock_only:
        items = [i for i in items if i.is_low_stock]
    return items
