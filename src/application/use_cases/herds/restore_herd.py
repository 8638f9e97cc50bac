from __future__ import annotations

from uuid import UUID

from src.application.errors import HerdNotArchived
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.herds.common import clean_name, get_herd


async def execute(uow: UnitOfWork, owner_id: UUID, herd_name: str) -> None:
    name = clean_name(herd_name)
    herd = await get_herd(uow, owner_id, name, for_update=True)
    if not herd.archived:
        raise HerdNotArchived(f"Herd '{name}' is not archived and cannot be restored.")
    await uow.herds.restore(herd.id)
    await uow.commit()
