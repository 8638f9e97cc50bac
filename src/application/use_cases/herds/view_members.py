from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.herds.common import clean_name, get_herd


async def execute(uow: UnitOfWork, owner_id: UUID, herd_name: str) -> list[str]:
    herd = await get_herd(uow, owner_id, clean_name(herd_name))
    return sorted(herd.members)
