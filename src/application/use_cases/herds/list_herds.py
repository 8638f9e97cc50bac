from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.herd import HerdSummary


async def execute(uow: UnitOfWork, owner_id: UUID, *, archived: bool = False) -> list[HerdSummary]:
    return await uow.herds.list_summaries(owner_id, archived=archived)
