from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.herds.common import clean_name, get_herd
from src.domain.models.herd import DeleteOutcome


async def execute(uow: UnitOfWork, owner_id: UUID, herd_name: str) -> DeleteOutcome:
    """Archive an active herd, or permanently remove an already archived one."""
    name = clean_name(herd_name)
    herd = await get_herd(uow, owner_id, name, for_update=True)
    if not herd.archived:
        await uow.herds.archive(herd.id)
        await uow.commit()
        return DeleteOutcome.ARCHIVED
    deleted = await uow.herds.delete(herd.id)
    if not deleted:
        raise NotFound(f"Herd '{name}' not found.")
    await uow.commit()
    return DeleteOutcome.DELETED
