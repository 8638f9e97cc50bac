from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.herds.common import (
    clean_name,
    ensure_active,
    ensure_found,
    lock_herds,
)


@dataclass(slots=True)
class MergeHerdsInput:
    keep_name: str
    archive_name: str


async def execute(uow: UnitOfWork, owner_id: UUID, payload: MergeHerdsInput) -> None:
    keep_name = clean_name(payload.keep_name)
    archive_name = clean_name(payload.archive_name)
    if keep_name == archive_name:
        raise ValidationError("Cannot merge a herd into itself.")

    herds = await lock_herds(uow, owner_id, keep_name, archive_name)
    keep = ensure_active(ensure_found(herds[keep_name], keep_name))
    to_archive = ensure_active(ensure_found(herds[archive_name], archive_name))

    if to_archive.members:
        await uow.herds.add_members(keep.id, sorted(to_archive.members))
    await uow.herds.archive(to_archive.id)
    await uow.commit()
