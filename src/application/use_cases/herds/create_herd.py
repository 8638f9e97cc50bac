from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import AlreadyExists
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.herds.common import clean_name
from src.domain.models.herd import Herd


@dataclass(slots=True)
class CreateHerdInput:
    name: str
    description: str | None = None


async def execute(uow: UnitOfWork, owner_id: UUID, payload: CreateHerdInput) -> Herd:
    name = clean_name(payload.name)
    # The (owner_id, name) unique constraint still guards the insert against races
    existing = await uow.herds.get_by_name(owner_id, name)
    if existing:
        raise AlreadyExists(f"Herd '{name}' already exists.")
    herd = Herd.create(owner_id=owner_id, name=name, description=payload.description)
    created = await uow.herds.add(herd)
    await uow.commit()
    return created
