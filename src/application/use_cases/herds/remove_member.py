from __future__ import annotations

from uuid import UUID

from src.application.errors import NotMember
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.herds.common import clean_animal_id, clean_name, get_active_herd


async def execute(uow: UnitOfWork, owner_id: UUID, herd_name: str, animal_id: str) -> None:
    name = clean_name(herd_name)
    animal_id = clean_animal_id(animal_id)
    herd = await get_active_herd(uow, owner_id, name)
    if not herd.has_member(animal_id):
        raise NotMember(f"Animal '{animal_id}' is not a member of herd '{name}'.")
    await uow.herds.remove_members(herd.id, [animal_id])
    await uow.commit()
