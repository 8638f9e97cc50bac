from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import NotMember, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.herds.common import (
    clean_animal_id,
    clean_name,
    ensure_active,
    ensure_found,
    lock_herds,
)


@dataclass(slots=True)
class MoveMemberInput:
    source_name: str
    target_name: str
    animal_id: str


async def execute(uow: UnitOfWork, owner_id: UUID, payload: MoveMemberInput) -> None:
    source_name = clean_name(payload.source_name, field="Source herd name")
    target_name = clean_name(payload.target_name, field="Target herd name")
    animal_id = clean_animal_id(payload.animal_id)
    if source_name == target_name:
        raise ValidationError("Source and target herds cannot be the same for moving an animal.")

    herds = await lock_herds(uow, owner_id, source_name, target_name)
    source = ensure_active(
        ensure_found(herds[source_name], source_name, label="Source herd"), label="Source herd"
    )
    target = ensure_active(
        ensure_found(herds[target_name], target_name, label="Target herd"), label="Target herd"
    )
    if not source.has_member(animal_id):
        raise NotMember(
            f"Animal '{animal_id}' is not a member of source herd '{source_name}'."
        )

    await uow.herds.remove_members(source.id, [animal_id])
    # Already present in the target is fine: the add is a set union
    await uow.herds.add_members(target.id, [animal_id])
    await uow.commit()
