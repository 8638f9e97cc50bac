from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from src.application.errors import (
    AlreadyExists,
    PartialMembership,
    StorageTransient,
    ValidationError,
)
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.herds.common import (
    clean_animal_id,
    clean_name,
    ensure_active,
    ensure_found,
    lock_herds,
)
from src.domain.models.herd import Herd


@dataclass(slots=True)
class SplitMembersInput:
    source_name: str
    target_name: str
    animal_ids: list[str] = field(default_factory=list)


async def execute(uow: UnitOfWork, owner_id: UUID, payload: SplitMembersInput) -> Herd:
    """Move a batch of animals from ``source_name`` into ``target_name``.

    All requested animals must belong to the source, otherwise nothing is
    moved. A target herd that does not exist yet is created on the fly and
    returned; an archived target is rejected.
    """
    source_name = clean_name(payload.source_name, field="Source herd name")
    target_name = clean_name(payload.target_name, field="Target herd name")
    if source_name == target_name:
        raise ValidationError("Source and target herds cannot be the same for splitting.")
    animal_ids = list(dict.fromkeys(clean_animal_id(a) for a in payload.animal_ids or []))
    if not animal_ids:
        raise ValidationError("No animals specified to move for splitting.")

    herds = await lock_herds(uow, owner_id, source_name, target_name)
    source = ensure_active(
        ensure_found(herds[source_name], source_name, label="Source herd"), label="Source herd"
    )
    missing = source.missing_members(animal_ids)
    if missing:
        raise PartialMembership(
            f"Animals {', '.join(missing)} are not members of the source herd '{source_name}'.",
            missing=missing,
        )

    target = herds[target_name]
    if target is None:
        # Splitting into a new name creates that herd as part of the same transaction
        try:
            target = await uow.herds.add(Herd.create(owner_id=owner_id, name=target_name))
        except AlreadyExists as exc:
            raise StorageTransient(
                f"Target herd '{target_name}' was created concurrently; retry the split."
            ) from exc
    else:
        ensure_active(target, label="Target herd")

    await uow.herds.remove_members(source.id, animal_ids)
    await uow.herds.add_members(target.id, animal_ids)
    await uow.commit()
    return target
