from __future__ import annotations

from uuid import UUID

from src.application.errors import HerdArchived, NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.herd import Herd


def clean_name(name: str | None, *, field: str = "Herd name") -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError(f"{field} cannot be empty.")
    return cleaned


def clean_animal_id(animal_id: str | None) -> str:
    # Animal ids are opaque: blank ids are rejected, others are kept verbatim
    if not animal_id or not animal_id.strip():
        raise ValidationError("Animal id cannot be empty.")
    return animal_id


def ensure_found(herd: Herd | None, name: str, *, label: str = "Herd") -> Herd:
    if herd is None:
        raise NotFound(f"{label} '{name}' not found.")
    return herd


def ensure_active(herd: Herd, *, label: str = "Herd") -> Herd:
    if herd.archived:
        raise HerdArchived(f"{label} '{herd.name}' is archived and cannot be modified.")
    return herd


async def get_herd(
    uow: UnitOfWork, owner_id: UUID, name: str, *, for_update: bool = False
) -> Herd:
    herd = await uow.herds.get_by_name(owner_id, name, for_update=for_update)
    return ensure_found(herd, name)


async def get_active_herd(uow: UnitOfWork, owner_id: UUID, name: str) -> Herd:
    herd = await get_herd(uow, owner_id, name, for_update=True)
    return ensure_active(herd)


async def lock_herds(uow: UnitOfWork, owner_id: UUID, *names: str) -> dict[str, Herd | None]:
    """Load and row-lock several herds of one owner.

    Rows are locked in name order so two transactions touching the same pair of
    herds always acquire their locks in the same sequence.
    """
    locked: dict[str, Herd | None] = {}
    for name in sorted(set(names)):
        locked[name] = await uow.herds.get_by_name(owner_id, name, for_update=True)
    return locked
