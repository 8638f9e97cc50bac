from __future__ import annotations

from typing import Iterable, Protocol
from uuid import UUID

from src.domain.models.herd import Herd, HerdSummary


class HerdsRepository(Protocol):
    async def add(self, herd: Herd) -> Herd: ...

    async def get_by_name(
        self, owner_id: UUID, name: str, *, for_update: bool = False
    ) -> Herd | None: ...

    async def list_summaries(self, owner_id: UUID, *, archived: bool) -> list[HerdSummary]: ...

    # Strict insert: raises AlreadyMember when the animal is already present
    async def add_member(self, herd_id: UUID, animal_id: str) -> None: ...

    # Set union: animals already present are left as-is
    async def add_members(self, herd_id: UUID, animal_ids: Iterable[str]) -> None: ...

    async def remove_members(self, herd_id: UUID, animal_ids: Iterable[str]) -> None: ...

    # Flags the herd as archived and clears its members
    async def archive(self, herd_id: UUID) -> None: ...

    async def restore(self, herd_id: UUID) -> None: ...

    async def delete(self, herd_id: UUID) -> bool: ...
