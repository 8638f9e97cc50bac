from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class DeleteOutcome(str, Enum):
    ARCHIVED = "archived"
    DELETED = "deleted"


@dataclass(slots=True)
class Herd:
    id: UUID
    owner_id: UUID
    name: str
    description: str | None = None
    members: set[str] = field(default_factory=set)
    archived: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        owner_id: UUID,
        name: str,
        *,
        description: str | None = None,
    ) -> Herd:
        return cls(
            id=uuid4(),
            owner_id=owner_id,
            name=name,
            description=description,
            members=set(),
            archived=False,
            created_at=datetime.now(timezone.utc),
        )

    def has_member(self, animal_id: str) -> bool:
        return animal_id in self.members

    def missing_members(self, animal_ids: list[str]) -> list[str]:
        return [animal_id for animal_id in animal_ids if animal_id not in self.members]


@dataclass(slots=True, frozen=True)
class HerdSummary:
    name: str
    description: str | None
    archived: bool
