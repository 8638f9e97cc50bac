from __future__ import annotations

from dataclasses import replace
from typing import Iterable
from uuid import UUID

import pytest

from src.application.errors import AlreadyExists, AlreadyMember
from src.domain.models.herd import Herd, HerdSummary


class InMemoryHerdsRepository:
    def __init__(self) -> None:
        self.by_id: dict[UUID, Herd] = {}

    def _find(self, owner_id: UUID, name: str) -> Herd | None:
        for herd in self.by_id.values():
            if herd.owner_id == owner_id and herd.name == name:
                return herd
        return None

    def seed(self, herd: Herd) -> Herd:
        self.by_id[herd.id] = herd
        return herd

    async def add(self, herd: Herd) -> Herd:
        if self._find(herd.owner_id, herd.name):
            raise AlreadyExists(f"Herd '{herd.name}' already exists.")
        self.by_id[herd.id] = replace(herd, members=set(herd.members))
        return herd

    async def get_by_name(self, owner_id: UUID, name: str, *, for_update: bool = False):
        herd = self._find(owner_id, name)
        return replace(herd, members=set(herd.members)) if herd else None

    async def list_summaries(self, owner_id: UUID, *, archived: bool) -> list[HerdSummary]:
        return [
            HerdSummary(name=h.name, description=h.description, archived=h.archived)
            for h in sorted(self.by_id.values(), key=lambda h: h.name)
            if h.owner_id == owner_id and h.archived is archived
        ]

    async def add_member(self, herd_id: UUID, animal_id: str) -> None:
        members = self.by_id[herd_id].members
        if animal_id in members:
            raise AlreadyMember(f"Animal '{animal_id}' is already a member of this herd.")
        members.add(animal_id)

    async def add_members(self, herd_id: UUID, animal_ids: Iterable[str]) -> None:
        self.by_id[herd_id].members.update(animal_ids)

    async def remove_members(self, herd_id: UUID, animal_ids: Iterable[str]) -> None:
        self.by_id[herd_id].members.difference_update(animal_ids)

    async def archive(self, herd_id: UUID) -> None:
        herd = self.by_id[herd_id]
        herd.members.clear()
        herd.archived = True

    async def restore(self, herd_id: UUID) -> None:
        self.by_id[herd_id].archived = False

    async def delete(self, herd_id: UUID) -> bool:
        return self.by_id.pop(herd_id, None) is not None


class FakeUnitOfWork:
    def __init__(self, herds: InMemoryHerdsRepository | None = None) -> None:
        self.herds = herds or InMemoryHerdsRepository()
        self.commits = 0
        self.entered = 0

    async def __aenter__(self) -> FakeUnitOfWork:
        self.entered += 1
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def commit(self) -> None:
        self.commits += 1

    def members_of(self, owner_id: UUID, name: str) -> set[str]:
        herd = self.herds._find(owner_id, name)
        assert herd is not None, f"herd {name!r} missing"
        return set(herd.members)

    def seed(
        self,
        owner_id: UUID,
        name: str,
        members: Iterable[str] = (),
        *,
        archived: bool = False,
    ) -> Herd:
        herd = Herd.create(owner_id=owner_id, name=name)
        herd.members = set(members)
        herd.archived = archived
        return self.herds.seed(herd)


@pytest.fixture()
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture()
def failing_uow():
    """Build a unit of work whose commit raises ``error``."""

    def build(error: Exception) -> FakeUnitOfWork:
        uow = FakeUnitOfWork()

        async def commit() -> None:
            raise error

        uow.commit = commit
        return uow

    return build
