from __future__ import annotations

from typing import Iterable
from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import AlreadyExists, AlreadyMember
from src.application.interfaces.repositories.herds import HerdsRepository
from src.domain.models.herd import Herd, HerdSummary
from src.infrastructure.db.orm.herd import HerdMemberORM, HerdORM


class HerdsSQLAlchemyRepository(HerdsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: HerdORM, members: set[str]) -> Herd:
        return Herd(
            id=orm.id,
            owner_id=orm.owner_id,
            name=orm.name,
            description=orm.description,
            members=members,
            archived=orm.archived,
            created_at=orm.created_at,
        )

    async def _members(self, herd_id: UUID) -> set[str]:
        stmt = select(HerdMemberORM.animal_id).where(HerdMemberORM.herd_id == herd_id)
        res = await self.session.execute(stmt)
        return set(res.scalars().all())

    async def add(self, herd: Herd) -> Herd:
        orm = HerdORM(
            id=herd.id,
            owner_id=herd.owner_id,
            name=herd.name,
            description=herd.description,
            archived=herd.archived,
            created_at=herd.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise AlreadyExists(f"Herd '{herd.name}' already exists.") from exc
        return self._to_domain(orm, set())

    async def get_by_name(
        self, owner_id: UUID, name: str, *, for_update: bool = False
    ) -> Herd | None:
        stmt = select(HerdORM).where(HerdORM.owner_id == owner_id, HerdORM.name == name)
        if for_update:
            stmt = stmt.with_for_update()
        res = await self.session.execute(stmt)
        orm = res.scalar_one_or_none()
        if orm is None:
            return None
        return self._to_domain(orm, await self._members(orm.id))

    async def list_summaries(self, owner_id: UUID, *, archived: bool) -> list[HerdSummary]:
        stmt = (
            select(HerdORM.name, HerdORM.description, HerdORM.archived)
            .where(HerdORM.owner_id == owner_id, HerdORM.archived.is_(archived))
            .order_by(HerdORM.name)
        )
        res = await self.session.execute(stmt)
        return [
            HerdSummary(name=row.name, description=row.description, archived=row.archived)
            for row in res.all()
        ]

    async def add_member(self, herd_id: UUID, animal_id: str) -> None:
        try:
            await self.session.execute(
                insert(HerdMemberORM).values(herd_id=herd_id, animal_id=animal_id)
            )
        except IntegrityError as exc:
            raise AlreadyMember(f"Animal '{animal_id}' is already a member of this herd.") from exc

    async def add_members(self, herd_id: UUID, animal_ids: Iterable[str]) -> None:
        existing = await self._members(herd_id)
        rows = [
            {"herd_id": herd_id, "animal_id": animal_id}
            for animal_id in dict.fromkeys(animal_ids)
            if animal_id not in existing
        ]
        if rows:
            await self.session.execute(insert(HerdMemberORM), rows)

    async def remove_members(self, herd_id: UUID, animal_ids: Iterable[str]) -> None:
        ids = list(animal_ids)
        if not ids:
            return
        stmt = delete(HerdMemberORM).where(
            HerdMemberORM.herd_id == herd_id, HerdMemberORM.animal_id.in_(ids)
        )
        await self.session.execute(stmt)

    async def archive(self, herd_id: UUID) -> None:
        await self.session.execute(delete(HerdMemberORM).where(HerdMemberORM.herd_id == herd_id))
        await self.session.execute(
            update(HerdORM).where(HerdORM.id == herd_id).values(archived=True)
        )

    async def restore(self, herd_id: UUID) -> None:
        await self.session.execute(
            update(HerdORM).where(HerdORM.id == herd_id).values(archived=False)
        )

    async def delete(self, herd_id: UUID) -> bool:
        # Members are removed explicitly; SQLite does not enforce ON DELETE CASCADE by default
        await self.session.execute(delete(HerdMemberORM).where(HerdMemberORM.herd_id == herd_id))
        res = await self.session.execute(delete(HerdORM).where(HerdORM.id == herd_id))
        return res.rowcount > 0
