"""Public boundary of the herd grouping component.

Each call runs exactly one use case inside its own unit of work and returns a
``Result``. Application errors become ``Err`` values; storage failures already
surface from the unit of work as ``StorageTransient``. Anything else is a bug:
it is re-raised when ``raise_unexpected`` is set (development, tests) and
reported as an internal error otherwise.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar
from uuid import UUID

from src.application.errors import AppError, InfrastructureError, StorageTransient
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.result import Err, Ok, Result
from src.application.use_cases.herds import (
    add_member,
    create_herd,
    delete_herd,
    list_herds,
    merge_herds,
    move_member,
    remove_member,
    restore_herd,
    split_members,
    view_members,
)
from src.domain.models.herd import DeleteOutcome, HerdSummary

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HerdRegistry:
    def __init__(
        self,
        uow_factory: Callable[[], UnitOfWork],
        *,
        raise_unexpected: bool = False,
    ) -> None:
        self._uow_factory = uow_factory
        self._raise_unexpected = raise_unexpected

    async def _run(
        self, op: str, owner_id: UUID, action: Callable[[UnitOfWork], Awaitable[T]]
    ) -> Result[T]:
        try:
            async with self._uow_factory() as uow:
                value = await action(uow)
        except StorageTransient as exc:
            logger.warning("Herd operation %s failed in storage: %s", op, exc.message)
            return Err.from_error(exc)
        except AppError as exc:
            logger.info(
                "Herd operation %s rejected: %s - %s",
                op,
                exc.kind.value,
                exc.message,
                extra={"owner_id": str(owner_id)},
            )
            return Err.from_error(exc)
        except Exception:
            if self._raise_unexpected:
                raise
            logger.exception("Unexpected error during herd operation %s", op)
            return Err.from_error(InfrastructureError("Unexpected server error"))
        return Ok(value)

    async def create(
        self, owner_id: UUID, name: str, description: str | None = None
    ) -> Result[UUID]:
        async def action(uow: UnitOfWork) -> UUID:
            payload = create_herd.CreateHerdInput(name=name, description=description)
            herd = await create_herd.execute(uow, owner_id, payload)
            return herd.id

        return await self._run("create", owner_id, action)

    async def add_member(self, owner_id: UUID, herd_name: str, animal_id: str) -> Result[None]:
        return await self._run(
            "add_member",
            owner_id,
            lambda uow: add_member.execute(uow, owner_id, herd_name, animal_id),
        )

    async def remove_member(
        self, owner_id: UUID, herd_name: str, animal_id: str
    ) -> Result[None]:
        return await self._run(
            "remove_member",
            owner_id,
            lambda uow: remove_member.execute(uow, owner_id, herd_name, animal_id),
        )

    async def move_member(
        self, owner_id: UUID, source_name: str, target_name: str, animal_id: str
    ) -> Result[None]:
        payload = move_member.MoveMemberInput(
            source_name=source_name, target_name=target_name, animal_id=animal_id
        )
        return await self._run(
            "move_member", owner_id, lambda uow: move_member.execute(uow, owner_id, payload)
        )

    async def split_members(
        self, owner_id: UUID, source_name: str, target_name: str, animal_ids: list[str]
    ) -> Result[None]:
        payload = split_members.SplitMembersInput(
            source_name=source_name, target_name=target_name, animal_ids=list(animal_ids)
        )

        async def action(uow: UnitOfWork) -> None:
            await split_members.execute(uow, owner_id, payload)

        return await self._run("split_members", owner_id, action)

    async def merge_into(self, owner_id: UUID, keep_name: str, archive_name: str) -> Result[None]:
        payload = merge_herds.MergeHerdsInput(keep_name=keep_name, archive_name=archive_name)
        return await self._run(
            "merge_into", owner_id, lambda uow: merge_herds.execute(uow, owner_id, payload)
        )

    async def delete(self, owner_id: UUID, name: str) -> Result[DeleteOutcome]:
        return await self._run(
            "delete", owner_id, lambda uow: delete_herd.execute(uow, owner_id, name)
        )

    async def restore(self, owner_id: UUID, name: str) -> Result[None]:
        return await self._run(
            "restore", owner_id, lambda uow: restore_herd.execute(uow, owner_id, name)
        )

    async def view_members(self, owner_id: UUID, name: str) -> Result[list[str]]:
        return await self._run(
            "view_members", owner_id, lambda uow: view_members.execute(uow, owner_id, name)
        )

    async def list_active(self, owner_id: UUID) -> Result[list[HerdSummary]]:
        return await self._run(
            "list_active",
            owner_id,
            lambda uow: list_herds.execute(uow, owner_id, archived=False),
        )

    async def list_archived(self, owner_id: UUID) -> Result[list[HerdSummary]]:
        return await self._run(
            "list_archived",
            owner_id,
            lambda uow: list_herds.execute(uow, owner_id, archived=True),
        )
