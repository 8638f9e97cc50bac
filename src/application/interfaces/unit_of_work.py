from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.herds import HerdsRepository


class UnitOfWork(Protocol):
    herds: HerdsRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...
