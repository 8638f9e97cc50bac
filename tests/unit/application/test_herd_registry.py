from __future__ import annotations

from uuid import uuid4

import pytest

from src.application.errors import ErrorKind, StorageTransient
from src.application.services.herd_registry import HerdRegistry
from src.domain.models.herd import DeleteOutcome


@pytest.mark.asyncio
async def test_registry_wraps_success_in_ok(uow):
    registry = HerdRegistry(lambda: uow)
    owner = uuid4()

    created = await registry.create(owner, "A", "desc")
    assert created.ok
    assert created.value == uow.herds._find(owner, "A").id

    deleted = await registry.delete(owner, "A")
    assert deleted.ok
    assert deleted.value is DeleteOutcome.ARCHIVED
    assert uow.entered == 2


@pytest.mark.asyncio
async def test_registry_maps_application_errors_to_err(uow):
    registry = HerdRegistry(lambda: uow)
    owner = uuid4()
    uow.seed(owner, "A", ["X"])

    result = await registry.split_members(owner, "A", "B", ["X", "Y"])

    assert not result.ok
    assert result.kind is ErrorKind.PARTIAL_MEMBERSHIP
    assert result.status_code == 409
    assert result.details == {"missing": ["Y"]}
    assert "Y" in result.message

    missing = await registry.view_members(owner, "Nope")
    assert missing.kind is ErrorKind.NOT_FOUND
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_registry_reports_storage_transient(failing_uow):
    uow = failing_uow(StorageTransient("write conflict"))
    registry = HerdRegistry(lambda: uow)

    result = await registry.create(uuid4(), "A")

    assert not result.ok
    assert result.kind is ErrorKind.STORAGE_TRANSIENT
    assert result.status_code == 503


@pytest.mark.asyncio
async def test_registry_hides_unexpected_errors_in_production(failing_uow):
    uow = failing_uow(KeyError("boom"))
    registry = HerdRegistry(lambda: uow, raise_unexpected=False)

    result = await registry.create(uuid4(), "A")

    assert not result.ok
    assert result.kind is ErrorKind.INTERNAL
    assert result.message == "Unexpected server error"


@pytest.mark.asyncio
async def test_registry_raises_unexpected_errors_in_development(failing_uow):
    uow = failing_uow(KeyError("boom"))
    registry = HerdRegistry(lambda: uow, raise_unexpected=True)

    with pytest.raises(KeyError):
        await registry.create(uuid4(), "A")


@pytest.mark.asyncio
async def test_registry_lists_are_scoped_by_owner(uow):
    registry = HerdRegistry(lambda: uow)
    owner, other = uuid4(), uuid4()
    uow.seed(owner, "A")
    uow.seed(owner, "B", archived=True)
    uow.seed(other, "C")

    active = await registry.list_active(owner)
    archived = await registry.list_archived(owner)

    assert [h.name for h in active.value] == ["A"]
    assert [(h.name, h.archived) for h in archived.value] == [("B", True)]
