from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.application.result import Err
from src.application.services.herd_registry import HerdRegistry
from src.domain.models.herd import HerdSummary
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_herd_registry
from src.interfaces.http.schemas.herds import (
    DeleteResponse,
    EmptyResponse,
    ErrorResponse,
    HerdCreate,
    HerdCreated,
    HerdListResponse,
    HerdRef,
    HerdsMerge,
    HerdSummaryResponse,
    MemberChange,
    MemberMove,
    MembersResponse,
    MembersSplit,
)

router = APIRouter(
    prefix="/herds",
    tags=["herds"],
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)


def _error(err: Err) -> JSONResponse:
    return JSONResponse(status_code=err.status_code, content={"error": err.message})


def _summaries(items: list[HerdSummary]) -> HerdListResponse:
    return HerdListResponse(
        herds=[
            HerdSummaryResponse(name=x.name, description=x.description, archived=x.archived)
            for x in items
        ]
    )


@router.post("/create", response_model=HerdCreated, status_code=status.HTTP_201_CREATED)
async def create_herd(
    payload: HerdCreate,
    *,
    registry: HerdRegistry = Depends(get_herd_registry),
    context: AuthContext = Depends(get_auth_context),
):
    result = await registry.create(context.owner_id, payload.name, payload.description)
    if not result.ok:
        return _error(result)
    return HerdCreated(herd_id=str(result.value), herd_name=payload.name.strip())


@router.post("/add-member", response_model=EmptyResponse)
async def add_member(
    payload: MemberChange,
    *,
    registry: HerdRegistry = Depends(get_herd_registry),
    context: AuthContext = Depends(get_auth_context),
):
    result = await registry.add_member(context.owner_id, payload.herd_name, payload.animal_id)
    if not result.ok:
        return _error(result)
    return EmptyResponse()


@router.post("/remove-member", response_model=EmptyResponse)
async def remove_member(
    payload: MemberChange,
    *,
    registry: HerdRegistry = Depends(get_herd_registry),
    context: AuthContext = Depends(get_auth_context),
):
    result = await registry.remove_member(context.owner_id, payload.herd_name, payload.animal_id)
    if not result.ok:
        return _error(result)
    return EmptyResponse()


@router.post("/move-member", response_model=EmptyResponse)
async def move_member(
    payload: MemberMove,
    *,
    registry: HerdRegistry = Depends(get_herd_registry),
    context: AuthContext = Depends(get_auth_context),
):
    result = await registry.move_member(
        context.owner_id, payload.source_name, payload.target_name, payload.animal_id
    )
    if not result.ok:
        return _error(result)
    return EmptyResponse()


@router.post("/split", response_model=EmptyResponse)
async def split_members(
    payload: MembersSplit,
    *,
    registry: HerdRegistry = Depends(get_herd_registry),
    context: AuthContext = Depends(get_auth_context),
):
    result = await registry.split_members(
        context.owner_id, payload.source_name, payload.target_name, payload.animal_ids
    )
    if not result.ok:
        return _error(result)
    return EmptyResponse()


@router.post("/merge", response_model=EmptyResponse)
async def merge_herds(
    payload: HerdsMerge,
    *,
    registry: HerdRegistry = Depends(get_herd_registry),
    context: AuthContext = Depends(get_auth_context),
):
    result = await registry.merge_into(context.owner_id, payload.keep_name, payload.archive_name)
    if not result.ok:
        return _error(result)
    return EmptyResponse()


@router.post("/delete", response_model=DeleteResponse)
async def delete_herd(
    payload: HerdRef,
    *,
    registry: HerdRegistry = Depends(get_herd_registry),
    context: AuthContext = Depends(get_auth_context),
):
    result = await registry.delete(context.owner_id, payload.herd_name)
    if not result.ok:
        return _error(result)
    return DeleteResponse(outcome=result.value.value)


@router.post("/restore", response_model=EmptyResponse)
async def restore_herd(
    payload: HerdRef,
    *,
    registry: HerdRegistry = Depends(get_herd_registry),
    context: AuthContext = Depends(get_auth_context),
):
    result = await registry.restore(context.owner_id, payload.herd_name)
    if not result.ok:
        return _error(result)
    return EmptyResponse()


@router.post("/members", response_model=MembersResponse)
async def view_members(
    payload: HerdRef,
    *,
    registry: HerdRegistry = Depends(get_herd_registry),
    context: AuthContext = Depends(get_auth_context),
):
    result = await registry.view_members(context.owner_id, payload.herd_name)
    if not result.ok:
        return _error(result)
    return MembersResponse(animals=result.value)


@router.post("/active", response_model=HerdListResponse)
async def list_active_herds(
    *,
    registry: HerdRegistry = Depends(get_herd_registry),
    context: AuthContext = Depends(get_auth_context),
):
    result = await registry.list_active(context.owner_id)
    if not result.ok:
        return _error(result)
    return _summaries(result.value)


@router.post("/archived", response_model=HerdListResponse)
async def list_archived_herds(
    *,
    registry: HerdRegistry = Depends(get_herd_registry),
    context: AuthContext = Depends(get_auth_context),
):
    result = await registry.list_archived(context.owner_id)
    if not result.ok:
        return _error(result)
    return _summaries(result.value)
