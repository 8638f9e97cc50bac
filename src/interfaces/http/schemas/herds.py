from __future__ import annotations

from pydantic import BaseModel, Field


class HerdCreate(BaseModel):
    name: str
    description: str | None = None


class HerdRef(BaseModel):
    herd_name: str


class MemberChange(BaseModel):
    herd_name: str
    animal_id: str


class MemberMove(BaseModel):
    source_name: str
    target_name: str
    animal_id: str


class MembersSplit(BaseModel):
    source_name: str
    target_name: str
    animal_ids: list[str] = Field(default_factory=list)


class HerdsMerge(BaseModel):
    keep_name: str
    archive_name: str


class HerdCreated(BaseModel):
    herd_id: str
    herd_name: str


class DeleteResponse(BaseModel):
    outcome: str


class MembersResponse(BaseModel):
    animals: list[str]


class HerdSummaryResponse(BaseModel):
    name: str
    description: str | None
    archived: bool


class HerdListResponse(BaseModel):
    herds: list[HerdSummaryResponse]


class EmptyResponse(BaseModel):
    pass


class ErrorResponse(BaseModel):
    error: str
