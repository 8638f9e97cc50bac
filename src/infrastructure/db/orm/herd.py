from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class HerdORM(Base):
    __tablename__ = "herds"
    # Herd names are unique per owner only; the same name may exist for other owners
    __table_args__ = (UniqueConstraint("owner_id", "name"),)

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    owner_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    archived: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class HerdMemberORM(Base):
    __tablename__ = "herd_members"
    # Composite primary key gives the member list set semantics

    herd_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("herds.id", ondelete="CASCADE"), primary_key=True
    )
    animal_id: Mapped[str] = mapped_column(String(255), primary_key=True)
