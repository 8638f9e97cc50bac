from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Callable
from pathlib import Path
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("ENVIRONMENT", "test")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.application.services.herd_registry import HerdRegistry
from src.config.settings import Settings
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import herd  # noqa: F401
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)
from src.interfaces.http.main import create_app


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
            "jwt_secret_key": "test-secret-key",
            "jwt_algorithm": "HS256",
            "jwt_access_token_expires_minutes": 5,
        }
    )


@pytest.fixture()
def jwt_service(test_settings: Settings) -> JWTService:
    return JWTService(
        secret_key=test_settings.jwt_secret_key.get_secret_value(),
        algorithm=test_settings.jwt_algorithm,
        access_token_expires_minutes=test_settings.jwt_access_token_expires_minutes,
    )


@pytest.fixture()
def app(test_settings: Settings, jwt_service: JWTService):
    return create_app(settings=test_settings, identity_verifier=jwt_service)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    engine = app.state.engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    await engine.dispose()


@pytest.fixture()
def auth_headers(jwt_service: JWTService) -> Callable[[UUID], dict[str, str]]:
    def build(owner_id: UUID) -> dict[str, str]:
        token = jwt_service.create_access_token(subject=owner_id)
        return {"Authorization": f"Bearer {token}"}

    return build


@pytest.fixture()
async def session_factory(
    test_settings: Settings,
) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_engine(test_settings.database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield create_session_factory(engine)
    await engine.dispose()


@pytest.fixture()
def registry(session_factory: async_sessionmaker[AsyncSession]) -> HerdRegistry:
    return HerdRegistry(lambda: SQLAlchemyUnitOfWork(session_factory), raise_unexpected=True)


@pytest.fixture()
def owner_id() -> UUID:
    return uuid4()
