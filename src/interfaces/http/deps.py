from __future__ import annotations

from fastapi import Request

from src.application.errors import AuthError
from src.application.services.herd_registry import HerdRegistry
from src.config.settings import Settings, get_settings
from src.infrastructure.auth.context import AuthContext


async def get_auth_context(request: Request) -> AuthContext:
    context = getattr(request.state, "auth_context", None)
    if context is None:
        raise AuthError("Authentication required")
    return context


def get_herd_registry(request: Request) -> HerdRegistry:
    registry = getattr(request.app.state, "herd_registry", None)
    if registry is None:
        raise RuntimeError("Herd registry not configured")
    return registry


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()
