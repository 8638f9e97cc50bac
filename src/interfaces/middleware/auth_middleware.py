from __future__ import annotations

from typing import Iterable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from src.application.errors import AuthError
from src.infrastructure.auth.context import AuthContext

PUBLIC_PATHS: Iterable[str] = (
    "/api/v1/health",
    "/docs",
    "/openapi.json",
    "/redoc",
)


class AuthMiddleware(BaseHTTPMiddleware):
    """Resolves the bearer token to an owner before any route runs."""

    async def dispatch(self, request: Request, call_next) -> Response:
        # Let CORS preflight pass without auth checks
        if request.method == "OPTIONS":
            return await call_next(request)
        if any(request.url.path.startswith(path) for path in PUBLIC_PATHS):
            return await call_next(request)

        try:
            authorization = request.headers.get("Authorization")
            if not authorization:
                raise AuthError("Missing Authorization header")
            scheme, _, token = authorization.partition(" ")
            if scheme.lower() != "bearer" or not token:
                raise AuthError("Invalid Authorization header")
            verifier = getattr(request.app.state, "identity_verifier", None)
            if verifier is None:
                raise RuntimeError("Identity verifier not configured")
            owner_id = verifier.verify(token)
        except AuthError as exc:
            return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
        request.state.auth_context = AuthContext(owner_id=owner_id)
        return await call_next(request)
