from __future__ import annotations

from typing import Protocol
from uuid import UUID


class IdentityVerifier(Protocol):
    """Resolves an opaque session token to the owning user id.

    Implementations raise ``AuthError`` when the token does not resolve.
    """

    def verify(self, token: str) -> UUID: ...
