#!/usr/bin/env python3
"""
Print a bearer token for a user id, for local development.

Session management lives outside this service; this script signs a token
with the configured JWT settings so the herd API can be exercised by hand.

Usage:
  python scripts/issue_token.py [--user-id UUID]
"""

import sys
from pathlib import Path
from uuid import UUID, uuid4

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config.settings import get_settings
from src.infrastructure.auth.jwt_service import JWTService


def issue_token(user_id: UUID) -> str:
    settings = get_settings()
    service = JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        algorithm=settings.jwt_algorithm,
        access_token_expires_minutes=settings.jwt_access_token_expires_minutes,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )
    return service.create_access_token(subject=user_id)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Issue a development access token")
    parser.add_argument("--user-id", help="User ID (optional, auto-generated)")

    args = parser.parse_args()

    user_uuid = uuid4()
    if args.user_id:
        try:
            user_uuid = UUID(args.user_id)
        except ValueError:
            print(f"Error: '{args.user_id}' is not a valid UUID")
            sys.exit(1)

    print(f"User ID: {user_uuid}")
    print(f"Authorization: Bearer {issue_token(user_uuid)}")
