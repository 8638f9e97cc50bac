from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Sequence


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "InvalidArgument"
    NOT_FOUND = "NotFound"
    ALREADY_EXISTS = "AlreadyExists"
    ARCHIVED = "Archived"
    NOT_ARCHIVED = "NotArchived"
    ALREADY_MEMBER = "AlreadyMember"
    NOT_MEMBER = "NotMember"
    PARTIAL_MEMBERSHIP = "PartialMembership"
    STORAGE_TRANSIENT = "StorageTransient"
    AUTHENTICATION_FAILED = "AuthenticationFailed"
    INTERNAL = "Internal"


class AppError(Exception):
    code = "app_error"
    status_code = 400
    kind = ErrorKind.INTERNAL

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class AuthError(AppError):
    code = "auth_error"
    status_code = 401
    kind = ErrorKind.AUTHENTICATION_FAILED


class NotFound(AppError):
    code = "not_found"
    status_code = 404
    kind = ErrorKind.NOT_FOUND


class ValidationError(AppError):
    code = "validation_error"
    status_code = 422
    kind = ErrorKind.INVALID_ARGUMENT


class ConflictError(AppError):
    code = "conflict"
    status_code = 409


class AlreadyExists(ConflictError):
    code = "already_exists"
    kind = ErrorKind.ALREADY_EXISTS


class HerdArchived(ConflictError):
    code = "archived"
    kind = ErrorKind.ARCHIVED


class HerdNotArchived(ConflictError):
    code = "not_archived"
    kind = ErrorKind.NOT_ARCHIVED


class AlreadyMember(ConflictError):
    code = "already_member"
    kind = ErrorKind.ALREADY_MEMBER


class NotMember(ConflictError):
    code = "not_member"
    kind = ErrorKind.NOT_MEMBER


class PartialMembership(ConflictError):
    code = "partial_membership"
    kind = ErrorKind.PARTIAL_MEMBERSHIP

    def __init__(self, message: str, *, missing: Sequence[str]) -> None:
        super().__init__(message, details={"missing": list(missing)})
        self.missing = list(missing)


class InfrastructureError(AppError):
    code = "infrastructure_error"
    status_code = 500
    kind = ErrorKind.INTERNAL


class StorageTransient(InfrastructureError):
    """The store could not commit the unit of work; the caller may retry."""

    code = "storage_transient"
    status_code = 503
    kind = ErrorKind.STORAGE_TRANSIENT
