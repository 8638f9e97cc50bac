"""Tagged result returned by every HerdRegistry operation.

``Ok`` carries the typed payload of a successful call, ``Err`` carries one of the
``ErrorKind`` values together with a human readable message. Callers branch on
``result.ok`` instead of catching exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Mapping, TypeVar, Union

from src.application.errors import AppError, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T
    ok: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class Err:
    kind: ErrorKind
    message: str
    status_code: int = 400
    details: Mapping[str, Any] | None = None
    ok: ClassVar[bool] = False

    @classmethod
    def from_error(cls, exc: AppError) -> Err:
        return cls(
            kind=exc.kind,
            message=exc.message,
            status_code=exc.status_code,
            details=exc.details,
        )


Result = Union[Ok[T], Err]
