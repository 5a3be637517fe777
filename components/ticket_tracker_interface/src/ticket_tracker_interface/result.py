"""Result type returned by every upstream call."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class UpstreamErrorKind(str, Enum):
    TRANSPORT = "transport"                     #network failure or timeout
    HTTP_STATUS = "http_status"                 #tracker answered with a non-2xx status
    MALFORMED_RESPONSE = "malformed_response"   #2xx, but not the shape we expected


@dataclass(frozen=True)
class UpstreamResult(Generic[T]):
    """
    Either a value (ok) or a failure carrying its kind and detail.

    Notes on usage:
        Build with UpstreamResult.success() or UpstreamResult.failure() rather than
        calling the constructor. ``error`` holds whatever the tracker sent back as its
        error body (usually a dict) or a plain message string when it sent nothing usable.
    """

    value: T | None = None
    error_kind: UpstreamErrorKind | None = None
    error: Any = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, value: T) -> UpstreamResult[T]:
        return cls(value=value)

    @classmethod
    def failure(
        cls,
        kind: UpstreamErrorKind,
        error: Any,
        status_code: int | None = None,
    ) -> UpstreamResult[T]:
        return cls(error_kind=kind, error=error, status_code=status_code)
