"""Outcome values returned by service functions.

Services never raise for expected failures; they return ``Ok`` or ``Err`` and
the route turns the value into a response with :func:`to_response`.
"""
import enum
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from fastapi import status
from fastapi.responses import JSONResponse

from medscribe.common.utils import build_error, json_error, json_ok


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    INVALID_CODE = "invalid_code"
    REJECTED = "rejected"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    EXPIRED = "expired"
    RATE_LIMITED = "rate_limited"
    UNEXPECTED = "unexpected"


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_CODE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.REJECTED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.EXPIRED: status.HTTP_410_GONE,
    ErrorKind.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@dataclass(frozen=True)
class Ok:
    value: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    error: str
    message: Optional[str] = None
    details: Optional[Any] = None
    # extra top-level keys some clients read, e.g. {"success": false}
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


Result = Union[Ok, Err]


def to_response(result: Result, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    if isinstance(result, Ok):
        return json_ok(result.value, status_code=success_status)

    payload = build_error(result.error, message=result.message, details=result.details, **result.extra)
    return json_error(payload, status_code=result.status_code)
