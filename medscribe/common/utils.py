
import time
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse


def now() -> datetime:
    return datetime.now(timezone.utc)


class SystemClock:
    """Wall clock used by handlers; swapped for a fixed clock in tests."""

    def now_ms(self) -> int:
        return int(time.time() * 1000)

    def today(self) -> date:
        return now().date()


def build_error(error: str,
                message: Optional[str] = None,
                details: Optional[Any] = None,
                **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {**extra, "error": error}
    if message is not None:
        body["message"] = message
    if details is not None:
        body["details"] = details
    return body


def json_ok(content: Dict[str, Any], status_code: int = 200, headers=None) -> JSONResponse:
    return JSONResponse(content, status_code=status_code, headers=headers)


def json_error(content: Dict[str, Any], status_code: int = 500, headers=None) -> JSONResponse:
    return JSONResponse(content, status_code=status_code, headers=headers)
