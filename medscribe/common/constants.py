import contextvars
from typing import Optional

# Context variable for request id, set by RequestIdMiddleware
request_id_ctx: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("request_id", default=None)

# canonical error strings shared by handlers
INTERNAL_ERROR = "Internal server error"
UNAUTHORIZED = "Unauthorized"
INVALID_REQUEST_BODY = "Invalid request body"

REQUEST_ID_HEADER = "X-Request-ID"
