from typing import Optional
from email_validator import validate_email, EmailNotValidError
from fastapi import Request
from fastapi.security import HTTPBearer
from pydantic import BaseModel
from medscribe.auth.constants import logger
from medscribe.auth.utils import decode_session_token
from medscribe.common.constants import UNAUTHORIZED
from medscribe.common.custom_exceptions import AuthError


def normalize_email_address(email: str) -> str:
    """
    Validate and return normalized email (lowercased, normalized by email-validator).
    Raises ValueError if invalid.
    """
    try:
        v = validate_email(email, check_deliverability=False)
        return v.normalized.lower()
    except EmailNotValidError as e:
        raise ValueError(str(e))


class SessionUser(BaseModel):
    id: str
    role: Optional[str] = None


class SessionAuthentication(HTTPBearer):
    """Resolves the caller from the ``Authorization: Bearer`` session token or fails with 401."""

    def __init__(self):
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> SessionUser:
        creds = await super().__call__(request)
        if creds is None:
            logger.warning("session.missing", extra={"path": request.url.path})
            raise AuthError(UNAUTHORIZED)

        claims = decode_session_token(creds.credentials)
        if not claims or not claims.get("sub"):
            logger.warning("session.invalid", extra={"path": request.url.path})
            raise AuthError(UNAUTHORIZED)

        return SessionUser(id=str(claims["sub"]), role=claims.get("role"))


current_session_user = SessionAuthentication()
