from typing import Optional
from passlib.context import CryptContext
from jose import jwt, JWTError
from medscribe.auth.constants import PASSWORD_MIN_LENGTH
from medscribe.config.settings import config_settings

PASS_HASH_SCHEME = config_settings.PASS_HASH_SCHEME
BCRYPT_ROUNDS = config_settings.BCRYPT_ROUNDS

pwd_context = CryptContext(schemes=[PASS_HASH_SCHEME], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)

def hash_password(plain_password: str) -> str:
    return pwd_context.hash(plain_password)

def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)


def validate_password(password: str, min_length: int = PASSWORD_MIN_LENGTH) -> tuple[bool, str]:
    if len(password) < min_length:
        return False, f"Password must be at least {min_length} characters"
    if not any(c.islower() for c in password):
        return False, "Password must contain at least one lowercase letter"
    if not any(c.isupper() for c in password):
        return False, "Password must contain at least one uppercase letter"
    if not any(c.isdigit() for c in password):
        return False, "Password must contain at least one number"
    return True, "OK"


def decode_session_token(token: str) -> Optional[dict]:
    """Verify signature and expiry of a session token issued by the auth provider."""
    try:
        return jwt.decode(
            token,
            key=config_settings.SESSION_JWT_SECRET,
            algorithms=[config_settings.SESSION_JWT_ALGO],
        )
    except JWTError:
        return None
