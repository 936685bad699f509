from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    ENV: str = "dev"                # "dev" / "staging" / "prod"
    SERVICE_NAME: str = "medscribe"
    APP_BASE_URL: str = "http://localhost:3000"

    # managed backend (convex deployment)
    CONVEX_URL: str = "http://localhost:3210"
    CONVEX_DEPLOY_KEY: Optional[str] = None
    BACKEND_TIMEOUT_SECONDS: float = 10.0

    # session tokens are issued by the auth provider, only verified here
    SESSION_JWT_SECRET: str = "change-me"
    SESSION_JWT_ALGO: str = "HS256"

    PASS_HASH_SCHEME: str = "bcrypt"
    BCRYPT_ROUNDS: int = 12

    OTP_TTL_SECONDS: int = 600
    OTP_MAX_SENDS: int = 3
    OTP_CLEANUP_INTERVAL_SECONDS: int = 300
    OTP_STORE_BACKEND: str = "memory"     # "memory" / "redis"

    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0

    SMTP_HOST: str = "localhost"
    SMTP_PORT: int = 587
    SMTP_USER: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    SMTP_USE_TLS: bool = False        # implicit TLS (port 465)
    SMTP_USE_STARTTLS: bool = True
    SMTP_TIMEOUT_SECONDS: float = 15.0
    EMAIL_FROM: str = "no-reply@medscribe.local"
    EMAIL_FROM_NAME: str = "MedScribe"

    class Config:
        env_file = ".env"
        extra="ignore"

config_settings = Settings()
