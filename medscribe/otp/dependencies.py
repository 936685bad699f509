import redis.asyncio as redis
from fastapi import Request
from medscribe.config.settings import config_settings
from medscribe.otp.constants import OTP_CLEANUP_INTERVAL_SECONDS, logger
from medscribe.otp.store import InMemoryOtpStore, OtpStore, RedisOtpStore


def get_otp_store(request: Request) -> OtpStore:
    return request.app.state.otp_store


def create_otp_store() -> OtpStore:
    backend = config_settings.OTP_STORE_BACKEND.lower()

    if backend == "redis":
        client = redis.Redis(
            host=config_settings.REDIS_HOST, port=config_settings.REDIS_PORT, db=config_settings.REDIS_DB,
            decode_responses=False)
        logger.info("otp.store.selected", extra={"backend": "redis", "host": config_settings.REDIS_HOST})
        return RedisOtpStore(client, grace_ms=OTP_CLEANUP_INTERVAL_SECONDS * 1000)

    if backend != "memory":
        raise ValueError(f"unknown OTP_STORE_BACKEND: {config_settings.OTP_STORE_BACKEND!r}")

    logger.info("otp.store.selected", extra={"backend": "memory"})
    return InMemoryOtpStore()
