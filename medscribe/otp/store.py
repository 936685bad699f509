"""Keyed storage for one-time codes.

Records are keyed by normalized email. ``consume`` is the only way a code is
checked: it compares and deletes in one atomic step so a code can be redeemed
at most once, even under concurrent requests.
"""
import abc
import asyncio
import enum
import hmac
from typing import Dict, Optional

from pydantic import BaseModel

from medscribe.otp.constants import OTP_KEY_PREFIX, logger
from medscribe.otp.lua_scripts import LUA_CONSUME_OTP


class OtpRecord(BaseModel):
    email: str
    otp: str
    expires: int        # epoch milliseconds
    attempts: int = 1   # codes sent while this record has been live

    def is_expired(self, now_ms: int) -> bool:
        return now_ms > self.expires


class ConsumeOutcome(str, enum.Enum):
    VERIFIED = "verified"
    NOT_FOUND = "not_found"
    EXPIRED = "expired"
    INVALID_CODE = "invalid_code"


def normalize_email(email: str) -> str:
    return email.strip().lower()


def codes_match(stored: str, supplied: str) -> bool:
    return hmac.compare_digest(stored.encode(), supplied.encode())


class OtpStore(abc.ABC):

    @abc.abstractmethod
    async def get(self, email: str) -> Optional[OtpRecord]:
        ...

    @abc.abstractmethod
    async def put(self, record: OtpRecord, now_ms: int) -> None:
        """Store ``record``, replacing any previous code for the same email."""

    @abc.abstractmethod
    async def delete(self, email: str) -> bool:
        ...

    @abc.abstractmethod
    async def consume(self, email: str, otp: str, now_ms: int) -> ConsumeOutcome:
        """Atomically check ``otp`` and delete the record on success or expiry."""

    @abc.abstractmethod
    async def purge_expired(self, now_ms: int) -> int:
        ...

    async def close(self) -> None:
        return None


class InMemoryOtpStore(OtpStore):
    """Per-process store. Codes do not survive a restart and are not shared between workers."""

    def __init__(self):
        self._records: Dict[str, OtpRecord] = {}
        self._lock = asyncio.Lock()

    async def get(self, email: str) -> Optional[OtpRecord]:
        return self._records.get(normalize_email(email))

    async def put(self, record: OtpRecord, now_ms: int) -> None:
        key = normalize_email(record.email)
        async with self._lock:
            self._records[key] = record.model_copy(update={"email": key})

    async def delete(self, email: str) -> bool:
        async with self._lock:
            return self._records.pop(normalize_email(email), None) is not None

    async def consume(self, email: str, otp: str, now_ms: int) -> ConsumeOutcome:
        key = normalize_email(email)
        async with self._lock:
            record = await self._load(key)
            if record is None:
                return ConsumeOutcome.NOT_FOUND

            if record.is_expired(now_ms):
                await self._drop(key)
                return ConsumeOutcome.EXPIRED

            if not codes_match(record.otp, otp):
                return ConsumeOutcome.INVALID_CODE

            await self._drop(key)
            return ConsumeOutcome.VERIFIED

    async def _load(self, key: str) -> Optional[OtpRecord]:
        return self._records.get(key)

    async def _drop(self, key: str) -> None:
        self._records.pop(key, None)

    async def purge_expired(self, now_ms: int) -> int:
        async with self._lock:
            stale = [k for k, rec in self._records.items() if rec.is_expired(now_ms)]
            for k in stale:
                del self._records[k]
        return len(stale)

    def __len__(self) -> int:
        return len(self._records)


_CONSUME_RESULTS = {
    0: ConsumeOutcome.NOT_FOUND,
    1: ConsumeOutcome.VERIFIED,
    2: ConsumeOutcome.EXPIRED,
    3: ConsumeOutcome.INVALID_CODE,
}


class RedisOtpStore(OtpStore):
    """Shared store for multi-worker deployments.

    Each record is a hash at ``{prefix}:{email}``. Keys outlive the code by
    ``grace_ms`` so a lapsed code is still reported as expired rather than
    missing; Redis drops the key after that.
    """

    def __init__(self, redis_client, *, grace_ms: int, prefix: str = OTP_KEY_PREFIX):
        self._redis = redis_client
        self._grace_ms = grace_ms
        self._prefix = prefix
        self._consume_script = redis_client.register_script(LUA_CONSUME_OTP)

    def _key(self, email: str) -> str:
        return f"{self._prefix}:{normalize_email(email)}"

    async def get(self, email: str) -> Optional[OtpRecord]:
        raw = await self._redis.hgetall(self._key(email))
        if not raw:
            return None
        fields = {_text(k): _text(v) for k, v in raw.items()}
        return OtpRecord.model_validate(fields)

    async def put(self, record: OtpRecord, now_ms: int) -> None:
        key = self._key(record.email)
        ttl_ms = max(1, record.expires - now_ms) + self._grace_ms
        mapping = {
            "email": normalize_email(record.email),
            "otp": record.otp,
            "expires": record.expires,
            "attempts": record.attempts,
        }
        async with self._redis.pipeline(transaction=True) as pipe:
            pipe.delete(key)
            pipe.hset(key, mapping=mapping)
            pipe.pexpire(key, ttl_ms)
            await pipe.execute()

    async def delete(self, email: str) -> bool:
        return bool(await self._redis.delete(self._key(email)))

    async def consume(self, email: str, otp: str, now_ms: int) -> ConsumeOutcome:
        res = await self._consume_script(keys=[self._key(email)], args=[otp, now_ms])
        outcome = _CONSUME_RESULTS.get(int(res))
        if outcome is None:
            logger.error("otp.store.unexpected_script_result", extra={"result": res})
            raise RuntimeError(f"unexpected OTP consume result: {res!r}")
        return outcome

    async def purge_expired(self, now_ms: int) -> int:
        # key TTLs handle expiry
        return 0

    async def close(self) -> None:
        await self._redis.aclose()


def _text(value) -> str:
    return value.decode() if isinstance(value, bytes) else value
