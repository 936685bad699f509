import secrets

from medscribe.common.results import Err, ErrorKind, Ok, Result
from medscribe.notifications.mailer import EmailDeliveryError, Mailer
from medscribe.notifications.templates import otp_verification_email
from medscribe.otp.constants import OTP_LENGTH, OTP_MAX_SENDS, OTP_TTL_MS, OTP_TTL_SECONDS, logger
from medscribe.otp.store import ConsumeOutcome, OtpRecord, OtpStore, normalize_email


def generate_otp() -> str:
    """Numeric code of OTP_LENGTH digits, never starting with zero."""
    low = 10 ** (OTP_LENGTH - 1)
    return str(low + secrets.randbelow(9 * low))


async def issue_otp(store: OtpStore, mailer: Mailer, email: str, first_name: str, now_ms: int) -> Result:
    email = normalize_email(email)

    existing = await store.get(email)
    if existing is not None and existing.is_expired(now_ms):
        existing = None

    if existing is not None and existing.attempts >= OTP_MAX_SENDS:
        logger.warning("otp.send.rate_limited", extra={"email": email, "attempts": existing.attempts})
        return Err(ErrorKind.RATE_LIMITED, "Too many attempts. Please try again later.")

    code = generate_otp()
    record = OtpRecord(
        email=email,
        otp=code,
        expires=now_ms + OTP_TTL_MS,
        attempts=existing.attempts + 1 if existing else 1,
    )
    await store.put(record, now_ms)

    try:
        await mailer.send(otp_verification_email(email, first_name, code, OTP_TTL_SECONDS // 60))
    except EmailDeliveryError as exc:
        logger.error("otp.send.delivery_failed", extra={"email": email, "reason": str(exc)})
        return Err(ErrorKind.UNEXPECTED, "Failed to send verification email. Please try again.")

    logger.info("otp.send.success", extra={"email": email, "attempts": record.attempts})
    return Ok({"success": True, "message": "OTP sent successfully", "expiresIn": OTP_TTL_SECONDS})


async def verify_otp(store: OtpStore, email: str, otp: str, now_ms: int) -> Result:
    outcome = await store.consume(email, otp, now_ms)

    if outcome is ConsumeOutcome.NOT_FOUND:
        logger.info("otp.verify.not_found", extra={"email": email})
        return Err(ErrorKind.NOT_FOUND, "No OTP found for this email. Please request a new one.")

    if outcome is ConsumeOutcome.EXPIRED:
        logger.info("otp.verify.expired", extra={"email": email})
        return Err(ErrorKind.EXPIRED, "OTP has expired. Please request a new one.")

    if outcome is ConsumeOutcome.INVALID_CODE:
        logger.warning("otp.verify.invalid_code", extra={"email": email})
        return Err(ErrorKind.INVALID_CODE, "Invalid OTP. Please check and try again.")

    logger.info("otp.verify.success", extra={"email": email})
    return Ok({"success": True, "message": "Email verified successfully"})
