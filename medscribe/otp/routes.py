from fastapi import APIRouter, Depends
from medscribe.common.dependencies import get_clock
from medscribe.common.results import to_response
from medscribe.common.utils import SystemClock
from medscribe.common.validation import validated_body
from medscribe.notifications.dependencies import get_mailer
from medscribe.notifications.mailer import Mailer
from medscribe.otp.constants import logger
from medscribe.otp.dependencies import get_otp_store
from medscribe.otp.models import SendOtpIn, VerifyOtpIn
from medscribe.otp.services import issue_otp, verify_otp
from medscribe.otp.store import OtpStore

otp_router = APIRouter()


@otp_router.post("/send-otp")
async def send_otp(payload: SendOtpIn = Depends(validated_body(SendOtpIn)),
                   store: OtpStore = Depends(get_otp_store),
                   mailer: Mailer = Depends(get_mailer),
                   clock: SystemClock = Depends(get_clock)):

    logger.info("otp.send.attempt", extra={"email": payload.email})
    result = await issue_otp(store, mailer, payload.email, payload.first_name, clock.now_ms())
    return to_response(result)


@otp_router.post("/verify-otp")
async def verify(payload: VerifyOtpIn = Depends(validated_body(VerifyOtpIn)),
                 store: OtpStore = Depends(get_otp_store),
                 clock: SystemClock = Depends(get_clock)):

    logger.info("otp.verify.attempt", extra={"email": payload.email})
    result = await verify_otp(store, payload.email, payload.otp, clock.now_ms())
    return to_response(result)
