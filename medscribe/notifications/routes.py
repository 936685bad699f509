from fastapi import APIRouter, Depends
from medscribe.common.results import to_response
from medscribe.common.validation import validated_body
from medscribe.notifications.constants import logger
from medscribe.notifications.dependencies import get_mailer
from medscribe.notifications.mailer import Mailer
from medscribe.notifications.models import AppointmentConfirmationIn, LoginNotificationIn, WelcomeEmailIn
from medscribe.notifications.services import send_appointment_confirmation, send_login_notification, send_welcome

notifications_router = APIRouter()
appointments_router = APIRouter()


@notifications_router.post("/send-login-notification")
async def login_notification(payload: LoginNotificationIn = Depends(validated_body(LoginNotificationIn)),
                             mailer: Mailer = Depends(get_mailer)):

    logger.info("notify.login.attempt", extra={"email": payload.email})
    result = await send_login_notification(mailer, payload)
    return to_response(result)


@notifications_router.post("/send-welcome-email")
async def welcome(payload: WelcomeEmailIn = Depends(validated_body(WelcomeEmailIn)),
                  mailer: Mailer = Depends(get_mailer)):

    logger.info("notify.welcome.attempt", extra={"email": payload.email, "role": payload.role})
    result = await send_welcome(mailer, payload)
    return to_response(result)


@appointments_router.post("/send-confirmation-email")
async def appointment_confirmation(payload: AppointmentConfirmationIn = Depends(validated_body(AppointmentConfirmationIn)),
                                   mailer: Mailer = Depends(get_mailer)):

    logger.info("notify.appointment.attempt", extra={"email": payload.patient_email})
    result = await send_appointment_confirmation(mailer, payload)
    return to_response(result)
