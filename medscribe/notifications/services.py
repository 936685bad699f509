from medscribe.common.results import Err, ErrorKind, Ok, Result
from medscribe.notifications.constants import logger
from medscribe.notifications.mailer import EmailDeliveryError, Mailer
from medscribe.notifications.models import AppointmentConfirmationIn, LoginNotificationIn, WelcomeEmailIn
from medscribe.notifications.templates import (
    appointment_confirmation_email,
    login_notification_email,
    welcome_email,
)


async def send_login_notification(mailer: Mailer, payload: LoginNotificationIn) -> Result:
    details = payload.login_details
    message = login_notification_email(
        payload.email,
        payload.first_name,
        details.timestamp,
        ip_address=details.ip_address,
        user_agent=details.user_agent,
    )
    try:
        await mailer.send(message)
    except EmailDeliveryError as exc:
        logger.error("notify.login.failed", extra={"email": payload.email, "reason": str(exc)})
        return Err(ErrorKind.UNEXPECTED, "Failed to send login notification email.", details=str(exc))

    logger.info("notify.login.sent", extra={"email": payload.email})
    return Ok({"success": True, "message": "Login notification email sent successfully!"})


async def send_welcome(mailer: Mailer, payload: WelcomeEmailIn) -> Result:
    try:
        await mailer.send(welcome_email(payload.email, payload.first_name, payload.role))
    except EmailDeliveryError as exc:
        logger.error("notify.welcome.failed", extra={"email": payload.email, "role": payload.role, "reason": str(exc)})
        return Err(ErrorKind.UNEXPECTED, "Internal server error",
                   message="Failed to send welcome email", extra={"success": False})

    logger.info("notify.welcome.sent", extra={"email": payload.email, "role": payload.role})
    return Ok({"success": True, "message": "Welcome email sent successfully"})


async def send_appointment_confirmation(mailer: Mailer, payload: AppointmentConfirmationIn) -> Result:
    appt = payload.appointment_details
    loc = appt.location
    message = appointment_confirmation_email(
        payload.patient_email,
        payload.patient_name,
        payload.doctor_name,
        date=appt.date,
        time=appt.time,
        appointment_type=appt.type,
        visit_reason=appt.visit_reason,
        duration=appt.duration,
        location_type=loc.type,
        address=loc.address,
        room=loc.room,
        meeting_link=loc.meeting_link,
    )
    try:
        await mailer.send(message)
    except EmailDeliveryError as exc:
        logger.error("notify.appointment.failed", extra={"email": payload.patient_email, "reason": str(exc)})
        return Err(ErrorKind.UNEXPECTED, "Failed to send appointment confirmation email.", details=str(exc))

    logger.info("notify.appointment.sent", extra={"email": payload.patient_email, "appointment_date": appt.date})
    return Ok({"success": True, "message": "Appointment confirmation email sent successfully!"})
