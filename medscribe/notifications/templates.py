"""Transactional email bodies.

Each email has an ``.html`` and a ``.txt`` template under ``email_templates/``.
HTML templates are autoescaped, so request values are passed in raw.
"""
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from medscribe.config.settings import config_settings
from medscribe.notifications.constants import BRAND_NAME
from medscribe.notifications.mailer import OutgoingEmail

TEMPLATE_DIR = Path(__file__).parent / "email_templates"

_jinja_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
    keep_trailing_newline=True,
)


def _render(name: str, **context) -> tuple[str, str]:
    context = {"brand": BRAND_NAME, "app_base_url": _app_url(""), **context}
    html = _jinja_env.get_template(f"{name}.html").render(**context)
    text = _jinja_env.get_template(f"{name}.txt").render(**context)
    return html, text


def _app_url(path: str) -> str:
    return f"{config_settings.APP_BASE_URL.rstrip('/')}{path}"


def otp_verification_email(email: str, first_name: str, otp: str, expires_minutes: int) -> OutgoingEmail:
    html, text = _render("otp_verification", title="Verify Your Email",
                         first_name=first_name, otp=otp, expires_minutes=expires_minutes)
    return OutgoingEmail(to=email, subject=f"Verify your email - {BRAND_NAME}", html=html, text=text)


def login_notification_email(email: str, first_name: str, timestamp: str,
                             ip_address: Optional[str] = None, user_agent: Optional[str] = None) -> OutgoingEmail:
    html, text = _render("login_notification", title="Login Notification",
                         first_name=first_name, timestamp=timestamp,
                         ip_address=ip_address, user_agent=user_agent,
                         reset_url=_app_url("/auth/forgot-password"))
    return OutgoingEmail(to=email, subject=f"New Login to Your {BRAND_NAME} Account", html=html, text=text)


WELCOME_CONTENT = {
    "patient": {
        "subject": f"Welcome to {BRAND_NAME} - Your Health Journey Starts Here",
        "greeting": "Dear {name},",
        "features": [
            "Manage your medical records securely",
            "Connect with healthcare providers",
            "Track your medications and treatments",
            "Access your health information anytime, anywhere",
        ],
        "next_steps": [
            "Complete your patient profile",
            "Add your medical history and allergies",
            "Set up emergency contacts",
        ],
    },
    "doctor": {
        "subject": f"Welcome to {BRAND_NAME} - Start Caring for Patients Digitally",
        "greeting": "Dear Dr. {name},",
        "features": [
            "Manage patient records efficiently",
            "Create and track prescriptions",
            "Generate SOAP notes with AI assistance",
            "Collaborate with other healthcare professionals",
        ],
        "next_steps": [
            "Complete your professional profile",
            "Add your medical credentials and licenses",
            "Set up your practice information",
        ],
    },
    "pharmacy": {
        "subject": f"Welcome to {BRAND_NAME} - Your Pharmacy Management Solution",
        "greeting": "Dear {name},",
        "features": [
            "Manage prescription orders efficiently",
            "Track inventory and medications",
            "Connect with healthcare providers",
        ],
        "next_steps": [
            "Complete your pharmacy profile",
            "Add your pharmacy licenses and credentials",
            "Begin receiving prescriptions",
        ],
    },
}

GENERIC_WELCOME = {
    "subject": f"Welcome to {BRAND_NAME}",
    "greeting": "Dear {name},",
    "features": [],
    "next_steps": [],
}


def welcome_email(email: str, first_name: str, role: str) -> OutgoingEmail:
    content = WELCOME_CONTENT.get(role.lower(), GENERIC_WELCOME)
    html, text = _render("welcome", title="Welcome",
                         greeting=content["greeting"].format(name=first_name),
                         features=content["features"], next_steps=content["next_steps"],
                         login_url=_app_url("/auth/login"))
    return OutgoingEmail(to=email, subject=content["subject"], html=html, text=text)


def appointment_confirmation_email(patient_email: str, patient_name: str, doctor_name: str, *,
                                   date: str, time: str, appointment_type: str, visit_reason: str,
                                   duration: int, location_type: str, address: Optional[str] = None,
                                   room: Optional[str] = None, meeting_link: Optional[str] = None) -> OutgoingEmail:
    html, text = _render("appointment_confirmation", title="Appointment Confirmed",
                         patient_name=patient_name, doctor_name=doctor_name,
                         date=date, time=time, duration=duration,
                         appointment_type=appointment_type, visit_reason=visit_reason,
                         telemedicine=location_type == "telemedicine",
                         address=address, room=room, meeting_link=meeting_link)
    return OutgoingEmail(to=patient_email, subject=f"Appointment Confirmed - {date} at {time}", html=html, text=text)
