import pytest
from medscribe.config.settings import config_settings
from medscribe.notifications.templates import appointment_confirmation_email, login_notification_email, welcome_email
from tests.fakes import url_prefix

login_payload = {
    "email": "ada@example.com",
    "firstName": "Ada",
    "loginDetails": {"timestamp": "2025-01-01T10:00:00Z", "ipAddress": "10.0.0.1", "userAgent": "Firefox"},
}

appointment_payload = {
    "patientEmail": "ada@example.com",
    "patientName": "Ada Lovelace",
    "doctorName": "Dr. House",
    "appointmentDetails": {
        "date": "2025-02-03",
        "time": "09:30",
        "type": "consultation",
        "visitReason": "Headache",
        "duration": 30,
        "location": {"type": "telemedicine", "meetingLink": "https://meet.example/abc"},
    },
}


async def test_login_notification_sent(ac_client, mailer):
    resp = await ac_client.post(f"{url_prefix}/auth/send-login-notification", json=login_payload)

    assert resp.status_code == 200
    assert resp.json()["success"] is True
    sent = mailer.sent[0]
    assert sent.to == "ada@example.com"
    assert "10.0.0.1" in sent.text and "Firefox" in sent.html


async def test_login_notification_missing_details(ac_client, mailer):
    payload = {k: v for k, v in login_payload.items() if k != "loginDetails"}

    resp = await ac_client.post(f"{url_prefix}/auth/send-login-notification", json=payload)

    assert resp.status_code == 400
    assert resp.json()["error"] == "Missing required fields: email, firstName, loginDetails"
    assert mailer.sent == []


async def test_login_notification_delivery_failure(ac_client, mailer):
    mailer.fail_with = "SMTP auth failed"

    resp = await ac_client.post(f"{url_prefix}/auth/send-login-notification", json=login_payload)

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to send login notification email.", "details": "SMTP auth failed"}


@pytest.mark.parametrize("role,subject_part", [
    ("patient", "Health Journey"),
    ("doctor", "Caring for Patients"),
    ("pharmacy", "Pharmacy Management"),
])
async def test_welcome_email_by_role(ac_client, mailer, role, subject_part):
    resp = await ac_client.post(f"{url_prefix}/auth/send-welcome-email",
                                json={"email": "a@x.com", "firstName": "Ada", "role": role})

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Welcome email sent successfully"}
    assert subject_part in mailer.sent[0].subject


async def test_welcome_email_missing_role(ac_client, mailer):
    resp = await ac_client.post(f"{url_prefix}/auth/send-welcome-email", json={"email": "a@x.com", "firstName": "Ada"})

    assert resp.status_code == 400
    assert resp.json()["error"] == "Missing required fields"


async def test_welcome_email_failure(ac_client, mailer):
    mailer.fail_with = "timeout"

    resp = await ac_client.post(f"{url_prefix}/auth/send-welcome-email",
                                json={"email": "a@x.com", "firstName": "Ada", "role": "patient"})

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Internal server error",
                           "message": "Failed to send welcome email"}


async def test_appointment_confirmation(ac_client, mailer):
    resp = await ac_client.post(f"{url_prefix}/appointments/send-confirmation-email", json=appointment_payload)

    assert resp.status_code == 200
    sent = mailer.sent[0]
    assert sent.subject == "Appointment Confirmed - 2025-02-03 at 09:30"
    assert "https://meet.example/abc" in sent.text
    assert "Dr. House" in sent.html


async def test_appointment_confirmation_bad_duration(ac_client, mailer):
    payload = {**appointment_payload,
               "appointmentDetails": {**appointment_payload["appointmentDetails"], "duration": 0}}

    resp = await ac_client.post(f"{url_prefix}/appointments/send-confirmation-email", json=payload)

    assert resp.status_code == 400
    assert mailer.sent == []


def test_templates_escape_user_input():
    email = login_notification_email("a@x.com", "<script>x</script>", "now", user_agent="<b>ua</b>")

    assert "<script>" not in email.html
    assert "&lt;script&gt;" in email.html
    assert "&lt;b&gt;ua&lt;/b&gt;" in email.html


def test_unknown_role_gets_generic_welcome():
    email = welcome_email("a@x.com", "Ada", "admin")

    assert email.subject == "Welcome to MedScribe"
    assert "Ada" in email.text


def test_welcome_and_appointment_escape_names():
    welcome = welcome_email("a@x.com", '<img src=x onerror="alert(1)">', "doctor")
    appt = appointment_confirmation_email(
        "a@x.com", "<i>Ada</i>", "<b>House</b>",
        date="2025-02-03", time="09:30", appointment_type="consultation", visit_reason="<script>",
        duration=30, location_type="in-person", address="1 Main St",
    )

    assert "<img" not in welcome.html and "&lt;img" in welcome.html
    assert "<i>Ada</i>" not in appt.html and "&lt;i&gt;Ada&lt;/i&gt;" in appt.html
    assert "<b>House</b>" not in appt.html
    assert "<script>" not in appt.html
    # plain-text part keeps the raw value
    assert "<b>House</b>" in appt.text


def test_emails_link_back_to_app():
    base = config_settings.APP_BASE_URL.rstrip("/")

    login = login_notification_email("a@x.com", "Ada", "now")
    welcome = welcome_email("a@x.com", "Ada", "patient")

    assert f"{base}/auth/forgot-password" in login.html
    assert f"{base}/auth/forgot-password" in login.text
    assert f"{base}/auth/login" in welcome.text
    assert f'href="{base}"' in welcome.html


def test_in_person_appointment_lists_room():
    appt = appointment_confirmation_email(
        "a@x.com", "Ada", "Dr. House",
        date="2025-02-03", time="09:30", appointment_type="follow-up", visit_reason="Check-up",
        duration=15, location_type="in-person", address="1 Main St", room="12B",
    )

    assert "Location: 1 Main St" in appt.text
    assert "Room: 12B" in appt.text
    assert "Telemedicine" not in appt.text
