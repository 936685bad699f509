from medscribe.otp.services import generate_otp
from tests.fakes import url_prefix

SEND = f"{url_prefix}/auth/send-otp"
VERIFY = f"{url_prefix}/auth/verify-otp"


def test_generated_codes_are_six_digits():
    for _ in range(200):
        code = generate_otp()
        assert len(code) == 6 and code.isdigit() and code[0] != "0"


async def test_send_stores_code_and_mails_it(ac_client, otp_store, mailer, clock):
    resp = await ac_client.post(SEND, json={"email": "New@X.com", "firstName": "Ada"})

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "OTP sent successfully", "expiresIn": 600}

    record = await otp_store.get("new@x.com")
    assert record.expires == clock.now_ms() + 600_000
    assert record.attempts == 1

    assert len(mailer.sent) == 1
    email = mailer.sent[0]
    assert email.to == "new@x.com"
    assert record.otp in email.html and record.otp in email.text
    assert "Ada" in email.text


async def test_sent_code_can_be_verified(ac_client, otp_store, mailer):
    await ac_client.post(SEND, json={"email": "a@x.com", "firstName": "Ada"})
    code = (await otp_store.get("a@x.com")).otp

    resp = await ac_client.post(VERIFY, json={"email": "a@x.com", "otp": code})
    assert resp.status_code == 200


async def test_fourth_send_within_ttl_is_rate_limited(ac_client, mailer):
    for _ in range(3):
        resp = await ac_client.post(SEND, json={"email": "a@x.com", "firstName": "Ada"})
        assert resp.status_code == 200

    resp = await ac_client.post(SEND, json={"email": "a@x.com", "firstName": "Ada"})
    assert resp.status_code == 429
    assert resp.json() == {"error": "Too many attempts. Please try again later."}
    assert len(mailer.sent) == 3


async def test_send_limit_resets_after_expiry(ac_client, otp_store, clock):
    for _ in range(3):
        await ac_client.post(SEND, json={"email": "a@x.com", "firstName": "Ada"})

    clock.advance(600_001)

    resp = await ac_client.post(SEND, json={"email": "a@x.com", "firstName": "Ada"})
    assert resp.status_code == 200
    assert (await otp_store.get("a@x.com")).attempts == 1


async def test_delivery_failure_is_500(ac_client, mailer):
    mailer.fail_with = "connection refused"

    resp = await ac_client.post(SEND, json={"email": "a@x.com", "firstName": "Ada"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to send verification email. Please try again."}


async def test_missing_first_name_is_400(ac_client, mailer, otp_store):
    resp = await ac_client.post(SEND, json={"email": "a@x.com"})

    assert resp.status_code == 400
    assert resp.json()["error"] == "Email and first name are required"
    assert mailer.sent == []
    assert len(otp_store) == 0
