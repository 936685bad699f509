from medscribe.managed_backend.constants import CREATE_DOCTOR_PROFILE, CREATE_PATIENT_PROFILE, CREATE_PHARMACY
from tests.fakes import url_prefix

doctor_payload = {
    "userId": "user_d1",
    "firstName": "Gregory",
    "lastName": "House",
    "email": "house@ppth.org",
    "phone": "555-0100",
    "licenseNumber": "NJ-12345",
    "primarySpecialty": "Diagnostic Medicine",
}

pharmacy_payload = {
    "userId": "user_p1",
    "name": "Corner Pharmacy",
    "licenseNumber": "PH-777",
    "phone": "555-0199",
    "email": "rx@corner.example",
    "ncpdpId": "1234567",
    "address": {"street": "1 Main St", "city": "Springfield", "state": "IL", "zipCode": "62701"},
}


# ------------------------------ patient ------------------------------

async def test_patient_minimal_payload_gets_defaults(ac_client, backend, clock):
    backend.results[CREATE_PATIENT_PROFILE] = "pat_1"

    resp = await ac_client.post(f"{url_prefix}/patient/create-profile",
                                json={"userId": "user_1", "firstName": "Ada", "lastName": "Lovelace"})

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "patientId": "pat_1"}
    assert backend.calls == [("mutation", CREATE_PATIENT_PROFILE, {
        "userId": "user_1",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "dateOfBirth": clock.today().isoformat(),
        "gender": "Male",
    })]


async def test_patient_optional_fields_are_forwarded(ac_client, backend):
    payload = {
        "userId": "user_1", "firstName": "Ada", "lastName": "Lovelace",
        "email": "ada@example.com", "dateOfBirth": "1815-12-10", "gender": "Female",
        "primaryPhone": "555-0101", "bloodType": "O+",
    }

    resp = await ac_client.post(f"{url_prefix}/patient/create-profile", json=payload)

    assert resp.status_code == 200
    assert backend.calls[0][2] == payload


async def test_patient_missing_last_name(ac_client, backend):
    resp = await ac_client.post(f"{url_prefix}/patient/create-profile",
                                json={"userId": "user_1", "firstName": "Ada"})

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Missing required fields"
    assert body["details"][0]["field"] == "lastName"
    assert backend.calls == []


async def test_patient_backend_failure(ac_client, backend):
    backend.fail(CREATE_PATIENT_PROFILE, "Patient already exists")

    resp = await ac_client.post(f"{url_prefix}/patient/create-profile",
                                json={"userId": "user_1", "firstName": "Ada", "lastName": "Lovelace"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to create patient profile", "message": "Patient already exists"}


async def test_patient_blank_optional_fields_get_defaults(ac_client, backend, clock):
    resp = await ac_client.post(f"{url_prefix}/patient/create-profile", json={
        "userId": "u1", "firstName": "Ann", "lastName": "Lee", "dateOfBirth": "", "gender": "",
    })

    assert resp.status_code == 200
    args = backend.calls[0][2]
    assert args["dateOfBirth"] == clock.today().isoformat()
    assert args["gender"] == "Male"


# ------------------------------ doctor ------------------------------

async def test_doctor_profile_defaults(ac_client, backend):
    backend.results[CREATE_DOCTOR_PROFILE] = "doc_1"

    resp = await ac_client.post(f"{url_prefix}/doctor/create-profile", json=doctor_payload)

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "doctorId": "doc_1", "message": "Doctor profile created successfully"}

    args = backend.calls[0][2]
    assert args["title"] == "Dr."
    assert args["npiNumber"] == "" and args["deaNumber"] == ""
    assert args["yearsOfExperience"] == 0 and args["consultationFee"] == 0
    assert args["secondarySpecialties"] == [] and args["languagesSpoken"] == []
    assert args["isAcceptingNewPatients"] is True
    assert args["licenseNumber"] == "NJ-12345"


async def test_doctor_missing_license(ac_client, backend):
    payload = {k: v for k, v in doctor_payload.items() if k != "licenseNumber"}

    resp = await ac_client.post(f"{url_prefix}/doctor/create-profile", json=payload)

    assert resp.status_code == 400
    assert backend.calls == []


async def test_doctor_backend_failure(ac_client, backend):
    backend.fail(CREATE_DOCTOR_PROFILE)

    resp = await ac_client.post(f"{url_prefix}/doctor/create-profile", json=doctor_payload)

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Internal server error",
                           "message": "Failed to create doctor profile"}


# ------------------------------ pharmacy ------------------------------

async def test_pharmacy_profile(ac_client, backend):
    backend.results[CREATE_PHARMACY] = "ph_1"

    resp = await ac_client.post(f"{url_prefix}/pharmacy/create-profile", json=pharmacy_payload)

    assert resp.status_code == 200
    assert resp.json()["pharmacyId"] == "ph_1"

    args = backend.calls[0][2]
    assert args["address"] == pharmacy_payload["address"]
    assert args["isActive"] is True and args["isVerified"] is False
    assert "chainName" not in args


async def test_pharmacy_incomplete_address(ac_client, backend):
    payload = {**pharmacy_payload, "address": {"street": "1 Main St", "city": "Springfield"}}

    resp = await ac_client.post(f"{url_prefix}/pharmacy/create-profile", json=payload)

    assert resp.status_code == 400
    fields = {d["field"] for d in resp.json()["details"]}
    assert fields == {"address.state", "address.zipCode"}
    assert backend.calls == []


async def test_doctor_practice_address_not_forwarded(ac_client, backend):
    payload = {**doctor_payload, "practiceAddress": {"street": "221B Baker St", "city": "London"}}

    resp = await ac_client.post(f"{url_prefix}/doctor/create-profile", json=payload)

    assert resp.status_code == 200
    assert "practiceAddress" not in backend.calls[0][2]
