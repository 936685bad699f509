from datetime import date
from medscribe.common.results import Err, ErrorKind, Ok, Result
from medscribe.managed_backend.client import BackendClient, BackendError
from medscribe.managed_backend.constants import CREATE_DOCTOR_PROFILE, CREATE_PATIENT_PROFILE, CREATE_PHARMACY
from medscribe.profiles.constants import DEFAULT_PATIENT_GENDER, DOCTOR_PROFILE_DEFAULTS, logger
from medscribe.profiles.models import DoctorProfileIn, PatientProfileIn, PharmacyProfileIn


def patient_profile_args(payload: PatientProfileIn, today: date) -> dict:
    args = payload.backend_args()
    # blank form values count as missing
    if not args.get("dateOfBirth"):
        args["dateOfBirth"] = today.isoformat()
    if not args.get("gender"):
        args["gender"] = DEFAULT_PATIENT_GENDER
    return args


def doctor_profile_args(payload: DoctorProfileIn) -> dict:
    args = {**DOCTOR_PROFILE_DEFAULTS, **payload.backend_args()}
    args.setdefault("npiNumber", "")
    args.setdefault("deaNumber", "")
    return args


async def create_patient_profile(client: BackendClient, payload: PatientProfileIn, today: date) -> Result:
    try:
        patient_id = await client.mutation(CREATE_PATIENT_PROFILE, patient_profile_args(payload, today))
    except BackendError as exc:
        logger.error("profile.patient.failed", extra={"user_id": payload.user_id, "reason": exc.message})
        return Err(ErrorKind.UNEXPECTED, "Failed to create patient profile", message=exc.message)

    logger.info("profile.patient.created", extra={"user_id": payload.user_id, "patient_id": patient_id})
    return Ok({"success": True, "patientId": patient_id})


async def create_doctor_profile(client: BackendClient, payload: DoctorProfileIn) -> Result:
    try:
        doctor_id = await client.mutation(CREATE_DOCTOR_PROFILE, doctor_profile_args(payload))
    except BackendError as exc:
        logger.error("profile.doctor.failed", extra={"user_id": payload.user_id, "reason": exc.message})
        return Err(ErrorKind.UNEXPECTED, "Internal server error",
                   message="Failed to create doctor profile", extra={"success": False})

    logger.info("profile.doctor.created", extra={"user_id": payload.user_id, "doctor_id": doctor_id})
    return Ok({"success": True, "doctorId": doctor_id, "message": "Doctor profile created successfully"})


async def create_pharmacy_profile(client: BackendClient, payload: PharmacyProfileIn) -> Result:
    try:
        pharmacy_id = await client.mutation(CREATE_PHARMACY, payload.backend_args())
    except BackendError as exc:
        logger.error("profile.pharmacy.failed", extra={"user_id": payload.user_id, "reason": exc.message})
        return Err(ErrorKind.UNEXPECTED, "Internal server error",
                   message="Failed to create pharmacy profile", extra={"success": False})

    logger.info("profile.pharmacy.created", extra={"user_id": payload.user_id, "pharmacy_id": pharmacy_id})
    return Ok({"success": True, "pharmacyId": pharmacy_id, "message": "Pharmacy profile created successfully"})
