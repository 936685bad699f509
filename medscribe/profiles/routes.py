from fastapi import APIRouter, Depends
from medscribe.common.dependencies import get_clock
from medscribe.common.results import to_response
from medscribe.common.utils import SystemClock
from medscribe.common.validation import validated_body
from medscribe.managed_backend.client import BackendClient
from medscribe.managed_backend.dependencies import get_backend_client
from medscribe.profiles.constants import logger
from medscribe.profiles.models import DoctorProfileIn, PatientProfileIn, PharmacyProfileIn
from medscribe.profiles.services import create_doctor_profile, create_patient_profile, create_pharmacy_profile

patient_router = APIRouter()
doctor_router = APIRouter()
pharmacy_router = APIRouter()


@patient_router.post("/create-profile")
async def patient_profile(payload: PatientProfileIn = Depends(validated_body(PatientProfileIn)),
                          client: BackendClient = Depends(get_backend_client),
                          clock: SystemClock = Depends(get_clock)):

    logger.info("profile.patient.attempt", extra={"user_id": payload.user_id})
    result = await create_patient_profile(client, payload, clock.today())
    return to_response(result)


@doctor_router.post("/create-profile")
async def doctor_profile(payload: DoctorProfileIn = Depends(validated_body(DoctorProfileIn)),
                         client: BackendClient = Depends(get_backend_client)):

    logger.info("profile.doctor.attempt", extra={"user_id": payload.user_id})
    result = await create_doctor_profile(client, payload)
    return to_response(result)


@pharmacy_router.post("/create-profile")
async def pharmacy_profile(payload: PharmacyProfileIn = Depends(validated_body(PharmacyProfileIn)),
                           client: BackendClient = Depends(get_backend_client)):

    logger.info("profile.pharmacy.attempt", extra={"user_id": payload.user_id})
    result = await create_pharmacy_profile(client, payload)
    return to_response(result)
