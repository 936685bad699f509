from medscribe.common.logging_setup import get_logger

logger = get_logger("medscribe.profiles")

DEFAULT_PATIENT_GENDER = "Male"

DOCTOR_TITLE = "Dr."

# fields a new doctor fills in later from the profile screen
DOCTOR_PROFILE_DEFAULTS = {
    "title": DOCTOR_TITLE,
    "medicalSchool": "",
    "yearsOfExperience": 0,
    "secondarySpecialties": [],
    "boardCertifications": [],
    "residency": "",
    "fellowship": "",
    "practiceName": "",
    "department": "",
    "hospitalAffiliations": [],
    "consultationFee": 0,
    "languagesSpoken": [],
    "bio": "",
    "isAcceptingNewPatients": True,
}
