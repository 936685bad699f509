# remote function paths on the managed backend ("module:function")

DELETE_ACCOUNT = "users:deleteAccount"
GENERATE_PASSWORD_RESET_TOKEN = "users:generatePasswordResetToken"
RESET_PASSWORD_WITH_TOKEN = "users:resetPasswordWithToken"

CREATE_PATIENT_PROFILE = "patients:createPatientProfile"
CREATE_DOCTOR_PROFILE = "doctors:createOrUpdateDoctorProfile"
CREATE_PHARMACY = "pharmacies:createPharmacy"
