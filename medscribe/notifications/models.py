from typing import ClassVar, Optional
from pydantic import BaseModel, ConfigDict, Field
from medscribe.common.validation import RequestSchema, RequiredStr


class LoginDetails(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    timestamp: RequiredStr
    ip_address: Optional[str] = Field(None, alias="ipAddress")
    user_agent: Optional[str] = Field(None, alias="userAgent")


class LoginNotificationIn(RequestSchema):
    error_message: ClassVar[str] = "Missing required fields: email, firstName, loginDetails"

    email: RequiredStr
    first_name: RequiredStr = Field(..., alias="firstName")
    login_details: LoginDetails = Field(..., alias="loginDetails")


class WelcomeEmailIn(RequestSchema):
    email: RequiredStr
    first_name: RequiredStr = Field(..., alias="firstName")
    role: RequiredStr


class AppointmentLocation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: RequiredStr                 # "in-person" / "telemedicine"
    address: Optional[str] = None
    room: Optional[str] = None
    meeting_link: Optional[str] = Field(None, alias="meetingLink")


class AppointmentDetails(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: RequiredStr
    time: RequiredStr
    type: RequiredStr
    visit_reason: RequiredStr = Field(..., alias="visitReason")
    location: AppointmentLocation
    duration: int = Field(..., gt=0)  # minutes


class AppointmentConfirmationIn(RequestSchema):
    patient_email: RequiredStr = Field(..., alias="patientEmail")
    patient_name: RequiredStr = Field(..., alias="patientName")
    doctor_name: RequiredStr = Field(..., alias="doctorName")
    appointment_details: AppointmentDetails = Field(..., alias="appointmentDetails")
