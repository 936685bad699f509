from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field
from medscribe.common.validation import RequestSchema, RequiredStr


class PatientProfileIn(RequestSchema):
    user_id: RequiredStr = Field(..., alias="userId")
    first_name: RequiredStr = Field(..., alias="firstName")
    last_name: RequiredStr = Field(..., alias="lastName")
    email: Optional[str] = None
    date_of_birth: Optional[str] = Field(None, alias="dateOfBirth")
    gender: Optional[str] = None

    primary_phone: Optional[str] = Field(None, alias="primaryPhone")
    secondary_phone: Optional[str] = Field(None, alias="secondaryPhone")
    address_line1: Optional[str] = Field(None, alias="addressLine1")
    address_line2: Optional[str] = Field(None, alias="addressLine2")
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = Field(None, alias="zipCode")
    country: Optional[str] = None
    emergency_contact_name: Optional[str] = Field(None, alias="emergencyContactName")
    emergency_contact_phone: Optional[str] = Field(None, alias="emergencyContactPhone")
    emergency_contact_relation: Optional[str] = Field(None, alias="emergencyContactRelation")
    national_id: Optional[str] = Field(None, alias="nationalId")
    blood_type: Optional[str] = Field(None, alias="bloodType")
    primary_care_physician_id: Optional[str] = Field(None, alias="primaryCarePhysicianId")
    preferred_language: Optional[str] = Field(None, alias="preferredLanguage")
    advance_directives: Optional[str] = Field(None, alias="advanceDirectives")


class DoctorProfileIn(RequestSchema):
    user_id: RequiredStr = Field(..., alias="userId")
    first_name: RequiredStr = Field(..., alias="firstName")
    last_name: RequiredStr = Field(..., alias="lastName")
    email: RequiredStr
    phone: RequiredStr
    license_number: RequiredStr = Field(..., alias="licenseNumber")
    primary_specialty: RequiredStr = Field(..., alias="primarySpecialty")
    npi_number: Optional[str] = Field(None, alias="npiNumber")
    dea_number: Optional[str] = Field(None, alias="deaNumber")
    # accepted from the signup form but not part of the backend profile
    practice_address: Optional[Dict[str, Any]] = Field(None, alias="practiceAddress", exclude=True)


class PharmacyAddress(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    street: RequiredStr
    city: RequiredStr
    state: RequiredStr
    zip_code: RequiredStr = Field(..., alias="zipCode")


class PharmacyProfileIn(RequestSchema):
    user_id: RequiredStr = Field(..., alias="userId")
    name: RequiredStr
    license_number: RequiredStr = Field(..., alias="licenseNumber")
    phone: RequiredStr
    email: RequiredStr
    ncpdp_id: RequiredStr = Field(..., alias="ncpdpId")
    address: PharmacyAddress
    dea_number: Optional[str] = Field(None, alias="deaNumber")
    npi_number: Optional[str] = Field(None, alias="npiNumber")
    pharmacist_in_charge: Optional[str] = Field(None, alias="pharmacistInCharge")
    chain_name: Optional[str] = Field(None, alias="chainName")
    is_active: bool = Field(True, alias="isActive")
    is_verified: bool = Field(False, alias="isVerified")
