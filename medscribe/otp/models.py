from typing import Any, ClassVar
from pydantic import Field, field_validator
from medscribe.common.validation import RequestSchema, RequiredStr


class SendOtpIn(RequestSchema):
    error_message: ClassVar[str] = "Email and first name are required"

    email: RequiredStr
    first_name: RequiredStr = Field(..., alias="firstName")


class VerifyOtpIn(RequestSchema):
    error_message: ClassVar[str] = "Email and OTP are required"

    email: RequiredStr
    otp: RequiredStr

    @field_validator("otp", mode="before")
    @classmethod
    def numeric_otp_as_text(cls, v: Any) -> Any:
        # clients sometimes send the code as a JSON number
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v
