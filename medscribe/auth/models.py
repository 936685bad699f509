from typing import ClassVar
from pydantic import Field, field_validator, model_validator
from medscribe.auth.dependencies import normalize_email_address
from medscribe.auth.utils import validate_password
from medscribe.common.validation import RequestSchema, RequiredStr


class ForgotPasswordIn(RequestSchema):
    error_message: ClassVar[str] = "Invalid email address"

    email: RequiredStr

    @field_validator("email")
    @classmethod
    def valid_email(cls, v: str) -> str:
        return normalize_email_address(v)


class ResetPasswordIn(RequestSchema):
    error_message: ClassVar[str] = "Invalid input data"

    token: RequiredStr
    password: str
    confirm_password: str = Field(..., alias="confirmPassword")

    @field_validator("password")
    @classmethod
    def strong_password(cls, v: str) -> str:
        ok, detail = validate_password(v)
        if not ok:
            raise ValueError(detail)
        return v

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self
