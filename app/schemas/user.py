"""Sign-up request/response schemas - API contract and field validation."""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.errors import SignUpError

FULL_NAME_MAX_LENGTH = 150
EMAIL_MAX_LENGTH = 150
PHONE_MAX_LENGTH = 50

# Checked in this order; the first missing one is reported.
REQUIRED_FIELDS = ("full_name", "email", "phone", "password")


def coerce_to_str(value: Any) -> str:
    """Render a decoded JSON value the way JavaScript's String() does. Missing and null become ""."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        # JS switches to exponent notation at 1e21
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, list):
        return ",".join(coerce_to_str(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def text_length(value: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count as two."""
    return len(value.encode("utf-16-le", errors="surrogatepass")) // 2


class FieldFailure(BaseModel):
    field: str
    message: str


class SignUpRequest(BaseModel):
    """Sign-up body. Every field is coerced to a string, so parsing itself never fails."""

    model_config = ConfigDict(extra="ignore")

    full_name: str = ""
    email: str = ""
    phone: str = ""
    password: str = ""
    # Only the camelCase key is read.
    confirm_password: str = Field(default="", validation_alias="confirmPassword")

    @field_validator("*", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> str:
        return coerce_to_str(value)

    def failures(self) -> list[FieldFailure]:
        """All field-level failures, in the order they are reported to clients."""
        found: list[FieldFailure] = []
        for name in REQUIRED_FIELDS:
            if not getattr(self, name):
                found.append(FieldFailure(field=name, message=f"Field {name} is required"))

        # Messages say 100 while the limits are 150; clients already match on this text.
        if text_length(self.full_name) > FULL_NAME_MAX_LENGTH:
            found.append(
                FieldFailure(field="full_name", message="Full name should not be more than 100 characters")
            )
        if text_length(self.email) > EMAIL_MAX_LENGTH:
            found.append(FieldFailure(field="email", message="Email should not be more than 100 characters"))
        if text_length(self.phone) > PHONE_MAX_LENGTH:
            found.append(FieldFailure(field="phone", message="Invalid phone number"))

        # bcrypt cannot hash NUL bytes
        if "\x00" in self.password:
            found.append(FieldFailure(field="password", message="Password contains invalid characters"))

        if self.password != self.confirm_password:
            found.append(FieldFailure(field="confirmPassword", message="Passwords do not match"))
        return found


def parse_sign_up(body: Any) -> SignUpRequest:
    """Build a SignUpRequest from a decoded JSON body or raise a validation SignUpError."""
    if not isinstance(body, dict):
        body = {}
    request = SignUpRequest.model_validate(body)
    failures = request.failures()
    if failures:
        raise SignUpError.validation(failures[0].message, failures)
    return request


class NewUser(BaseModel):
    """Values handed to the repository to create a user row."""

    full_name: str
    email: str
    phone: str
    password_hash: str


class SignUpResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    success: bool = False
    msg: str
