"""Credential validation schemas for the sign-in and sign-up forms."""

from typing import Dict

from pydantic import BaseModel, EmailStr, Field, ValidationError as PydanticValidationError, field_validator, model_validator

from use_cases.session_models import CredentialInput, SignUpInput

INVALID_EMAIL_MESSAGE = "Invalid email address"
MIN_SIGN_UP_PASSWORD = 8


class ValidationError(Exception):
    """Local, field-scoped input error. Never reaches the auth gateway."""

    def __init__(self, field_errors: Dict[str, str]):
        super().__init__("; ".join(f"{k}: {v}" for k, v in field_errors.items()))
        self.field_errors = field_errors


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class CredentialSchema(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, value):
        return _strip(value)


class SignUpSchema(BaseModel):
    name: str
    email: EmailStr
    password: str
    confirm_password: str

    @field_validator("name")
    @classmethod
    def name_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, value):
        return _strip(value)

    @field_validator("password")
    @classmethod
    def password_length(cls, value: str) -> str:
        if len(value) < MIN_SIGN_UP_PASSWORD:
            raise ValueError(f"Password must be at least {MIN_SIGN_UP_PASSWORD} characters")
        return value

    @model_validator(mode="after")
    def passwords_match(self) -> "SignUpSchema":
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self


def _field_errors(exc: PydanticValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for err in exc.errors():
        loc = err.get("loc") or ()
        field = str(loc[0]) if loc else "confirm_password"
        msg = str(err.get("msg", "Invalid value"))
        # pydantic prefixes custom messages with "Value error, "
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        if field == "password" and err.get("type") == "string_too_short":
            msg = "Password is required"
        if field == "email":
            msg = INVALID_EMAIL_MESSAGE
        errors.setdefault(field, msg)
    return errors


def validate_credentials(inp: CredentialInput) -> CredentialInput:
    """Returns a normalized copy of the input or raises ValidationError."""
    try:
        parsed = CredentialSchema(email=inp.email, password=inp.password)
    except PydanticValidationError as e:
        raise ValidationError(_field_errors(e)) from None
    return CredentialInput(email=parsed.email, password=parsed.password)


def validate_sign_up(inp: SignUpInput) -> SignUpInput:
    try:
        parsed = SignUpSchema(
            name=inp.name,
            email=inp.email,
            password=inp.password,
            confirm_password=inp.confirm_password,
        )
    except PydanticValidationError as e:
        raise ValidationError(_field_errors(e)) from None
    return SignUpInput(
        name=parsed.name,
        email=parsed.email,
        password=parsed.password,
        confirm_password=parsed.confirm_password,
    )
