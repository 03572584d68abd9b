"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Field rules are enforced by the domain validator, not here, so that every
field error reaches the client together.
"""

from pydantic import BaseModel, Field

from src.domain.models import FieldError, RegistrationInput


class RegistrationForm(BaseModel):
    """Values entered in the registration form."""

    username: str = Field("", description="Requested username")
    email: str = Field("", description="Email address")
    password: str = Field("", description="Password")
    password_confirmation: str = Field("", description="Password typed a second time")

    def to_input(self) -> RegistrationInput:
        return RegistrationInput(
            username=self.username,
            email=self.email,
            password=self.password,
            password_confirmation=self.password_confirmation,
        )


class ValidateRequest(RegistrationForm):
    """Request model for live form validation."""

    confirmation_touched: bool = Field(
        False, description="Whether the confirmation field has been edited yet"
    )


class FieldErrorModel(BaseModel):
    """One field-level validation error."""

    field: str
    message: str

    @classmethod
    def from_domain(cls, error: FieldError) -> "FieldErrorModel":
        return cls(field=error.field.value, message=error.message)


class ValidateResponse(BaseModel):
    """Response model for live form validation."""

    valid: bool
    errors: list[FieldErrorModel]


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    message: str
    username: str
    email: str


class FormErrorResponse(BaseModel):
    """Response model for a submission rejected by validation."""

    detail: str
    errors: list[FieldErrorModel]


class PasswordPolicyResponse(BaseModel):
    """Password requirements shown next to the form."""

    hint: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
