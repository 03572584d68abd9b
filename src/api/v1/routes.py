"""
API v1 routes.

Defines REST endpoints backing the registration form.

Handlers that reach the user directory are plain functions: FastAPI runs
them in its threadpool, so blocking lookups, bcrypt hashing and inserts
never stall the event loop.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_registration_validator
from src.api.models import (
    ErrorResponse,
    FieldErrorModel,
    FormErrorResponse,
    PasswordPolicyResponse,
    RegisterResponse,
    RegistrationForm,
    ValidateRequest,
    ValidateResponse,
)
from src.domain.models import Invalid, RegistrationInput, ValidationOutcome
from src.domain.registration import (
    FORM_ERROR_MESSAGE,
    PASSWORD_HINT,
    SUBMIT_ERROR_MESSAGE,
    RegistrationValidator,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])


def _run_validation(
    validator: RegistrationValidator,
    registration: RegistrationInput,
    confirmation_touched: bool,
) -> ValidationOutcome:
    """Validate, turning a failed directory lookup into the generic 503."""
    try:
        return validator.validate(registration, confirmation_touched=confirmation_touched)
    except Exception:
        logger.exception("Directory lookup failed while validating %s", registration.username)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=SUBMIT_ERROR_MESSAGE,
        ) from None


@router.post(
    "/registration/validate",
    response_model=ValidateResponse,
    summary="Validate the registration form",
    description="Check every form field and return all field errors at once. "
    "Password confirmation is only compared once confirmation_touched is true.",
)
def validate_form(
    request_data: ValidateRequest,
    validator: RegistrationValidator = Depends(get_registration_validator),
) -> ValidateResponse:
    """
    Validate form values without registering.

    - **confirmation_touched**: set once the user has edited the confirmation field
    """
    outcome = _run_validation(
        validator, request_data.to_input(), request_data.confirmation_touched
    )
    if isinstance(outcome, Invalid):
        return ValidateResponse(
            valid=False,
            errors=[FieldErrorModel.from_domain(error) for error in outcome.errors],
        )
    return ValidateResponse(valid=True, errors=[])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        422: {"model": FormErrorResponse, "description": "Errors in the registration form"},
        503: {"model": ErrorResponse, "description": "Registration service failure"},
    },
    summary="Register a new user",
    description="Validate the form and register the user. "
    "Submitting counts as having touched the confirmation field.",
)
def register(
    request_data: RegistrationForm,
    validator: RegistrationValidator = Depends(get_registration_validator),
) -> RegisterResponse | JSONResponse:
    """
    Register a new user.

    Returns every field error on 422; a directory failure becomes a
    generic 503 message with the cause kept in the server log.
    """
    outcome = _run_validation(validator, request_data.to_input(), confirmation_touched=True)

    if isinstance(outcome, Invalid):
        body = FormErrorResponse(
            detail=FORM_ERROR_MESSAGE,
            errors=[FieldErrorModel.from_domain(error) for error in outcome.errors],
        )
        return JSONResponse(
            status_code=422,
            content=body.model_dump(),
        )

    submit_error = validator.submit(outcome.record)
    if submit_error is not None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=submit_error.message,
        )

    return RegisterResponse(
        message="Registration successful",
        username=outcome.record.username,
        email=outcome.record.email,
    )


@router.get(
    "/registration/password-policy",
    response_model=PasswordPolicyResponse,
    summary="Password requirements",
)
async def password_policy() -> PasswordPolicyResponse:
    """Return the hint displayed under the password fields."""
    return PasswordPolicyResponse(hint=PASSWORD_HINT)
