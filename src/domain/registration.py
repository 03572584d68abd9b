"""
Registration domain service - form validation and submission.

One RegistrationValidator backs one registration form session. It checks
every field on each call and only builds a UserRecord when all rules pass.

Rules (evaluated for every field, errors reported together)
==========================================================

username:
    required, then must not be in use (directory lookup)
email:
    must be well formed, then must not be in use (directory lookup);
    the first failing check is the only one reported
password:
    8+ characters with a lowercase letter, an uppercase letter,
    a digit and a symbol from @#$%^&+=
password_confirmation:
    must equal password, but only once the confirmation field has
    been touched; before that it always passes

The touched flag latches: once set for a session it is never cleared.
A new form session means a new validator.
"""

import logging
from dataclasses import dataclass

from .models import (
    Field,
    FieldError,
    Invalid,
    Ok,
    RegistrationInput,
    SubmitError,
    UserRecord,
    ValidationOutcome,
)
from .ports import UserDirectory
from .rules import is_blank, is_valid_email, password_meets_policy, passwords_match

logger = logging.getLogger(__name__)

PASSWORD_HINT = (
    "The password must be at least 8 characters long "
    "and consist of at least one lowercase letter, one uppercase letter, one digit, and "
    "one special character from @#$%^&+="
)

USERNAME_REQUIRED_MESSAGE = "Please enter a username"
USERNAME_IN_USE_MESSAGE = "A user with this username does already exist"
EMAIL_INVALID_MESSAGE = "Please enter a correct email address"
EMAIL_IN_USE_MESSAGE = "A user with this email address already exists"
PASSWORD_MISMATCH_MESSAGE = "Passwords do not match"

FORM_ERROR_MESSAGE = "There are errors in the registration form."
SUBMIT_ERROR_MESSAGE = "A server error occurred when registering. Please try again later."


@dataclass
class RegistrationValidator:
    """
    Domain service for a single registration form session.

    Holds the directory port and the confirmation-touched flag,
    the only state carried between calls.
    """

    directory: UserDirectory
    confirmation_touched: bool = False

    def mark_confirmation_touched(self) -> None:
        """Record that the user has edited the confirmation field."""
        self.confirmation_touched = True

    def validate(
        self, registration: RegistrationInput, confirmation_touched: bool = False
    ) -> ValidationOutcome:
        """
        Validate all four fields of a registration attempt.

        Args:
            registration: Values entered in the form
            confirmation_touched: True when the confirmation field has been
                edited; latches the session flag, False never clears it

        Returns:
            Ok with the UserRecord, or Invalid with every field error found
        """
        if confirmation_touched:
            self.mark_confirmation_touched()

        errors: list[FieldError] = []
        for check in (
            self._check_username,
            self._check_email,
            self._check_password,
            self._check_confirmation,
        ):
            error = check(registration)
            if error is not None:
                errors.append(error)

        if errors:
            return Invalid(errors=tuple(errors))

        return Ok(
            record=UserRecord(
                username=registration.username,
                email=registration.email,
                password=registration.password,
            )
        )

    def submit(self, record: UserRecord) -> SubmitError | None:
        """
        Register a validated user with the directory.

        Failures are logged here and never retried; the caller only sees
        the generic message.

        Returns:
            None on success, SubmitError if the directory call raised
        """
        try:
            self.directory.register(record)
        except Exception:
            logger.exception("Could not register the user %s", record.username)
            return SubmitError(message=SUBMIT_ERROR_MESSAGE)

        logger.info("Registered user %s", record.username)
        return None

    def _check_username(self, registration: RegistrationInput) -> FieldError | None:
        if is_blank(registration.username):
            return FieldError(Field.USERNAME, USERNAME_REQUIRED_MESSAGE)
        if not self.directory.username_is_not_in_use(registration.username):
            return FieldError(Field.USERNAME, USERNAME_IN_USE_MESSAGE)
        return None

    def _check_email(self, registration: RegistrationInput) -> FieldError | None:
        # First failing check wins: no lookup for a malformed address
        if not is_valid_email(registration.email):
            return FieldError(Field.EMAIL, EMAIL_INVALID_MESSAGE)
        if not self.directory.email_is_not_in_use(registration.email):
            return FieldError(Field.EMAIL, EMAIL_IN_USE_MESSAGE)
        return None

    def _check_password(self, registration: RegistrationInput) -> FieldError | None:
        if not password_meets_policy(registration.password):
            return FieldError(Field.PASSWORD, PASSWORD_HINT)
        return None

    def _check_confirmation(self, registration: RegistrationInput) -> FieldError | None:
        if not self.confirmation_touched:
            return None
        if not passwords_match(registration.password, registration.password_confirmation):
            return FieldError(Field.PASSWORD_CONFIRMATION, PASSWORD_MISMATCH_MESSAGE)
        return None
