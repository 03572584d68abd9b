"""
Field rules - Pure predicates behind the registration form.

No directory access happens here; uniqueness checks live in the
validator so they can be skipped when a local rule already failed.
"""

import re

from email_validator import EmailNotValidError, validate_email

PASSWORD_MIN_LENGTH = 8
PASSWORD_SYMBOLS = "@#$%^&+="
MIN_TLD_LENGTH = 2

# lowercase, uppercase, digit, symbol, no whitespace, 8+ characters
_PASSWORD_PATTERN = re.compile(
    r"^(?=.*[0-9])(?=.*[a-z])(?=.*[A-Z])(?=.*[@#$%^&+=])(?=\S+$).{8,}$"
)


def is_blank(value: str) -> bool:
    return not value or not value.strip()


def is_valid_email(email: str) -> bool:
    """
    Syntax check only; deliverability (DNS) is never queried.

    Addresses must be ASCII and end in a top-level domain of at least two
    characters. Special-use domains such as .test are accepted.
    """
    if is_blank(email) or not email.isascii():
        return False
    try:
        result = validate_email(
            email,
            check_deliverability=False,
            allow_smtputf8=False,
            test_environment=True,
        )
    except EmailNotValidError:
        return False
    return len(result.ascii_domain.rsplit(".", 1)[-1]) >= MIN_TLD_LENGTH


def password_meets_policy(password: str) -> bool:
    return _PASSWORD_PATTERN.fullmatch(password) is not None


def passwords_match(password: str, confirmation: str) -> bool:
    return password == confirmation
