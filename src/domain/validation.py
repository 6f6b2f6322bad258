"""
Form validation - Pure field rules for the registration form.

Every rule runs on every call so that all field errors are reported
under one submit attempt, not one at a time.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from email_validator import EmailNotValidError, validate_email

from .models import RegistrationInput

FIRST_NAME_TOO_SHORT = "First name must be at least 2 characters"
LAST_NAME_TOO_SHORT = "Last name must be at least 2 characters"
INVALID_EMAIL = "Invalid email address"
PASSWORD_TOO_SHORT = "Password must be at least 8 characters"
PASSWORDS_DONT_MATCH = "Passwords don't match"

MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 8


@dataclass(frozen=True)
class ValidationResult:
    """
    Per-field error messages for one validation run.

    A field without an entry passed all of its rules. The result is
    falsy when invalid, so callers can write ``if not result: ...``.
    """

    errors: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """True if no field has an error."""
        return not self.errors

    def error_for(self, field_name: str) -> str | None:
        return self.errors.get(field_name)

    def __bool__(self) -> bool:
        return self.is_valid


def is_email_shaped(value: str) -> bool:
    """
    Check RFC email syntax with a dotted domain.

    Only the shape is checked; no DNS lookup is made.
    """
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate(form: RegistrationInput) -> ValidationResult:
    """
    Validate all registration fields independently.

    Empty values fail the same rule as short ones. The confirmation is
    compared to the raw password even when the password is itself invalid.

    Args:
        form: Field values of the current submit attempt

    Returns:
        ValidationResult with one message per failing field
    """
    errors: dict[str, str] = {}

    if len(form.first_name) < MIN_NAME_LENGTH:
        errors["first_name"] = FIRST_NAME_TOO_SHORT
    if len(form.last_name) < MIN_NAME_LENGTH:
        errors["last_name"] = LAST_NAME_TOO_SHORT
    if not is_email_shaped(form.email):
        errors["email"] = INVALID_EMAIL
    if len(form.password) < MIN_PASSWORD_LENGTH:
        errors["password"] = PASSWORD_TOO_SHORT
    if form.confirm_password != form.password:
        errors["confirm_password"] = PASSWORDS_DONT_MATCH

    return ValidationResult(errors=errors)
