"""
Domain layer - Pure form logic with zero framework imports.

This package contains the validation-and-submission core of the
registration form. It defines its own port interface for the remote
registration endpoint, so adapters can be swapped without touching it.
"""

from .exceptions import ControllerClosed, RegistrationError, UnknownField
from .models import (
    FIELDS,
    RegisteredUser,
    RegistrationFailure,
    RegistrationInput,
    RegistrationOutcome,
    RegistrationSuccess,
    SubmissionPhase,
    SubmissionState,
)
from .ports import RegistrationClient, SuccessCallback
from .presentation import FieldView, FormView, present
from .submission import FALLBACK_ERROR_MESSAGE, SubmissionController
from .validation import ValidationResult, validate

__all__ = [
    "FALLBACK_ERROR_MESSAGE",
    "FIELDS",
    "ControllerClosed",
    "FieldView",
    "FormView",
    "RegisteredUser",
    "RegistrationClient",
    "RegistrationError",
    "RegistrationFailure",
    "RegistrationInput",
    "RegistrationOutcome",
    "RegistrationSuccess",
    "SubmissionController",
    "SubmissionPhase",
    "SubmissionState",
    "SuccessCallback",
    "UnknownField",
    "ValidationResult",
    "present",
    "validate",
]
