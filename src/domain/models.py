"""
Domain models - Value objects for the registration form.

All models are frozen dataclasses. SubmissionState is built through its
classmethods so that `user` is only set for SUCCEEDED and `error_message`
only for FAILED.
"""

from dataclasses import dataclass
from enum import Enum

# Field order is also the form's tab order.
FIELDS = ("first_name", "last_name", "email", "password", "confirm_password")


class SubmissionPhase(str, Enum):
    """
    Submission state machine phases.

    Transitions (driven by SubmissionController):
    - IDLE/SUCCEEDED/FAILED -> VALIDATING (submit attempt)
    - VALIDATING -> IDLE (field errors, no request sent)
    - VALIDATING -> SUBMITTING (input valid, request sent)
    - SUBMITTING -> SUCCEEDED (endpoint accepted registration)
    - SUBMITTING -> FAILED (rejection, server fault or transport fault)

    No phase is terminal. A submit attempt while SUBMITTING is ignored.
    """

    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    SUBMITTING = "SUBMITTING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class RegistrationInput:
    """Snapshot of the five form fields for one submit attempt."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""


@dataclass(frozen=True)
class RegisteredUser:
    """User returned by a successful registration call."""

    id: str
    email: str
    first_name: str
    last_name: str


@dataclass(frozen=True)
class RegistrationSuccess:
    """Client outcome: the endpoint accepted the registration."""

    user: RegisteredUser
    message: str = ""


@dataclass(frozen=True)
class RegistrationFailure:
    """
    Client outcome: the registration was not accepted.

    `message` is the server-provided text, or None when no usable message
    exists (transport fault, unreadable response).
    """

    message: str | None = None


RegistrationOutcome = RegistrationSuccess | RegistrationFailure


@dataclass(frozen=True)
class SubmissionState:
    """Current phase of the form, with its phase-specific payload."""

    phase: SubmissionPhase
    user: RegisteredUser | None = None
    error_message: str | None = None

    @classmethod
    def idle(cls) -> "SubmissionState":
        return cls(SubmissionPhase.IDLE)

    @classmethod
    def validating(cls) -> "SubmissionState":
        return cls(SubmissionPhase.VALIDATING)

    @classmethod
    def submitting(cls) -> "SubmissionState":
        return cls(SubmissionPhase.SUBMITTING)

    @classmethod
    def succeeded(cls, user: RegisteredUser) -> "SubmissionState":
        return cls(SubmissionPhase.SUCCEEDED, user=user)

    @classmethod
    def failed(cls, message: str) -> "SubmissionState":
        return cls(SubmissionPhase.FAILED, error_message=message)
