"""
Domain exceptions - Semantic error types for the registration form.

Submission outcomes (validation errors, server rejections, transport
faults) are never raised; they are reported through SubmissionState.
These exceptions signal misuse of the controller by calling code.
"""


class RegistrationError(Exception):
    """Base class for registration form domain errors."""

    pass


class UnknownField(RegistrationError):
    """Field name is not one of the registration form fields."""

    pass


class ControllerClosed(RegistrationError):
    """Submit attempted on a controller that has been torn down."""

    pass
