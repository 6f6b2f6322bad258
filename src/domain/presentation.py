"""
Presentation adapter - Projects controller state into view state.

`present()` is a pure function; the rendering layer calls it after every
state change and draws whatever FormView it returns.
"""

from dataclasses import dataclass

from .models import FIELDS, RegistrationInput, SubmissionPhase, SubmissionState
from .validation import ValidationResult

SUBMIT_LABEL = "Create Account"
SUBMITTING_LABEL = "Creating Account..."
SUCCESS_MESSAGE = "Registration successful! Welcome aboard."


@dataclass(frozen=True)
class FieldSpec:
    """Static description of one form input."""

    name: str
    element_id: str
    label: str
    input_type: str


FIELD_SPECS: dict[str, FieldSpec] = {
    "first_name": FieldSpec("first_name", "firstName-input", "First Name", "text"),
    "last_name": FieldSpec("last_name", "lastName-input", "Last Name", "text"),
    "email": FieldSpec("email", "email-input", "Email", "email"),
    "password": FieldSpec("password", "password-input", "Password", "password"),
    "confirm_password": FieldSpec(
        "confirm_password", "confirmPassword-input", "Confirm Password", "password"
    ),
}


@dataclass(frozen=True)
class FieldView:
    """One rendered input: its static description, current value and error text."""

    spec: FieldSpec
    value: str
    error: str | None

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def element_id(self) -> str:
        return self.spec.element_id

    @property
    def label(self) -> str:
        return self.spec.label

    @property
    def input_type(self) -> str:
        return self.spec.input_type

    @property
    def input_name(self) -> str:
        """Form-encoded key, the camelCase wire name."""
        return self.spec.element_id.removesuffix("-input")

    @property
    def error_id(self) -> str:
        return f"{self.input_name}-error"


@dataclass(frozen=True)
class FormView:
    """Everything the rendering layer needs to draw the form."""

    fields: tuple[FieldView, ...]
    button_label: str
    button_disabled: bool
    success_message: str | None
    error_message: str | None

    @property
    def field_errors(self) -> dict[str, str]:
        return {f.name: f.error for f in self.fields if f.error is not None}

    def field(self, name: str) -> FieldView:
        for field_view in self.fields:
            if field_view.name == name:
                return field_view
        raise KeyError(name)


def present(
    state: SubmissionState,
    validation: ValidationResult,
    values: RegistrationInput,
) -> FormView:
    """
    Build the view state for the current controller snapshot.

    Args:
        state: Current submission state
        validation: Result of the latest submit attempt's validation
        values: Current field values

    Returns:
        FormView with fields in tab order
    """
    submitting = state.phase is SubmissionPhase.SUBMITTING
    fields = tuple(
        FieldView(
            spec=FIELD_SPECS[name],
            value=getattr(values, name),
            error=validation.error_for(name),
        )
        for name in FIELDS
    )
    return FormView(
        fields=fields,
        button_label=SUBMITTING_LABEL if submitting else SUBMIT_LABEL,
        button_disabled=submitting,
        success_message=SUCCESS_MESSAGE if state.phase is SubmissionPhase.SUCCEEDED else None,
        error_message=state.error_message if state.phase is SubmissionPhase.FAILED else None,
    )
