"""
Unit tests for the presentation adapter.

Tests that present() maps each submission phase to the right button,
banner and field error view state.
"""

import pytest

from src.domain.models import RegisteredUser, RegistrationInput, SubmissionState
from src.domain.presentation import FIELD_SPECS, present
from src.domain.validation import ValidationResult

USER = RegisteredUser(id="123", email="john@example.com", first_name="John", last_name="Doe")


class TestButton:
    """Tests for submit button label and disabled flag."""

    @pytest.mark.parametrize(
        "state",
        [
            SubmissionState.idle(),
            SubmissionState.validating(),
            SubmissionState.succeeded(USER),
            SubmissionState.failed("Email already exists"),
        ],
    )
    def test_enabled_outside_submitting(self, state: SubmissionState) -> None:
        """Every phase except SUBMITTING shows an enabled Create Account button."""
        view = present(state, ValidationResult(), RegistrationInput())
        assert view.button_label == "Create Account"
        assert view.button_disabled is False

    def test_disabled_while_submitting(self) -> None:
        """SUBMITTING shows a disabled Creating Account... button."""
        view = present(SubmissionState.submitting(), ValidationResult(), RegistrationInput())
        assert view.button_label == "Creating Account..."
        assert view.button_disabled is True


class TestBanners:
    """Tests for success and error banners."""

    def test_success_banner_only_when_succeeded(self) -> None:
        """SUCCEEDED shows the fixed success text and no error."""
        view = present(SubmissionState.succeeded(USER), ValidationResult(), RegistrationInput())
        assert view.success_message == "Registration successful! Welcome aboard."
        assert view.error_message is None

    def test_error_banner_only_when_failed(self) -> None:
        """FAILED shows its message and no success text."""
        view = present(
            SubmissionState.failed("Internal server error"), ValidationResult(), RegistrationInput()
        )
        assert view.error_message == "Internal server error"
        assert view.success_message is None

    @pytest.mark.parametrize(
        "state",
        [SubmissionState.idle(), SubmissionState.validating(), SubmissionState.submitting()],
    )
    def test_no_banner_in_other_phases(self, state: SubmissionState) -> None:
        """IDLE, VALIDATING and SUBMITTING show no banner."""
        view = present(state, ValidationResult(), RegistrationInput())
        assert view.success_message is None
        assert view.error_message is None


class TestFields:
    """Tests for field views."""

    def test_fields_in_tab_order(self) -> None:
        """Fields come out in form tab order."""
        view = present(SubmissionState.idle(), ValidationResult(), RegistrationInput())
        assert [f.element_id for f in view.fields] == [
            "firstName-input",
            "lastName-input",
            "email-input",
            "password-input",
            "confirmPassword-input",
        ]

    def test_input_types(self) -> None:
        """Email and password inputs expose their semantic type."""
        assert FIELD_SPECS["email"].input_type == "email"
        assert FIELD_SPECS["password"].input_type == "password"
        assert FIELD_SPECS["confirm_password"].input_type == "password"
        assert FIELD_SPECS["first_name"].input_type == "text"

    def test_labels(self) -> None:
        """Each field carries its visible label."""
        view = present(SubmissionState.idle(), ValidationResult(), RegistrationInput())
        assert [f.label for f in view.fields] == [
            "First Name",
            "Last Name",
            "Email",
            "Password",
            "Confirm Password",
        ]

    def test_values_and_errors(self) -> None:
        """Field values and validation errors are carried per field."""
        validation = ValidationResult(errors={"email": "Invalid email address"})
        values = RegistrationInput(first_name="John", email="invalid-email")

        view = present(SubmissionState.idle(), validation, values)

        assert view.field("first_name").value == "John"
        assert view.field("first_name").error is None
        assert view.field("email").value == "invalid-email"
        assert view.field("email").error == "Invalid email address"
        assert view.field_errors == {"email": "Invalid email address"}

    def test_input_name_and_error_id(self) -> None:
        """Form keys and error element ids use the camelCase names."""
        view = present(SubmissionState.idle(), ValidationResult(), RegistrationInput())
        confirm = view.field("confirm_password")
        assert confirm.input_name == "confirmPassword"
        assert confirm.error_id == "confirmPassword-error"

    def test_unknown_field_lookup(self) -> None:
        """Looking up a field that does not exist raises KeyError."""
        view = present(SubmissionState.idle(), ValidationResult(), RegistrationInput())
        with pytest.raises(KeyError):
            view.field("username")

    def test_present_is_pure(self) -> None:
        """Same inputs produce equal views."""
        args = (SubmissionState.failed("x"), ValidationResult(), RegistrationInput(email="a"))
        assert present(*args) == present(*args)
