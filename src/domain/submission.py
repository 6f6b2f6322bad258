"""
Submission controller - Registration form state machine.

This module owns the form's field values and its SubmissionState, and is
the only place either is mutated.

Submission State Machine
========================

    IDLE ──submit──> VALIDATING ──errors──> IDLE
                         │
                         └──valid──> SUBMITTING ──success──> SUCCEEDED
                                         │
                                         └──failure──> FAILED

SUCCEEDED and FAILED accept new submit attempts, so the machine cycles for
the whole lifetime of the form. A submit attempt while SUBMITTING is a
no-op, which keeps exactly one registration request in flight.

The awaited client call is the only suspension point. The re-entrancy
check happens before it, so on a single event loop it cannot interleave
with another submit attempt. If the submitting task is cancelled
while waiting, the controller returns to IDLE so later attempts are
accepted.
"""

import asyncio
import dataclasses
import logging
from collections.abc import Callable

from .exceptions import ControllerClosed, UnknownField
from .models import (
    FIELDS,
    RegistrationFailure,
    RegistrationInput,
    RegistrationOutcome,
    RegistrationSuccess,
    SubmissionPhase,
    SubmissionState,
)
from .ports import RegistrationClient, SuccessCallback
from .presentation import FormView, present
from .validation import ValidationResult, validate

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Something went wrong. Please try again."

StateListener = Callable[[SubmissionState], None]


class SubmissionController:
    """
    Drives one registration form from input to outcome.

    The client and success callback are injected; the controller holds no
    global state and can be created per form instance.
    """

    def __init__(
        self,
        client: RegistrationClient,
        on_success: SuccessCallback | None = None,
        validator: Callable[[RegistrationInput], ValidationResult] = validate,
    ) -> None:
        self._client = client
        self._on_success = on_success
        self._validator = validator
        self._values = RegistrationInput()
        self._state = SubmissionState.idle()
        self._validation = ValidationResult()
        self._listeners: list[StateListener] = []
        self._closed = False

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def validation(self) -> ValidationResult:
        """Validation result of the most recent submit attempt."""
        return self._validation

    @property
    def values(self) -> RegistrationInput:
        return self._values

    @property
    def closed(self) -> bool:
        return self._closed

    def set_field(self, name: str, value: str) -> None:
        """
        Update one field value.

        Field errors from the last submit attempt are kept until the next
        attempt recomputes them.

        Raises:
            UnknownField: If name is not a registration form field
        """
        if name not in FIELDS:
            raise UnknownField(name)
        self._values = dataclasses.replace(self._values, **{name: value})

    def fill(self, **values: str) -> None:
        """Update several fields at once (keyword per field name)."""
        for name, value in values.items():
            self.set_field(name, value)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with the new state on every transition.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def view(self) -> FormView:
        return present(self._state, self._validation, self._values)

    def close(self) -> None:
        """
        Tear the controller down.

        An outcome arriving after close() is discarded: no transition, no
        success callback.
        """
        self._closed = True
        self._listeners.clear()

    async def submit(self) -> SubmissionState:
        """
        Run one submit attempt.

        Validates a snapshot of the current values and, if valid, sends it
        through the registration client. Failures are reported through the
        returned state, never raised.

        Returns:
            SubmissionState after the attempt

        Raises:
            ControllerClosed: If the controller was torn down
        """
        if self._closed:
            raise ControllerClosed("submit attempted after close()")
        if self._state.phase is SubmissionPhase.SUBMITTING:
            logger.debug("Submit ignored: registration request already in flight")
            return self._state

        form = self._values
        self._transition(SubmissionState.validating())
        self._validation = self._validator(form)
        if not self._validation.is_valid:
            logger.info(
                "Registration blocked by field errors: %s",
                ", ".join(sorted(self._validation.errors)),
            )
            self._transition(SubmissionState.idle())
            return self._state

        self._transition(SubmissionState.submitting())
        try:
            outcome = await self._send(form)
        except asyncio.CancelledError:
            if not self._closed:
                logger.info("Registration request cancelled, form back to idle")
                self._transition(SubmissionState.idle())
            raise

        if self._closed:
            logger.debug("Discarding registration outcome: controller closed")
            return self._state

        if isinstance(outcome, RegistrationSuccess):
            self._complete(outcome)
        else:
            self._fail(outcome)
        return self._state

    async def _send(self, form: RegistrationInput) -> RegistrationOutcome:
        try:
            return await self._client.send_registration(form)
        except Exception:
            # A client that raises instead of returning a failure still has
            # to leave SUBMITTING with a visible error.
            logger.exception("Registration client raised instead of returning an outcome")
            return RegistrationFailure(message=None)

    def _complete(self, outcome: RegistrationSuccess) -> None:
        user = outcome.user
        self._values = RegistrationInput()
        self._transition(SubmissionState.succeeded(user))
        logger.info("Registration succeeded for user %s", user.id)
        if self._on_success is not None:
            self._on_success(user)

    def _fail(self, outcome: RegistrationFailure) -> None:
        message = outcome.message
        if not message or not message.strip():
            message = FALLBACK_ERROR_MESSAGE
        logger.info("Registration failed: %s", message)
        self._transition(SubmissionState.failed(message))

    def _transition(self, state: SubmissionState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
