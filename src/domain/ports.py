"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the form core requires
from infrastructure. Adapters implement these protocols.
"""

from collections.abc import Callable
from typing import Protocol

from .models import RegisteredUser, RegistrationInput, RegistrationOutcome


class RegistrationClient(Protocol):
    """Port interface for the remote registration endpoint."""

    async def send_registration(self, form: RegistrationInput) -> RegistrationOutcome:
        """
        Send one registration request.

        Single attempt, no retry. Must always resolve: transport failures
        are returned as RegistrationFailure(message=None), never raised.

        Args:
            form: Validated form snapshot. The confirmation field is
                client-only and must not be transmitted.

        Returns:
            RegistrationSuccess with the created user, or RegistrationFailure
        """
        ...


SuccessCallback = Callable[[RegisteredUser], None]
"""Caller-supplied hook invoked once per successful registration."""
