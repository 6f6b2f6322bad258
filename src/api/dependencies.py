"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the registration
client and a per-request SubmissionController into routes.
"""

from fastapi import Depends, Request

from src.adapters.console.notifier import ConsoleWelcomeNotifier
from src.domain.ports import RegistrationClient
from src.domain.submission import SubmissionController

# Module-level singleton - ConsoleWelcomeNotifier is stateless
_welcome_notifier = ConsoleWelcomeNotifier()


def get_registration_client(request: Request) -> RegistrationClient:
    """
    Get registration client from app state.

    The client is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.registration_client


def get_welcome_notifier() -> ConsoleWelcomeNotifier:
    """Get console welcome notifier (singleton)."""
    return _welcome_notifier


def get_submission_controller(
    client: RegistrationClient = Depends(get_registration_client),
    notifier: ConsoleWelcomeNotifier = Depends(get_welcome_notifier),
) -> SubmissionController:
    """
    Create a submission controller for one page request.

    Each rendered form owns its controller; nothing is shared between
    requests except the client.
    """
    return SubmissionController(client=client, on_success=notifier)
