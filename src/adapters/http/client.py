"""
HTTP registration client - Implements RegistrationClient protocol.

Sends the registration request with httpx and maps every response, or the
lack of one, to a RegistrationOutcome. Nothing is raised to the caller.
"""

import logging

import httpx
from pydantic import ValidationError

from src.domain.models import (
    RegistrationFailure,
    RegistrationInput,
    RegistrationOutcome,
    RegistrationSuccess,
)

from .models import RegisterPayload, RegisterResponse

logger = logging.getLogger(__name__)


class HttpRegistrationClient:
    """
    Implements RegistrationClient protocol over HTTP.

    Uses structural subtyping - no explicit inheritance from Protocol.
    One POST per call, no retries. Timeouts belong to the injected
    httpx.AsyncClient.
    """

    def __init__(self, http_client: httpx.AsyncClient, url: str) -> None:
        self._http = http_client
        self._url = url

    async def send_registration(self, form: RegistrationInput) -> RegistrationOutcome:
        """
        POST the form to the registration endpoint.

        Mapping:
        - 2xx with success=true and a user: RegistrationSuccess
        - any other readable body: RegistrationFailure(body message)
        - unreadable body: RegistrationFailure(None)
        - transport error (connect, abort, timeout): RegistrationFailure(None)

        Args:
            form: Validated form snapshot

        Returns:
            RegistrationOutcome for the single attempt
        """
        payload = RegisterPayload.from_form(form).model_dump(by_alias=True)
        try:
            response = await self._http.post(self._url, json=payload)
        except httpx.TransportError as exc:
            logger.warning(
                "Registration request to %s failed: %s", self._url, type(exc).__name__
            )
            return RegistrationFailure(message=None)

        try:
            body = RegisterResponse.model_validate_json(response.content)
        except ValidationError:
            logger.warning(
                "Unreadable registration response (status %s)", response.status_code
            )
            return RegistrationFailure(message=None)

        if response.is_success and body.success and body.user is not None:
            return RegistrationSuccess(user=body.user.to_domain(), message=body.message or "")

        logger.info(
            "Registration rejected by endpoint (status %s)", response.status_code
        )
        return RegistrationFailure(message=body.message)
