"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Valid registration form data
- A mock registration endpoint served through httpx.MockTransport
- HTTP registration clients wired to the mock endpoint
"""

import json
from collections.abc import AsyncGenerator

import httpx
import pytest
import pytest_asyncio

from src.adapters.http.client import HttpRegistrationClient
from src.domain.models import RegisteredUser

REGISTER_URL = "http://testserver.local/api/register"


class MockRegistrationBackend:
    """
    Stand-in for the remote registration endpoint.

    - existing@example.com: 400 "Email already exists"
    - server-error@example.com: 500 "Internal server error"
    - anything else: 200 with the submitted user and id "123"

    Every request body is recorded in `requests`.
    """

    def __init__(self) -> None:
        self.requests: list[dict] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)

        if body["email"] == "existing@example.com":
            return httpx.Response(400, json={"success": False, "message": "Email already exists"})

        if body["email"] == "server-error@example.com":
            return httpx.Response(500, json={"success": False, "message": "Internal server error"})

        return httpx.Response(
            200,
            json={
                "success": True,
                "message": "Registration successful",
                "user": {
                    "id": "123",
                    "email": body["email"],
                    "firstName": body["firstName"],
                    "lastName": body["lastName"],
                },
            },
        )


def abort_backend(request: httpx.Request) -> httpx.Response:
    """Endpoint that never answers - the connection is aborted."""
    raise httpx.ConnectError("Connection aborted", request=request)


@pytest.fixture
def valid_form_data() -> dict[str, str]:
    """Field values that pass every validation rule."""
    return {
        "first_name": "John",
        "last_name": "Doe",
        "email": "john@example.com",
        "password": "password123",
        "confirm_password": "password123",
    }


@pytest.fixture
def john() -> RegisteredUser:
    """User the mock endpoint returns for the valid form data."""
    return RegisteredUser(id="123", email="john@example.com", first_name="John", last_name="Doe")


@pytest.fixture
def backend() -> MockRegistrationBackend:
    return MockRegistrationBackend()


@pytest_asyncio.fixture
async def registration_client(
    backend: MockRegistrationBackend,
) -> AsyncGenerator[HttpRegistrationClient, None]:
    """HttpRegistrationClient talking to the mock endpoint."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(backend)) as http_client:
        yield HttpRegistrationClient(http_client, REGISTER_URL)


@pytest_asyncio.fixture
async def aborting_client() -> AsyncGenerator[HttpRegistrationClient, None]:
    """HttpRegistrationClient whose requests never reach the endpoint."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(abort_backend)) as http_client:
        yield HttpRegistrationClient(http_client, REGISTER_URL)


@pytest.fixture
def aborting_backend():
    """Mock transport handler that aborts every request."""
    return abort_backend
