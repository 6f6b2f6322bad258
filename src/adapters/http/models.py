"""
Wire models for the registration endpoint.

Pydantic models for the JSON request and response bodies. Keys on the wire
are camelCase; Python attributes are snake_case.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.domain.models import RegisteredUser, RegistrationInput


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterPayload(_CamelModel):
    """Request body. The password confirmation is client-only and omitted."""

    first_name: str
    last_name: str
    email: str
    password: str

    @classmethod
    def from_form(cls, form: RegistrationInput) -> "RegisterPayload":
        return cls(
            first_name=form.first_name,
            last_name=form.last_name,
            email=form.email,
            password=form.password,
        )


class UserPayload(_CamelModel):
    """User object returned on success."""

    id: str
    email: str
    first_name: str
    last_name: str

    def to_domain(self) -> RegisteredUser:
        return RegisteredUser(
            id=self.id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
        )


class RegisterResponse(_CamelModel):
    """Response body for both success and failure."""

    success: bool = False
    message: str | None = None
    user: UserPayload | None = None
