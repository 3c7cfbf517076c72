"""Pydantic models for the user resource endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from roster_backend.database import UserSchema


class UserResponse(BaseModel):
    """Public representation of a stored user."""

    model_config = ConfigDict(populate_by_name=True)

    email: str
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    class_: str | None = Field(default=None, alias="class")

    @classmethod
    def from_schema(cls, user: UserSchema) -> UserResponse:
        """Build the response from a stored or echoed user row."""
        return cls(
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            class_=user.class_,
        )


class UserCreateRequest(BaseModel):
    """Payload for creating a new user."""

    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(description="The user's email")
    first_name: str | None = Field(
        default=None, alias="firstName", description="The user's first name"
    )
    last_name: str | None = Field(
        default=None, alias="lastName", description="The user's last name"
    )
    class_: str | None = Field(
        default=None, alias="class", description="The user's class"
    )


class UserUpdateRequest(BaseModel):
    """Payload replacing every mutable field of a user.

    Omitted fields are written as null.
    """

    model_config = ConfigDict(populate_by_name=True)

    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    class_: str | None = Field(default=None, alias="class")


class MessageResponse(BaseModel):
    """Confirmation returned by operations without a resource body."""

    message: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
