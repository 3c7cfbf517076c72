"""Models used for API request and response payloads."""

from roster_backend.api.models.users import (
    ErrorResponse,
    MessageResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
