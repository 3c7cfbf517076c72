"""Service layer for API-specific business logic."""

from roster_backend.api.services.users import (
    StoreFailureError,
    UserFields,
    UserNotFoundError,
    UserService,
)

__all__ = [
    "StoreFailureError",
    "UserFields",
    "UserNotFoundError",
    "UserService",
]
