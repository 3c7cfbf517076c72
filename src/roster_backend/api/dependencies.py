"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from roster_backend.api.services import UserService

_user_service = UserService()


def get_user_service() -> UserService:
    """Return the shared :class:`UserService` instance."""

    return _user_service


__all__ = ["get_user_service"]
