"""Persistence helpers built on top of SQLAlchemy sessions."""

from roster_backend.database.repositories.user import UserRepository

__all__ = ["UserRepository"]
