"""SQLAlchemy table definitions."""

from roster_backend.database.schemas.user import UserSchema

__all__ = ["UserSchema"]
