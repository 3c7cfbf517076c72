"""Database connectivity helpers and configuration objects."""

from roster_backend.database.base import BaseSchema
from roster_backend.database.dependencies import get_database, get_session
from roster_backend.database.repositories import UserRepository
from roster_backend.database.schemas import UserSchema
from roster_backend.database.service import DatabaseService
from roster_backend.settings import BackendSettings, get_settings, settings

__all__ = [
    "BaseSchema",
    "BackendSettings",
    "DatabaseService",
    "UserRepository",
    "UserSchema",
    "get_database",
    "get_session",
    "get_settings",
    "settings",
]
