"""User resource domain logic."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.orm import Session

from roster_backend.database import UserRepository, UserSchema

logger = logging.getLogger(__name__)


class UserNotFoundError(Exception):
    """Raised when no user is stored under the requested email."""


class StoreFailureError(Exception):
    """Raised when the underlying store reports any error."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @classmethod
    def from_exception(cls, exc: SQLAlchemyError) -> StoreFailureError:
        """Keep the driver's own message when one is available."""

        if isinstance(exc, DBAPIError) and exc.orig is not None:
            return cls(str(exc.orig))
        return cls(str(exc))


@dataclass(slots=True)
class UserFields:
    """Mutable columns of a user, as written by create and update."""

    first_name: str | None = None
    last_name: str | None = None
    class_: str | None = None


class UserService:
    """Maps each user operation onto a single repository call."""

    def list_users(self, *, session: Session) -> Sequence[UserSchema]:
        repository = UserRepository(session)
        try:
            return repository.list_all()
        except SQLAlchemyError as exc:
            raise self._store_failure("list", exc) from exc

    def get_user(self, *, session: Session, email: str) -> UserSchema:
        repository = UserRepository(session)
        try:
            user = repository.get_by_email(email)
        except SQLAlchemyError as exc:
            raise self._store_failure("get", exc) from exc
        if user is None:
            raise UserNotFoundError(email)
        return user

    def create_user(
        self, *, session: Session, email: str, fields: UserFields
    ) -> UserSchema:
        """Insert a user; the primary key is the only duplicate guard."""

        repository = UserRepository(session)
        user = UserSchema(
            email=email,
            first_name=fields.first_name,
            last_name=fields.last_name,
            class_=fields.class_,
        )
        try:
            user = repository.add(user)
        except SQLAlchemyError as exc:
            raise self._store_failure("create", exc) from exc
        logger.info("Created user %s", email)
        return user

    def update_user(
        self, *, session: Session, email: str, fields: UserFields
    ) -> UserSchema:
        """Replace all mutable fields and echo the written values."""

        repository = UserRepository(session)
        try:
            changed = repository.update_fields(
                email,
                first_name=fields.first_name,
                last_name=fields.last_name,
                class_=fields.class_,
            )
        except SQLAlchemyError as exc:
            raise self._store_failure("update", exc) from exc
        if changed == 0:
            raise UserNotFoundError(email)
        logger.info("Updated user %s", email)
        return UserSchema(
            email=email,
            first_name=fields.first_name,
            last_name=fields.last_name,
            class_=fields.class_,
        )

    def delete_user(self, *, session: Session, email: str) -> None:
        repository = UserRepository(session)
        try:
            changed = repository.delete_by_email(email)
        except SQLAlchemyError as exc:
            raise self._store_failure("delete", exc) from exc
        if changed == 0:
            raise UserNotFoundError(email)
        logger.info("Deleted user %s", email)

    @staticmethod
    def _store_failure(operation: str, exc: SQLAlchemyError) -> StoreFailureError:
        error = StoreFailureError.from_exception(exc)
        logger.warning("Store failure during %s: %s", operation, error.message)
        return error
