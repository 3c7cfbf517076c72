"""Repository helpers for working with users."""

from collections.abc import Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from roster_backend.database.schemas import UserSchema


class UserRepository:
    """Encapsulates persistence operations for :class:`UserSchema`.

    Every method issues exactly one SQL statement.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> Sequence[UserSchema]:
        """Return every stored user."""
        return self._session.scalars(select(UserSchema)).all()

    def get_by_email(self, email: str) -> UserSchema | None:
        """Return user entity by user's email."""
        stmt = select(UserSchema).where(UserSchema.email == email)
        return self._session.scalar(stmt)

    def add(self, user: UserSchema) -> UserSchema:
        """Insert a new user; constraint violations surface immediately."""
        self._session.add(user)
        self._session.flush()
        return user

    def update_fields(
        self,
        email: str,
        *,
        first_name: str | None,
        last_name: str | None,
        class_: str | None,
    ) -> int:
        """Overwrite the mutable columns and return the affected row count."""
        stmt = (
            update(UserSchema)
            .where(UserSchema.email == email)
            .values(
                {
                    UserSchema.first_name: first_name,
                    UserSchema.last_name: last_name,
                    UserSchema.class_: class_,
                }
            )
            .execution_options(synchronize_session=False)
        )
        return self._session.execute(stmt).rowcount

    def delete_by_email(self, email: str) -> int:
        """Delete the user and return the affected row count."""
        stmt = (
            delete(UserSchema)
            .where(UserSchema.email == email)
            .execution_options(synchronize_session=False)
        )
        return self._session.execute(stmt).rowcount
