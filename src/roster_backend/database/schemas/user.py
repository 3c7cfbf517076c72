"""User database schema."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from roster_backend.database.base import BaseSchema


class UserSchema(BaseSchema):
    """SQLAlchemy model for roster users, keyed by email."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String, primary_key=True)
    first_name: Mapped[str | None] = mapped_column("firstName", String, nullable=True)
    last_name: Mapped[str | None] = mapped_column("lastName", String, nullable=True)
    class_: Mapped[str | None] = mapped_column("class", String, nullable=True)
