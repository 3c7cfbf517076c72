"""Database engine and session management utilities."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from roster_backend.database.base import BaseSchema
from roster_backend.settings import BackendSettings, get_settings


def _is_in_memory_sqlite(url: str) -> bool:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return False
    return parsed.database in (None, "", ":memory:")


class DatabaseService:
    """Wraps SQLAlchemy engine and session factory."""

    def __init__(
        self,
        url: str | None = None,
        *,
        settings: BackendSettings | None = None,
    ) -> None:
        config = settings or get_settings()
        database_url = url or config.database_url
        engine_options: dict[str, Any] = {"echo": config.database_echo}
        if _is_in_memory_sqlite(database_url):
            # One shared connection holds the table; every statement autocommits.
            engine_options["connect_args"] = {"check_same_thread": False}
            engine_options["poolclass"] = StaticPool
            engine_options["isolation_level"] = "AUTOCOMMIT"
        self._engine = create_engine(database_url, **engine_options)
        self._session_factory = sessionmaker(
            bind=self._engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            class_=Session,
        )

    @property
    def engine(self) -> Engine:
        """Expose the SQLAlchemy engine."""

        return self._engine

    def create_schema(self) -> None:
        """Create every table known to :class:`BaseSchema` if missing."""

        BaseSchema.metadata.create_all(self._engine)

    def dispose(self) -> None:
        """Release pooled connections (drops an in-memory store)."""

        self._engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide a transactional session scope."""

        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
