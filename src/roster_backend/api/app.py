"""Factory for constructing the FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster_backend.api.errors import setup_error_handling
from roster_backend.api.routers import users_router
from roster_backend.database import DatabaseService
from roster_backend.logging_config import setup_logging
from roster_backend.settings import BackendSettings, get_settings

API_DESCRIPTION = "API for managing users"


def create_api(
    *,
    settings: BackendSettings | None = None,
    database: DatabaseService | None = None,
) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    The application owns its :class:`DatabaseService`; handlers reach it via
    ``app.state.database``.
    """
    config = settings or get_settings()
    setup_logging(config.log_level)

    app = FastAPI(
        title=config.api_title,
        version=config.api_version,
        description=API_DESCRIPTION,
        docs_url=config.docs_url,
        openapi_url=f"{config.docs_url}/openapi.json",
        redoc_url=None,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_error_handling(app)

    store = database or DatabaseService(settings=config)
    store.create_schema()
    app.state.database = store

    app.include_router(users_router)
    return app
