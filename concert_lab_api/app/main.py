"""
Main entrypoint for the Concert Lab API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` builds and configures the
app and owns the ``ConcertStore`` shared by every request; an instance
is created at import time as ``app`` so it can be served directly::

    uvicorn concert_lab_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .services.concert_store import ConcertStore


def create_app(store: Optional[ConcertStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[ConcertStore]
        Concert store to serve.  A new, empty store is created when
        omitted.  The store lives as long as the application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.concert_store = store if store is not None else ConcertStore()

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        version = init_db()
        logging.getLogger(__name__).info("Database ready at schema version %d", version)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        app.state.concert_store.delete_all()

    return app


app = create_app()
