"""
Main entrypoint for the Phonebook API.

This module assembles the FastAPI application, sets up logging, CORS
and the router.  ``create_app`` builds and configures the app, which is
then instantiated at module import time as ``app``, so it can be run
with uvicorn directly::

    uvicorn phonebook_api.app.main:app --host 0.0.0.0 --port 3001

The database is opened, migrated and seeded when the application
starts, and the resulting ``ContactService`` is stored on ``app.state``
for the endpoints to use.  It is closed when the application stops.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router
from .core.config import settings
from .core.db import connect, get_database_path, init_db, seed_contacts
from .core.logging_config import setup_logging
from .services.contact_service import ContactService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    conn = connect(app.state.db_path)
    init_db(conn)
    seed_contacts(conn)
    app.state.contact_service = ContactService(conn)
    logger.info("DB file: %s", app.state.db_path)
    try:
        yield
    finally:
        app.state.contact_service.close()


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"error": ...}``, the shape clients expect."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=exc.headers,
    )


def create_app(db_path: Optional[str] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    db_path : Optional[str]
        Location of the SQLite file.  Defaults to the path derived from
        ``settings.data_dir`` and ``settings.db_filename``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the startup
    # steps below can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.db_path = db_path or get_database_path()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
