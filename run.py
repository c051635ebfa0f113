"""Entry point for the Phonebook API.

Starts the FastAPI application under Uvicorn, listening on all
interfaces so that devices on the local network (e.g. a phone running
the mobile client) can reach it.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables, with defaults ``0.0.0.0`` and ``3001``.  See
``phonebook_api/app/core/config.py`` for the other supported variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from phonebook_api.app.core.config import settings
from phonebook_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
