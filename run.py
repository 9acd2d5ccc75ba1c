"""Entry point for the Car Inventory API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``8000``); see
``car_inventory_api/app/core/config.py`` for the other settings.

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from car_inventory_api.app.core.config import settings
from car_inventory_api.app.main import app

logger = logging.getLogger(__name__)


async def main() -> int:
    """Serve the API until interrupted.

    Returns a non-zero exit status if the server could not start, for
    instance because the port is already in use.
    """
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()
    if not server.started:
        logger.error("Server failed to start on %s:%s", settings.host, settings.port)
        return 1
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        pass
