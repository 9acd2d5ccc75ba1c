"""
Main entrypoint for the Car Inventory API.

This module assembles the FastAPI application, sets up logging, builds
the car store and includes the API router.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn car_inventory_api.app.main:app
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.car_store import CarStore, example_car

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer undecodable request bodies with 400 instead of FastAPI's 422."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(settings: Optional[Settings] = None, store: Optional[CarStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment.
    store : Optional[CarStore]
        Store to serve.  A new, empty store is created when omitted.
        The example car is added to it when ``settings.seed_example_car``
        is enabled.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.state.store = store if store is not None else CarStore()
    if settings.seed_example_car:
        car_id = app.state.store.insert(example_car())
        logger.info("Seeded store with example car %s", car_id)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(api_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
