"""
FastAPI dependencies shared by the endpoints.

The car store is created once by ``create_app`` and attached to
``app.state``.  Handlers receive it through ``Depends(get_store)``
instead of importing a module level global, so every application
instance (and every test) works on its own store.
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from car_inventory_api.app.schemas.car import CarModel
from car_inventory_api.app.services.car_store import CarStore


def get_store(request: Request) -> CarStore:
    """Return the store bound to the application serving ``request``."""
    return request.app.state.store


async def car_from_body(request: Request) -> CarModel:
    """Decode the request body as a ``CarModel``.

    The body is read as JSON whatever ``Content-Type`` the client sent.
    Anything other than a JSON object (``null``, arrays, invalid JSON,
    an empty body) fails with ``RequestValidationError``, which the
    application answers with 400.
    """
    body = await request.body()
    try:
        return CarModel.model_validate_json(body)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False, include_input=False)) from exc
