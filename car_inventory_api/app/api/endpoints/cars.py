"""
Car endpoints.

These routes expose a CRUD API over the in‑memory car store:

* ``POST /cars`` creates a car and answers 201 with an empty body and
  a ``Location`` header pointing at the new record.
* ``GET /cars`` and ``GET /cars/{car_id}`` return JSON.
* ``PUT /cars/{car_id}`` replaces an existing car (404 if unknown).
* ``DELETE /cars/{car_id}`` always answers 200.

Request bodies are decoded as JSON whatever their ``Content-Type``.
Bodies that cannot be decoded into a ``CarModel`` are rejected with 400
before a route runs, so the store is never touched for malformed input.
Routes are plain functions; FastAPI runs them on its worker threadpool.
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse

from car_inventory_api.app.api.deps import car_from_body, get_store
from car_inventory_api.app.schemas.car import CarModel
from car_inventory_api.app.services.car_store import CarStore

logger = logging.getLogger(__name__)

router = APIRouter()

# The body is decoded by ``car_from_body`` rather than a body parameter,
# so its schema is declared here for the OpenAPI document.
_CAR_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": CarModel.model_json_schema()}},
    }
}


def _json_response(content: Any) -> Response:
    """Encode ``content`` as a JSON response.

    If encoding fails the client receives a 500 with the error text as
    a plain text body.
    """
    try:
        return JSONResponse(content=jsonable_encoder(content))
    except (TypeError, ValueError) as exc:
        logger.exception("Failed to encode response")
        return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response, openapi_extra=_CAR_BODY)
def create_car(
    request: Request,
    car: CarModel = Depends(car_from_body),
    store: CarStore = Depends(get_store),
) -> Response:
    """Store a new car; the identifier is minted by the server."""
    car_id = store.insert(car)
    location = request.url_for("get_car", car_id=car_id).path
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": location})


@router.get("", response_model=List[CarModel])
def list_cars(store: CarStore = Depends(get_store)) -> Response:
    """Return every car in the store, in no particular order."""
    return _json_response(store.list())


@router.get("/{car_id}", response_model=CarModel)
def get_car(car_id: str, store: CarStore = Depends(get_store)) -> Response:
    """Retrieve a single car.

    Returns HTTP 404 if the identifier is unknown.
    """
    car = store.get(car_id)
    if car is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Car not found")
    return _json_response(car)


@router.put("/{car_id}", response_class=Response, openapi_extra=_CAR_BODY)
def update_car(
    car_id: str,
    car: CarModel = Depends(car_from_body),
    store: CarStore = Depends(get_store),
) -> Response:
    """Replace an existing car as a whole.

    Unknown identifiers answer 404 and nothing is created.
    """
    if not store.update(car_id, car):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Car not found")
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{car_id}", response_class=Response)
def delete_car(car_id: str, store: CarStore = Depends(get_store)) -> Response:
    """Delete a car.  Succeeds whether or not the car exists."""
    store.delete(car_id)
    return Response(status_code=status.HTTP_200_OK)
