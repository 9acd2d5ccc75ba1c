"""
In‑memory record store for car listings.

``CarStore`` maps opaque identifiers (UUID4 strings minted on insert)
to ``CarModel`` records.  Every operation, single‑record reads
included, holds one exclusive lock for its whole duration, so requests
served on different worker threads never observe a half‑applied
change.

Records are copied on the way in and on the way out; callers never
hold a reference to an object that lives inside the store.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Dict, List, Optional

from car_inventory_api.app.schemas.car import CarModel, CarStatus

logger = logging.getLogger(__name__)


class CarStore:
    """Thread‑safe mapping from car identifier to car record."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cars: Dict[str, CarModel] = {}

    def insert(self, car: CarModel) -> str:
        """Store ``car`` under a freshly minted identifier and return it."""
        car_id = str(uuid.uuid4())
        with self._lock:
            self._cars[car_id] = car.model_copy()
        logger.info("Created car %s", car_id)
        return car_id

    def get(self, car_id: str) -> Optional[CarModel]:
        """Return a copy of the car stored under ``car_id`` or ``None``."""
        with self._lock:
            car = self._cars.get(car_id)
            if car is None:
                logger.debug("Car %s not found", car_id)
                return None
            return car.model_copy()

    def list(self) -> List[CarModel]:
        """Return a snapshot of all stored cars.

        The order of the returned list is unspecified.
        """
        with self._lock:
            return [car.model_copy() for car in self._cars.values()]

    def update(self, car_id: str, car: CarModel) -> bool:
        """Replace the car stored under ``car_id``.

        The record is replaced as a whole; fields are never merged.
        Returns ``False`` without creating anything if ``car_id`` is
        unknown.
        """
        with self._lock:
            if car_id not in self._cars:
                logger.debug("Car %s not found, nothing to update", car_id)
                return False
            self._cars[car_id] = car.model_copy()
        logger.info("Updated car %s", car_id)
        return True

    def delete(self, car_id: str) -> bool:
        """Remove the car stored under ``car_id``.

        Deleting an unknown identifier is a no‑op; the call always
        reports success.
        """
        with self._lock:
            removed = self._cars.pop(car_id, None)
        if removed is not None:
            logger.info("Deleted car %s", car_id)
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._cars)


def example_car() -> CarModel:
    """Return the listing the store is seeded with on startup."""
    return CarModel(
        brand="nissan",
        model="almera",
        price=20000,
        status=CarStatus.IN_STOCK.value,
        mileage=30000,
    )
