"""Car Inventory API client.

A thin wrapper around the car endpoints of a running service, built on
the ``requests`` library.  Methods never raise on HTTP or network
failures; they return a tuple ``(data, error)`` where ``error`` is
``None`` on success or a dictionary with the keys ``status_code`` and
``message``.

Example::

    client = CarInventoryClient(base_url="http://localhost:8000")
    car_id, error = client.create_car({"brand": "toyota", "model": "yaris"})
    car, error = client.get_car(car_id)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class CarInventoryClient:
    """Client for the ``/cars`` endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[requests.Response], Optional[ApiError]]:
        """Perform an HTTP request against the service.

        Returns:
            A tuple ``(response, error)``.  On success ``response`` is the
            ``requests.Response`` and ``error`` is ``None``.  On failure
            ``response`` is ``None``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict) and err_json.get("detail"):
                        message = str(err_json["detail"])
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _decode(response: requests.Response) -> Tuple[Optional[Any], Optional[ApiError]]:
        try:
            return response.json(), None
        except ValueError as exc:
            logger.error("Invalid JSON in response: %s", exc)
            return None, {"status_code": response.status_code, "message": f"Invalid JSON: {exc}"}

    def create_car(self, car: Dict[str, Any]) -> Tuple[Optional[str], Optional[ApiError]]:
        """Create a car.

        Returns:
            A tuple ``(car_id, error)``.  The identifier is taken from
            the ``Location`` header of the response.
        """
        response, error = self._request("POST", "/cars", json_body=car)
        if error:
            return None, error
        location = response.headers.get("Location", "")
        car_id = location.rstrip("/").rsplit("/", 1)[-1] or None
        if car_id is None:
            logger.warning("Create response carried no Location header")
        return car_id, None

    def list_cars(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all cars.  The list is empty on failure."""
        response, error = self._request("GET", "/cars")
        if error:
            return [], error
        data, error = self._decode(response)
        if error:
            return [], error
        return data or [], None

    def get_car(self, car_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve a single car by identifier."""
        response, error = self._request("GET", f"/cars/{car_id}")
        if error:
            return None, error
        return self._decode(response)

    def update_car(self, car_id: str, car: Dict[str, Any]) -> Tuple[bool, Optional[ApiError]]:
        """Replace the car stored under ``car_id``."""
        _, error = self._request("PUT", f"/cars/{car_id}", json_body=car)
        return error is None, error

    def delete_car(self, car_id: str) -> Tuple[bool, Optional[ApiError]]:
        """Delete a car.  The service reports success for unknown ids too."""
        _, error = self._request("DELETE", f"/cars/{car_id}")
        return error is None, error
