"""
Component tests for the car endpoints.

These tests run the real application, router and store together
through FastAPI's TestClient, without mocking.
"""
import json

from fastapi.testclient import TestClient

from car_inventory_api.app.api.endpoints import cars
from car_inventory_api.app.core.config import Settings
from car_inventory_api.app.main import create_app
from car_inventory_api.app.schemas.car import UINT64_MAX
from car_inventory_api.app.services.car_store import CarStore

NISSAN = {
    "brand": "nissan",
    "model": "almera",
    "price": 20000,
    "status": "in stock",
    "mileage": 30000,
}


def _create(client: TestClient, car: dict) -> str:
    response = client.post("/cars", json=car)
    assert response.status_code == 201
    return response.headers["location"].rsplit("/", 1)[-1]


class TestCreateCar:
    def test_create_returns_201_without_body(self, test_client: TestClient, toyota: dict):
        response = test_client.post("/cars", json=toyota)

        assert response.status_code == 201
        assert response.content == b""
        assert response.headers["location"].startswith("/cars/")

    def test_created_car_is_listed_with_seeded_car(self, test_client: TestClient, toyota: dict):
        test_client.post("/cars", json=toyota)

        response = test_client.get("/cars")

        assert response.status_code == 200
        cars_listed = response.json()
        assert len(cars_listed) == 2
        assert toyota in cars_listed
        assert NISSAN in cars_listed

    def test_location_points_at_created_car(self, test_client: TestClient, toyota: dict):
        response = test_client.post("/cars", json=toyota)

        fetched = test_client.get(response.headers["location"])

        assert fetched.status_code == 200
        assert fetched.json() == toyota

    def test_malformed_body_is_rejected_and_store_untouched(self, test_client: TestClient, store: CarStore):
        count_before = len(store)

        response = test_client.post(
            "/cars", content=b"not-json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert len(store) == count_before

    def test_missing_body_is_rejected(self, test_client: TestClient, store: CarStore):
        response = test_client.post("/cars")

        assert response.status_code == 400
        assert len(store) == 1

    def test_wrong_field_types_are_rejected(self, test_client: TestClient, toyota: dict):
        for field, value in (("price", "15000"), ("mileage", -1), ("brand", 42)):
            payload = dict(toyota, **{field: value})

            response = test_client.post("/cars", json=payload)

            assert response.status_code == 400, field

    def test_missing_fields_take_zero_values(self, test_client: TestClient):
        car_id = _create(test_client, {"brand": "lada", "unknown": "ignored"})

        response = test_client.get(f"/cars/{car_id}")

        assert response.json() == {
            "brand": "lada",
            "model": "",
            "price": 0,
            "status": "",
            "mileage": 0,
        }

    def test_status_is_free_form(self, test_client: TestClient, toyota: dict):
        car_id = _create(test_client, dict(toyota, status="in the showroom"))

        assert test_client.get(f"/cars/{car_id}").json()["status"] == "in the showroom"


class TestGetCar:
    def test_get_known_car(self, test_client: TestClient, toyota: dict):
        car_id = _create(test_client, toyota)

        response = test_client.get(f"/cars/{car_id}")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == toyota

    def test_get_unknown_car_returns_404(self, test_client: TestClient):
        response = test_client.get("/cars/unknown-id")

        assert response.status_code == 404

    def test_list_of_empty_store_is_empty_array(self):
        app = create_app(settings=Settings(seed_example_car=False), store=CarStore())
        with TestClient(app) as client:
            response = client.get("/cars")

        assert response.status_code == 200
        assert response.json() == []

    def test_encoding_failure_returns_500_with_error_text(self, test_client: TestClient, monkeypatch):
        def broken_encoder(content):
            raise TypeError("cannot encode car")

        monkeypatch.setattr(cars, "jsonable_encoder", broken_encoder)

        response = test_client.get("/cars")

        assert response.status_code == 500
        assert response.text == "cannot encode car"


class TestUpdateCar:
    def test_update_replaces_car(self, test_client: TestClient, toyota: dict):
        car_id = _create(test_client, toyota)
        replacement = {"brand": "toyota", "model": "corolla", "price": 18000, "status": "sold out", "mileage": 0}

        response = test_client.put(f"/cars/{car_id}", json=replacement)

        assert response.status_code == 200
        assert response.content == b""
        assert test_client.get(f"/cars/{car_id}").json() == replacement

    def test_update_does_not_merge_fields(self, test_client: TestClient, toyota: dict):
        car_id = _create(test_client, toyota)

        test_client.put(f"/cars/{car_id}", json={"brand": "kia"})

        assert test_client.get(f"/cars/{car_id}").json() == {
            "brand": "kia",
            "model": "",
            "price": 0,
            "status": "",
            "mileage": 0,
        }

    def test_update_unknown_car_returns_404(self, test_client: TestClient, store: CarStore, toyota: dict):
        response = test_client.put("/cars/unknown-id", json=toyota)

        assert response.status_code == 404
        assert len(store) == 1

    def test_update_with_malformed_body_returns_400(self, test_client: TestClient, toyota: dict):
        car_id = _create(test_client, toyota)

        response = test_client.put(
            f"/cars/{car_id}", content=b"{broken", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert test_client.get(f"/cars/{car_id}").json() == toyota


class TestDeleteCar:
    def test_delete_removes_car(self, test_client: TestClient, toyota: dict):
        car_id = _create(test_client, toyota)

        response = test_client.delete(f"/cars/{car_id}")

        assert response.status_code == 200
        assert test_client.get(f"/cars/{car_id}").status_code == 404

    def test_delete_twice_succeeds(self, test_client: TestClient, store: CarStore, toyota: dict):
        car_id = _create(test_client, toyota)

        assert test_client.delete(f"/cars/{car_id}").status_code == 200
        assert test_client.delete(f"/cars/{car_id}").status_code == 200
        assert len(store) == 1

    def test_delete_unknown_car_returns_200(self, test_client: TestClient):
        response = test_client.delete("/cars/unknown-id")

        assert response.status_code == 200


class TestRequestDecoding:
    def test_json_body_is_decoded_whatever_the_content_type(self, test_client: TestClient, toyota: dict):
        for content_type in ("text/plain", "application/x-www-form-urlencoded"):
            response = test_client.post(
                "/cars", content=json.dumps(toyota).encode(), headers={"Content-Type": content_type}
            )

            assert response.status_code == 201, content_type
            assert test_client.get(response.headers["location"]).json() == toyota

    def test_update_body_is_decoded_whatever_the_content_type(self, test_client: TestClient, toyota: dict):
        car_id = _create(test_client, toyota)
        replacement = dict(toyota, status="sold out")

        response = test_client.put(
            f"/cars/{car_id}", content=json.dumps(replacement).encode(), headers={"Content-Type": "text/plain"}
        )

        assert response.status_code == 200
        assert test_client.get(f"/cars/{car_id}").json() == replacement

    def test_keys_match_fields_case_insensitively(self, test_client: TestClient):
        car_id = _create(test_client, {"Brand": "bmw", "PRICE": 5, "Mileage": 7})

        assert test_client.get(f"/cars/{car_id}").json() == {
            "brand": "bmw",
            "model": "",
            "price": 5,
            "status": "",
            "mileage": 7,
        }

    def test_price_and_mileage_fit_unsigned_64_bit(self, test_client: TestClient, toyota: dict, store: CarStore):
        car_id = _create(test_client, dict(toyota, price=UINT64_MAX, mileage=UINT64_MAX))
        stored = test_client.get(f"/cars/{car_id}").json()
        assert (stored["price"], stored["mileage"]) == (UINT64_MAX, UINT64_MAX)

        count_before = len(store)
        for field in ("price", "mileage"):
            response = test_client.post("/cars", json=dict(toyota, **{field: UINT64_MAX + 1}))

            assert response.status_code == 400, field
        assert len(store) == count_before

    def test_non_object_json_is_rejected(self, test_client: TestClient, store: CarStore):
        for body in (b"null", b"[]", b'"toyota"', b"42"):
            response = test_client.post("/cars", content=body, headers={"Content-Type": "application/json"})

            assert response.status_code == 400, body
        assert len(store) == 1
