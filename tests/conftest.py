"""
Pytest configuration for the Car Inventory API.

Provides fixtures for:
- A fresh car store per test
- An application bound to that store (seeded with the example car)
- A FastAPI TestClient for component tests
"""

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from car_inventory_api.app.core.config import Settings
from car_inventory_api.app.main import create_app
from car_inventory_api.app.services.car_store import CarStore


@pytest.fixture
def store() -> CarStore:
    """Empty store, isolated per test."""
    return CarStore()


@pytest.fixture
def app(store: CarStore) -> FastAPI:
    """Application seeded with the example car."""
    return create_app(settings=Settings(seed_example_car=True), store=store)


@pytest.fixture
def test_client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as client:
        yield client


@pytest.fixture
def toyota() -> dict:
    return {
        "brand": "toyota",
        "model": "yaris",
        "price": 15000,
        "status": "in stock",
        "mileage": 5000,
    }
