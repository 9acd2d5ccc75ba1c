"""
Top‑level package for the Car Inventory API.

The service itself lives in the ``app`` subpackage and can be served
with ``uvicorn car_inventory_api.app.main:app``.  A small ``requests``
based client for talking to a running instance is provided in
``car_inventory_api.client``.
"""

__all__ = []
