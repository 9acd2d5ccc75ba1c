"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration and logging), ``schemas`` (pydantic
payloads), ``services`` (the in‑memory record store) and ``api``
(routers and endpoints).
"""

from .main import app, create_app  # noqa: F401
