"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts on port 8000 with one example car when nothing is
configured.  Values are read when an instance is created, which lets
tests set environment variables and build a fresh ``Settings``.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


# Level names understood by both ``logging`` and uvicorn.
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Car Inventory API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  When unset only the console handler
    # is attached.
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))

    # Pre-seed the store with a single example car on startup.
    seed_example_car: bool = field(default_factory=lambda: _env_bool("SEED_EXAMPLE_CAR", "true"))

    def __post_init__(self) -> None:
        # Unknown level names fall back to INFO.
        level = self.log_level.upper()
        self.log_level = level if level in LOG_LEVELS else "INFO"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
