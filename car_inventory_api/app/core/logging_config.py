"""
Root logger setup for the car inventory service.

Every module logs through ``logging.getLogger(__name__)``; this module
gives those records somewhere to go.  ``create_app`` calls
``setup_logging`` with the configured level and optional log file.
When something else (uvicorn, pytest) has already attached handlers
to the root logger, the existing configuration is left alone.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send log records to stderr and, optionally, to a file.

    Parameters
    ----------
    level : str
        Level name for the root logger, any case.  Names ``logging``
        does not know resolve to ``INFO``.
    logfile : Optional[str]
        Extra destination for the same records, appended to in UTF‑8.
        Relative paths resolve against the working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
