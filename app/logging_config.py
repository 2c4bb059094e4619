"""
Logging setup shared by the API process.
"""
from __future__ import annotations

import logging
import os

from core.config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """
    Console logging always; combined.log and error.log as well when LOG_DIR is set.
    """
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    if not settings.log_dir:
        return

    os.makedirs(settings.log_dir, exist_ok=True)
    root = logging.getLogger()
    formatter = logging.Formatter(LOG_FORMAT)
    for filename, level in (("combined.log", logging.NOTSET), ("error.log", logging.ERROR)):
        path = os.path.join(settings.log_dir, filename)
        if any(getattr(h, "baseFilename", None) == os.path.abspath(path) for h in root.handlers):
            continue
        handler = logging.FileHandler(path)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)
