import logging
import os

import pytest

from app.logging_config import configure_logging
from core.config import Settings


@pytest.fixture
def root_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield root
    root.setLevel(level)
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()


def test_log_dir_gets_combined_and_error_files(tmp_path, root_handlers):
    log_dir = tmp_path / "logs"
    settings = Settings(jwt_secret="s", log_dir=str(log_dir))
    configure_logging(settings)
    configure_logging(settings)

    files = [
        h
        for h in root_handlers.handlers
        if isinstance(h, logging.FileHandler) and h.baseFilename.startswith(str(log_dir))
    ]
    assert sorted(os.path.basename(h.baseFilename) for h in files) == ["combined.log", "error.log"]

    root_handlers.setLevel(logging.INFO)
    log = logging.getLogger("safar.test")
    log.info("booked")
    log.error("mail down")
    for h in files:
        h.flush()

    combined = (tmp_path / "logs" / "combined.log").read_text()
    errors = (tmp_path / "logs" / "error.log").read_text()
    assert "booked" in combined and "mail down" in combined
    assert "booked" not in errors and "[ERROR] safar.test: mail down" in errors
