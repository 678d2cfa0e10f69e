from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture()
def mvncmp_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("mvncmp")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        if handler not in handlers:
            logger.removeHandler(handler)
