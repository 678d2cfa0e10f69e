from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

_LOGGER_NAME = "mvncmp"


@dataclass(frozen=True)
class MvncmpSettings:
    log_level: str


def load_settings() -> MvncmpSettings:
    # A `.env` found from the working directory may set MVNCMP_LOG_LEVEL; real
    # environment variables win.
    load_dotenv(find_dotenv(usecwd=True))
    return MvncmpSettings(
        log_level=(os.getenv("MVNCMP_LOG_LEVEL") or "WARNING").strip().upper(),
    )


def configure_logging(settings: MvncmpSettings | None = None) -> logging.Logger:
    settings = settings or load_settings()
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {settings.log_level!r}")

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    return logger
