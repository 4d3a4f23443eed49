from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from football_tcg import config


def setup_logging(log_level: str | None = None, log_dir: Path | None = None) -> None:
    """Configure logging for the match engine, API and CLI."""
    level_name = (log_level or config.log_level()).upper()
    level = getattr(logging, level_name, logging.INFO)

    # Root logger
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return  # Already configured

    root_logger.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler with rotation (5MB max, keep 3 backups)
    directory = log_dir or config.log_dir()
    directory.mkdir(parents=True, exist_ok=True)
    file_handler = logging.handlers.RotatingFileHandler(
        directory / "football_tcg.log", maxBytes=5 * 1024 * 1024, backupCount=3
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    logging.getLogger(__name__).info("Logging initialized (level=%s)", level_name)
