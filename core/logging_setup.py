# core/logging_setup.py
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union


def setup_logging(level: Union[str, int] = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure application-wide logging.

    - Always logs to console (stderr)
    - Also logs to log_file when given (rotating, max ~1 MB, 3 backups)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers (useful if re-running in dev/REPL)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    # Console handler (simple readable format)
    console_handler = logging.StreamHandler()
    console_fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s")
    console_handler.setFormatter(console_fmt)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path,
            maxBytes=1_000_000,  # ~1 MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(console_fmt)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)
        root_logger.info(f"Log file: {path}")

    root_logger.info("Logging initialized")
