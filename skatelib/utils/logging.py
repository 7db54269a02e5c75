# skatelib/utils/logging.py
"""
Logging helpers

Intent
- One place to configure stdlib logging for scripts / batch entrypoints.
- Library modules only call get_logger(__name__); they never configure handlers.

Notes
- configure_logging() replaces handlers on the root logger, so calling it twice
  (e.g. from tests) does not duplicate output.
- An optional log file gets the same format as the console.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure the root logger with a console handler (+ optional file handler).

    Raises:
      ValueError: if `level` is not a known logging level name.
    """
    lvl = logging.getLevelName(str(level).upper())
    if not isinstance(lvl, int):
        raise ValueError(f"Unknown log level: {level!r}")

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=lvl, format=LOG_FORMAT, datefmt=DATE_FORMAT, handlers=handlers, force=True)


def configure_logging_from_params(
    params: Any,
    *,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure logging from a ParametersConfig (run.log_level / run.log_file).

    Explicit `level` / `log_file` arguments win over the config values.
    """
    run = getattr(params, "run", None)
    configure_logging(
        level=level or getattr(run, "log_level", "INFO"),
        log_file=log_file or getattr(run, "log_file", None),
    )


__all__ = ["get_logger", "configure_logging", "configure_logging_from_params"]
