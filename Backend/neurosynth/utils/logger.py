# -*- coding: utf-8 -*-
"""
Logging setup

Handlers hang off the `neurosynth` namespace logger so uvicorn's own root
configuration is left alone. The first `get_logger` call installs defaults
from the environment; `configure_logging` can replace them later.
"""

import logging
import os
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

NAMESPACE = "neurosynth"
LOG_DIR = Path(os.getenv("NEUROSYNTH_LOG_DIR", "logs"))

_FORMATTER = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "%Y-%m-%d %H:%M:%S",
)

_handlers: List[logging.Handler] = []


def _env_to_file() -> bool:
    return os.getenv("NEUROSYNTH_LOG_TO_FILE", "false").strip().lower() in ("1", "true", "yes", "on")


def _daily_log_file() -> Path:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    return LOG_DIR / f"neurosynth_{date.today():%Y%m%d}.log"


def configure_logging(level: Optional[str] = None, to_file: Optional[bool] = None) -> logging.Logger:
    """
    (Re)install handlers on the namespace logger

    Args:
        level: level name; defaults to NEUROSYNTH_LOG_LEVEL or INFO
        to_file: also write to logs/neurosynth_<YYYYMMDD>.log; defaults to NEUROSYNTH_LOG_TO_FILE

    Returns:
        the `neurosynth` logger
    """
    level = level or os.getenv("NEUROSYNTH_LOG_LEVEL", "INFO")
    to_file = _env_to_file() if to_file is None else to_file
    log_level = getattr(logging, str(level).upper(), logging.INFO)

    root = logging.getLogger(NAMESPACE)
    for handler in _handlers:
        root.removeHandler(handler)
        handler.close()
    _handlers.clear()

    _handlers.append(logging.StreamHandler(sys.stdout))
    if to_file:
        _handlers.append(logging.FileHandler(_daily_log_file(), encoding="utf-8"))

    for handler in _handlers:
        handler.setFormatter(_FORMATTER)
        root.addHandler(handler)

    root.setLevel(log_level)
    root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """`neurosynth.<name>` logger; installs env defaults on first use"""
    if not _handlers:
        configure_logging()
    return logging.getLogger(f"{NAMESPACE}.{name}")
