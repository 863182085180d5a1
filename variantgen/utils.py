from __future__ import annotations
import logging
import math
import os
from typing import Any, Optional, Union
from rich.logging import RichHandler

_logger_initialized = False

Number = Union[int, float]


def parse_log_level(raw: Optional[str], default: str = "INFO") -> str:
    name = (raw or "").strip().upper()
    if name and isinstance(logging.getLevelName(name), int):
        return name
    return default


def get_logger(name: str = "variantgen") -> logging.Logger:
    global _logger_initialized
    if not _logger_initialized:
        # config loads .env on import, so LOG_LEVEL from the file is visible here
        from .config import get_settings
        level = get_settings().log_level
        logging.basicConfig(
            level=level,
            format="%(message)s",
            datefmt="%H:%M:%S",
            handlers=[RichHandler(rich_tracebacks=True)],
        )
        _logger_initialized = True
        raw = os.getenv("LOG_LEVEL")
        if raw and raw.strip().upper() != level:
            logging.getLogger(name).warning("Unknown LOG_LEVEL %r, using %s", raw, level)
    return logging.getLogger(name)


def safe_number(value: Any, fallback: Number) -> Number:
    """Parse a numeric form input, keeping ``fallback`` for anything non-finite."""
    if isinstance(value, bool):
        return fallback
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else fallback
    text = str(value).strip() if value is not None else ""
    if not text:
        # Number("") is 0 in the admin console's inputs
        return 0
    try:
        n = float(text)
    except ValueError:
        return fallback
    if not math.isfinite(n):
        return fallback
    return int(n) if n.is_integer() else n
