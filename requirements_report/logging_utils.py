"""
Logging setup shared by the report CLI and the HTTP backend.

`setup_logging` runs once per process; module code only calls `get_logger`.
"""

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Libraries that log font caches and image decoding at DEBUG
NOISY_LOGGERS = ("matplotlib", "PIL")

_CONFIGURED = False


def resolve_level(level: Union[int, str]) -> int:
    """Accept 10 / "DEBUG" / "debug"; unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def quiet_third_party(level: int) -> None:
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure the root logger once: console always, plus `log_file` if given.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    numeric = resolve_level(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=numeric, handlers=handlers, force=True)
    quiet_third_party(numeric)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
