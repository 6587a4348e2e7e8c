from __future__ import annotations

import logging
import os
from typing import Optional


_CONFIGURED = False
_NOISY_LOGGERS = ("urllib3", "requests")


def setup_logging(level: Optional[str] = None, force: bool = False) -> None:
    """Configure root logging once for the transcript tools.

    Args:
        level: Optional log level name (e.g., "INFO", "DEBUG"). If omitted,
               reads LOG_LEVEL env or defaults to INFO.
        force: Reconfigure even if logging was already set up (the CLI uses
               this so --log_level wins over the import-time default).
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    log_level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        force=force,
    )
    _CONFIGURED = True


def quiet_http_loggers(level: Optional[str] = None) -> None:
    """Raise urllib3/requests loggers to WARNING (or the given level if higher).

    Only the CLI calls this; library imports leave third-party loggers alone.
    """
    log_level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)
    # urllib3 logs every pooled connection at DEBUG.
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Return a module logger with global config ensured."""
    setup_logging()
    return logging.getLogger(name)
