"""Logging configuration."""

import logging
import sys

from portfolio_tracker.config.settings import get_settings

# Third-party loggers that are chatty at INFO
_QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "urllib3": logging.WARNING,
    "uvicorn": logging.INFO,
}


def setup_logging() -> None:
    """Configure root logging from settings.log_level."""
    level = getattr(logging, get_settings().log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)

    # Provider fallbacks log at WARNING; keep them visible under a quieter root
    logging.getLogger("portfolio_tracker.providers").setLevel(min(level, logging.WARNING))
